"""Exceptions raised by the Reverse Words API handlers."""


class MalformedBodyError(Exception):
    """Request body is present but is not a usable JSON object."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Malformed request body: {detail}")
