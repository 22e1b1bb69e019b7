"""Pydantic schemas for the Reverse Words API.

Re-exports all schemas from submodules so imports like
`from services.api.schemas import ReverseWordRequest` work.
"""

from services.api.schemas.words import ReverseWordRequest, ReverseWordResponse

__all__ = [
    "ReverseWordRequest",
    "ReverseWordResponse",
]
