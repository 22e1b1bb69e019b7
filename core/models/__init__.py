"""Core models module."""

from core.models.common import ErrorResponse

__all__ = ["ErrorResponse"]
