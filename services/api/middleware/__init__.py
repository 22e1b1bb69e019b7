"""Middleware for the Reverse Words API."""

from services.api.middleware.logging import log_requests

__all__ = ["log_requests"]
