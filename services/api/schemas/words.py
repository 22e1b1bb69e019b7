"""Reverse-word Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class ReverseWordRequest(BaseModel):
    """Reverse word request schema."""

    word: Optional[str] = Field(None, description="Word to reverse")


class ReverseWordResponse(BaseModel):
    """Reverse word response schema."""

    reverse_word: Optional[str] = Field(None, description="Reversed word")
