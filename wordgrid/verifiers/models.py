"""Data models for move verification."""

from typing import Optional
from pydantic import BaseModel, Field


class ValidationError(BaseModel):
    """A single rejected user input."""
    code: str
    message: str
    index: Optional[int] = Field(None, ge=0)
