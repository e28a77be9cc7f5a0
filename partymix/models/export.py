"""Recipe export result model."""

from typing import Optional

from pydantic import BaseModel, Field


class CopyResult(BaseModel):
    """Outcome of copying a recipe summary to the clipboard."""

    success: bool
    text: str = Field(default="", description="The text that was (or should have been) copied")
    message: str = Field(..., description="User-facing notification")
    error: Optional[str] = Field(default=None, description="Underlying clipboard error, if any")
