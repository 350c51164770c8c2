"""
Data models for the enhancement form.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from prompt_architect.constants import (
    COPIED_LABEL,
    COPY_LABEL,
    SUBMIT_LABEL,
    SUBMIT_LOADING_LABEL,
)


class Phase(str, Enum):
    """Display phase derived from a FormState."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class EnhancementRequest(BaseModel):
    """Model representing the user's input for one enhancement call."""

    idea_text: str = Field(..., description="The rough idea to turn into a specification")
    context_text: str = Field("", description="Optional project name or context")

    @field_validator("idea_text")
    @classmethod
    def idea_must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("idea_text must not be empty")
        return value

    @property
    def composed_prompt(self) -> str:
        """Prompt sent to the model: a labeled context block and task block, or the bare idea."""
        if self.context_text.strip():
            return f"Project Name/Context: {self.context_text}\n\nTask: {self.idea_text}"
        return self.idea_text


class FormState(BaseModel):
    """Model representing everything the form displays."""

    model_config = ConfigDict(frozen=True)

    idea_text: str = ""
    context_text: str = ""
    is_loading: bool = False
    error_message: Optional[str] = None
    result_text: Optional[str] = None
    is_copied: bool = False

    @property
    def phase(self) -> Phase:
        if self.is_loading:
            return Phase.LOADING
        if self.error_message is not None:
            return Phase.FAILED
        if self.result_text is not None:
            return Phase.SUCCESS
        return Phase.IDLE

    @property
    def can_submit(self) -> bool:
        return bool(self.idea_text.strip()) and not self.is_loading

    @property
    def submit_label(self) -> str:
        return SUBMIT_LOADING_LABEL if self.is_loading else SUBMIT_LABEL

    @property
    def copy_label(self) -> str:
        return COPIED_LABEL if self.is_copied else COPY_LABEL

    def to_request(self) -> EnhancementRequest:
        return EnhancementRequest(idea_text=self.idea_text, context_text=self.context_text)
