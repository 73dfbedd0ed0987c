"""
Pydantic models for flashcard content and the persisted card record.

`CardContent` is what a user types when adding a card. `CardRecord` is the
flat, camelCase record exchanged with storage and JSON exports.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CardContent(BaseModel):
    """Front/back payload of a card. Never inspected by the scheduler."""
    model_config = ConfigDict(str_strip_whitespace=True)

    english: str = Field(..., min_length=1, description="Word or phrase being learned")
    vietnamese: str = Field(..., min_length=1, description="Translation")
    example: Optional[str] = Field(None, description="Example sentence")
    phonetic: Optional[str] = Field(None, description="Pronunciation hint, e.g. IPA")

    @field_validator("example", "phonetic")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


class CardRecord(BaseModel):
    """
    Persisted card shape.

    Unknown keys are kept (extra="allow") so opaque fields written by other
    collaborators survive a load/save round trip.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    english: str
    vietnamese: str
    example: Optional[str] = None
    phonetic: Optional[str] = None
    created_at: int = Field(..., alias="createdAt")

    # Scheduling state
    status: str
    interval: float = 0.0
    step_index: int = Field(0, alias="stepIndex")
    next_review: int = Field(..., alias="nextReview")
    lapses: int = 0
    reps: int = 0
    last_review: Optional[int] = Field(None, alias="lastReview")
