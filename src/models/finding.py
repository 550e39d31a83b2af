"""Immutable record for a single misspelled word occurrence.

Findings are compared and hashed by ``(word, line_number)`` so repeated
occurrences of the same misspelling on one line collapse to a single entry
while the same word on another line stays distinct.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Finding(BaseModel):
    """One misspelled word, kept in its original case, and the line it is on."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    word: str
    line_number: int = Field(ge=0)

    @field_validator("word")
    def _require_word(cls, value: str) -> str:
        if not value:
            raise ValueError("word must not be empty")
        return value

    def __str__(self) -> str:
        return f"{self.line_number}: {self.word}"
