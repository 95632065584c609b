"""Segment entity — one finalized, time-bounded span of transcript text."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field, field_validator, model_validator


def _new_segment_id() -> str:
    return uuid.uuid4().hex


class Segment(BaseModel):
    """A finalized span of original (and optionally translated) text."""

    id: str = Field(default_factory=_new_segment_id)
    start_time: float = Field(ge=0, description='Seconds from session start')
    end_time: float = Field(ge=0, description='Seconds from session start')
    original_text: str
    translated_text: str = ''

    @field_validator('original_text')
    @classmethod
    def _non_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('original_text must not be blank')
        return value

    @model_validator(mode='after')
    def _ordered_times(self) -> Segment:
        if self.end_time < self.start_time:
            raise ValueError(f'end_time {self.end_time} precedes start_time {self.start_time}')
        return self

    @property
    def is_translated(self) -> bool:
        return bool(self.translated_text.strip())

    def display_text(self, *, use_translated: bool = False) -> str:
        """Text to show or export, falling back to the original when untranslated."""
        if use_translated and self.is_translated:
            return self.translated_text
        return self.original_text
