"""Recording session state entity."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dictaphone.l1_entities.segment import Segment


class SessionState(BaseModel):
    """Mutable context for one recording pass.

    Only the segmentation engine writes ``consumed_length``,
    ``open_span_start`` and ``segments``; everything else reads.
    """

    transcript: str = ''
    consumed_length: int = 0
    open_span_start: float = 0.0
    elapsed_seconds: float = 0.0
    segments: list[Segment] = Field(default_factory=list)
    active: bool = False
    listening: bool = False

    @property
    def pending_text(self) -> str:
        """Interim text not yet turned into a segment."""
        if len(self.transcript) < self.consumed_length:
            return ''
        return self.transcript[self.consumed_length :].strip()

    @property
    def has_translated_content(self) -> bool:
        return any(seg.is_translated for seg in self.segments)
