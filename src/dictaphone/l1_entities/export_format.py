"""L1 entity: timed-text export formats."""

from __future__ import annotations

import enum


class ExportFormat(enum.Enum):
    TXT = 'txt'
    SRT = 'srt'
    VTT = 'vtt'

    @property
    def extension(self) -> str:
        return f'.{self.value}'

    @property
    def media_type(self) -> str:
        return 'text/vtt' if self is ExportFormat.VTT else 'text/plain'

    def filename(self, *, translated: bool = False) -> str:
        """Conventional download name, e.g. ``translated_transcript.srt``."""
        prefix = 'translated' if translated else 'original'
        return f'{prefix}_transcript{self.extension}'
