"""Use case: render segments in a timed-text format and hand them to persistence."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from dictaphone.l1_entities.export_format import ExportFormat
from dictaphone.l1_entities.segment import Segment
from dictaphone.l2_use_cases.ports.persistence import ExportPersistence
from dictaphone.l2_use_cases.utils.timed_text import exportable, render

log = logging.getLogger('dph.export')


@dataclass(frozen=True)
class ExportResult:
    """Rendered document plus where (if anywhere) it was written."""

    fmt: ExportFormat
    content: str
    cue_count: int
    translated: bool = False
    path: Path | None = None

    @property
    def empty(self) -> bool:
        return self.cue_count == 0

    @property
    def filename(self) -> str:
        return self.fmt.filename(translated=self.translated)


class ExportTranscriptUseCase:
    """Renders a segment list; persists it when a gateway is configured."""

    def __init__(self, persistence: ExportPersistence | None = None) -> None:
        self._persistence = persistence

    def execute(
        self,
        segments: list[Segment],
        fmt: ExportFormat,
        *,
        use_translated: bool = False,
        save: bool = True,
    ) -> ExportResult:
        content = render(segments, fmt, use_translated=use_translated)
        cue_count = len(exportable(segments, use_translated=use_translated))
        if cue_count == 0:
            log.info('Nothing to export as %s', fmt.value)

        path = None
        if save and self._persistence is not None:
            path = self._persistence.save_export(fmt, content, translated=use_translated)
            log.info('Exported %d cues to %s', cue_count, path)

        return ExportResult(fmt=fmt, content=content, cue_count=cue_count, translated=use_translated, path=path)
