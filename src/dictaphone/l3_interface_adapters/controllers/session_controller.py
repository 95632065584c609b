"""SessionController — owns the recording session and routes every external event."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from dictaphone.l1_entities.config import AppConfig
from dictaphone.l1_entities.export_format import ExportFormat
from dictaphone.l1_entities.segment import Segment
from dictaphone.l1_entities.session_state import SessionState
from dictaphone.l2_use_cases.export_use_case import ExportResult, ExportTranscriptUseCase
from dictaphone.l2_use_cases.ports.persistence import ExportPersistence
from dictaphone.l2_use_cases.ports.translator import Translator
from dictaphone.l2_use_cases.segmentation_use_case import SegmentationEngine
from dictaphone.l2_use_cases.translate_segments_use_case import TranslateSegmentsUseCase

log = logging.getLogger('dph.controller')


@dataclass(frozen=True)
class TranslationResult:
    """What a translate-all request did: applied, discarded as stale, or nothing to do."""

    applied: bool
    translated: int = 0
    failed: int = 0
    message: str = ''


class SessionController:
    """Central orchestrator between drivers (ticker, recognizer, CLI) and use cases.

    All segment-list mutation happens here, one event at a time.
    """

    def __init__(
        self,
        config: AppConfig,
        translator: Translator,
        persistence: ExportPersistence | None = None,
    ) -> None:
        self._config = config
        self._engine = SegmentationEngine(window=config.segmentation.window)
        self._translate_uc = TranslateSegmentsUseCase(translator, max_concurrency=config.translation.max_concurrency)
        self._export_uc = ExportTranscriptUseCase(persistence)

        self.source_language = config.translation.source_language
        self.target_language = config.translation.target_language

    @property
    def state(self) -> SessionState:
        return self._engine.state

    @property
    def segments(self) -> list[Segment]:
        return self._engine.state.segments

    @property
    def recording(self) -> bool:
        return self._engine.active

    # --- recording lifecycle ---

    def start_session(self, source_language: str | None = None) -> None:
        if self._engine.active:
            self.stop_session()
        if source_language:
            self.source_language = source_language
        self._engine.start()
        log.info('Recording in %s, chunking every %ss', self.source_language, self._engine.window)

    def on_tick(self) -> Segment | None:
        return self._engine.on_tick()

    def on_clock(self, elapsed: float) -> Segment | None:
        return self._engine.on_clock(elapsed)

    def on_transcript(self, text: str, listening: bool | None = None) -> Segment | None:
        return self._engine.on_transcript(text, listening)

    def on_listening(self, listening: bool) -> Segment | None:
        return self._engine.set_listening(listening)

    def stop_session(self) -> Segment | None:
        return self._engine.stop()

    def change_source_language(self, source_language: str) -> Segment | None:
        """Switch recognizer language; an active session is stopped cleanly first."""
        segment = None
        if self._engine.active:
            segment = self.stop_session()
            log.warning('Source language changed to %s; recording stopped', source_language)
        self.source_language = source_language
        return segment

    def reset(self) -> None:
        self._engine.reset()
        self._translate_uc.reset()

    # --- translation ---

    async def translate_all(self) -> TranslationResult:
        snapshot = list(self.segments)
        if not snapshot:
            return TranslationResult(applied=False, message='No text to translate.')

        batch = await self._translate_uc.execute(snapshot, self.source_language, self.target_language)
        merged = self._translate_uc.apply(batch, self.segments)
        if merged is None:
            return TranslationResult(applied=False, message='Superseded by a newer translation.')

        self._engine.state.segments = merged
        failed = len(batch.failed_ids)
        message = 'Translation complete!' if not failed else f'Translation finished with {failed} failed segment(s).'
        return TranslationResult(applied=True, translated=batch.translated_count, failed=failed, message=message)

    # --- export ---

    def export(self, fmt: ExportFormat, *, translated: bool = False, save: bool = True) -> ExportResult:
        return self._export_uc.execute(self.segments, fmt, use_translated=translated, save=save)
