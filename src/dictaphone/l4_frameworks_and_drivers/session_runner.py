"""Session runner — drives the controller from a recognizer source and a ticker."""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field

from dictaphone.l1_entities.export_format import ExportFormat
from dictaphone.l1_entities.segment import Segment
from dictaphone.l2_use_cases.export_use_case import ExportResult
from dictaphone.l2_use_cases.ports.recognizer import RecognizerEvent, RecognizerSource
from dictaphone.l3_interface_adapters.controllers.session_controller import SessionController, TranslationResult

log = logging.getLogger('dph.runner')


@dataclass
class RunSummary:
    segments: list[Segment] = field(default_factory=list)
    translation: TranslationResult | None = None
    exports: list[ExportResult] = field(default_factory=list)


class SessionRunner:
    """Replays recognizer events against the controller, one tick per second.

    ``tick_interval`` is the real time slept between ticks; 0 replays as
    fast as possible.
    """

    def __init__(
        self,
        controller: SessionController,
        source: RecognizerSource,
        tick_interval: float = 0.0,
        on_segment: Callable[[Segment], None] | None = None,
    ) -> None:
        self._controller = controller
        self._source = source
        self._tick_interval = tick_interval
        self._on_segment = on_segment

    async def record(self) -> list[Segment]:
        """Run one recording session from start to the source's stop time."""
        ctrl = self._controller
        ctrl.start_session(self._source.source_language)

        pending = list(self._source.events())
        stop_at = self._source.stop_at
        last_second = math.floor(stop_at)
        idx = 0
        for second in range(last_second + 1):
            if second > 0:
                if self._tick_interval > 0:
                    await asyncio.sleep(self._tick_interval)
                self._emit(ctrl.on_tick())
            while idx < len(pending) and pending[idx].at <= second:
                self._emit(self._deliver(pending[idx]))
                idx += 1

        if stop_at > last_second:
            # partial final second: jump the clock to the exact stop time
            self._emit(ctrl.on_clock(stop_at))
            for event in pending[idx:]:
                self._emit(self._deliver(event))

        self._emit(ctrl.stop_session())
        log.info('Recording finished: %d segments', len(ctrl.segments))
        return list(ctrl.segments)

    def _deliver(self, event: RecognizerEvent) -> Segment | None:
        if event.text is not None:
            return self._controller.on_transcript(event.text, event.listening)
        if event.listening is not None:
            return self._controller.on_listening(event.listening)
        return None

    def _emit(self, segment: Segment | None) -> None:
        if segment is not None and self._on_segment is not None:
            self._on_segment(segment)

    async def run(
        self,
        formats: list[ExportFormat],
        *,
        translate: bool = False,
        include_translated: bool = True,
    ) -> RunSummary:
        """Record, optionally translate, then export every requested format."""
        summary = RunSummary()
        summary.segments = await self.record()

        if translate:
            summary.translation = await self._controller.translate_all()
            log.info('Translation: %s', summary.translation.message)

        for fmt in formats:
            summary.exports.append(self._controller.export(fmt))
            if include_translated and self._controller.state.has_translated_content:
                summary.exports.append(self._controller.export(fmt, translated=True))
        summary.segments = list(self._controller.segments)
        return summary
