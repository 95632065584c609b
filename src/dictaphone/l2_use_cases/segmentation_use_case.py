"""Use case: windowed segmentation of a growing transcript into timed segments."""

from __future__ import annotations

import logging

from dictaphone.l1_entities.segment import Segment
from dictaphone.l1_entities.session_state import SessionState
from dictaphone.l2_use_cases.time_base import TimeBase
from dictaphone.l2_use_cases.utils.transcript_differ import has_shrunk, unconsumed

log = logging.getLogger('dph.engine')

DEFAULT_WINDOW = 10.0


class SegmentationEngine:
    """Turns cumulative transcript updates and clock ticks into Segments.

    Ticks and transcript updates both funnel into ``step()``, a single
    idempotent transition: with no new text and no time advance it never
    emits. Does NO I/O and never blocks.
    """

    def __init__(self, window: float = DEFAULT_WINDOW, time_base: TimeBase | None = None) -> None:
        if window <= 0:
            raise ValueError(f'window must be positive, got {window}')
        self._window = window
        self._time = time_base or TimeBase()
        self.state = SessionState()

    @property
    def window(self) -> float:
        return self._window

    @property
    def active(self) -> bool:
        return self.state.active

    def start(self) -> None:
        """Begin a fresh session (Idle → Active)."""
        self.state = SessionState(active=True, listening=True)
        self._time.start()
        log.info('Session started (window=%ss)', self._window)

    def on_tick(self) -> Segment | None:
        if not self.state.active:
            return None
        self._time.tick()
        self.state.elapsed_seconds = self._time.current()
        return self.step()

    def on_clock(self, elapsed: float) -> Segment | None:
        """Tick variant for drivers that report absolute elapsed time."""
        if not self.state.active:
            return None
        self._time.sync(elapsed)
        self.state.elapsed_seconds = self._time.current()
        return self.step()

    def on_transcript(self, text: str, listening: bool | None = None) -> Segment | None:
        if not self.state.active:
            return None
        if has_shrunk(text, self.state.consumed_length):
            log.warning(
                'Transcript shrank below consumed prefix (%d < %d); treating as no new text',
                len(text),
                self.state.consumed_length,
            )
        self.state.transcript = text
        if listening is not None:
            self.state.listening = listening
        return self.step()

    def set_listening(self, listening: bool) -> Segment | None:
        if not self.state.active:
            return None
        self.state.listening = listening
        return self.step()

    def step(self) -> Segment | None:
        """Close the open span if its window has elapsed and it holds new text."""
        state = self.state
        if not state.active or not state.listening:
            return None
        if state.elapsed_seconds < state.open_span_start + self._window:
            return None
        return self.finalize()

    def finalize(self, force_end: float | None = None) -> Segment | None:
        """Emit a segment for any unconsumed text. No-op when there is none."""
        state = self.state
        text = unconsumed(state.transcript, state.consumed_length)
        if not text:
            return None

        end = state.elapsed_seconds if force_end is None else force_end
        end = max(end, state.open_span_start)
        segment = Segment(start_time=state.open_span_start, end_time=end, original_text=text)
        state.segments.append(segment)
        state.consumed_length = len(state.transcript)
        state.open_span_start = end
        log.debug(
            'Segment #%d [%.3f-%.3f] %d chars',
            len(state.segments),
            segment.start_time,
            segment.end_time,
            len(text),
        )
        return segment

    def stop(self) -> Segment | None:
        """Force-finalize trailing text and stop accepting ticks."""
        if not self.state.active:
            return None
        segment = self.finalize(force_end=self._time.current())
        self._time.stop()
        self.state.active = False
        self.state.listening = False
        log.info('Session stopped at %.3fs with %d segments', self.state.elapsed_seconds, len(self.state.segments))
        return segment

    def reset(self) -> None:
        """Discard the session entirely (→ Idle)."""
        self._time.reset()
        self.state = SessionState()
        log.info('Session reset')
