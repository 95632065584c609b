"""Use case helper: elapsed-seconds counter driven by an external ticker."""

from __future__ import annotations

import logging

log = logging.getLogger('dph.engine')


class TimeBase:
    """Monotonic elapsed-time counter.

    Advances only between ``start()`` and ``stop()``. Drift against the
    wall clock is fine; the engine only relies on monotonicity.
    """

    def __init__(self, step: float = 1.0) -> None:
        self._step = step
        self._elapsed: float = 0.0
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def start(self) -> None:
        self._elapsed = 0.0
        self._active = True

    def stop(self) -> None:
        self._active = False

    def reset(self) -> None:
        self._elapsed = 0.0
        self._active = False

    def current(self) -> float:
        return self._elapsed

    def tick(self, step: float | None = None) -> bool:
        """Advance by one step while active. Returns True if time moved."""
        if not self._active:
            return False
        amount = self._step if step is None else step
        if amount <= 0:
            log.warning('Ignoring non-positive tick step %s', amount)
            return False
        self._elapsed += amount
        return True

    def sync(self, elapsed: float) -> bool:
        """Jump to an absolute reading. Backwards readings are ignored."""
        if not self._active:
            return False
        if elapsed < self._elapsed:
            log.warning('Ignoring clock reading %.3f behind current %.3f', elapsed, self._elapsed)
            return False
        moved = elapsed > self._elapsed
        self._elapsed = elapsed
        return moved
