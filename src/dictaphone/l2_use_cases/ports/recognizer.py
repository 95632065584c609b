"""Port: speech recognizer stream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol


@dataclass(frozen=True)
class RecognizerEvent:
    """One observation of the recognizer at a session offset (seconds).

    ``text`` is the cumulative transcript; ``None`` means unchanged.
    ``listening`` is ``None`` when the event does not change it.
    """

    at: float
    text: str | None = None
    listening: bool | None = None


class RecognizerSource(Protocol):
    """Abstract source of cumulative transcript updates."""

    @property
    def source_language(self) -> str | None:
        """Locale the recognizer was started with, if known."""
        ...

    @property
    def stop_at(self) -> float:
        """Session offset at which recording stops."""
        ...

    def events(self) -> Iterable[RecognizerEvent]:
        """Recognizer updates in non-decreasing ``at`` order."""
        ...
