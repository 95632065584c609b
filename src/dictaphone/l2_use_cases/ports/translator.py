"""Port: text translation backend."""

from __future__ import annotations

from typing import Protocol


class Translator(Protocol):
    """Abstract translator. May fail per call; callers isolate failures."""

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        """Translate *text*. Returns the translated text."""
        ...
