"""Gateway: offline mock translator — implements Translator port without a backend.

Tags text with the target language so exports can be exercised end to end.
"""

from __future__ import annotations

import asyncio
import random

_MOCK_TAGS: dict[str, dict[str, str]] = {
    'en': {'es': 'ES', 'fr': 'FR', 'hi': 'HI', 'gu': 'GU'},
    'es': {'en': 'EN', 'fr': 'FR'},
}


class MockTranslator:
    """Deterministic stand-in translator with an optional simulated latency."""

    def __init__(self, min_delay: float = 0.0, max_delay: float = 0.0) -> None:
        self._min_delay = min_delay
        self._max_delay = max(max_delay, min_delay)

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        if not text or not text.strip():
            return ''
        if self._max_delay > 0:
            await asyncio.sleep(random.uniform(self._min_delay, self._max_delay))  # noqa: S311 -- simulated latency

        base = source_language.split('-')[0].lower()
        tag = _MOCK_TAGS.get(base, {}).get(target_language)
        if tag is None:
            return f'[Translated to {target_language}: {text}]'
        return f'[{tag}: {text}]'
