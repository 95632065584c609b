"""Gateway: LLM-backed translator — implements Translator port over an LLMClient."""

from __future__ import annotations

import logging

from dictaphone.l1_entities.errors import TranslationFailedError
from dictaphone.l2_use_cases.ports.llm_client import LLMClient
from dictaphone.l2_use_cases.utils.prompt_builder import TRANSLATION_SYSTEM_PROMPT, build_translation_prompt

log = logging.getLogger('dph.llm')


class LLMTranslator:
    """Translates one piece of text per LLM call."""

    def __init__(self, llm_client: LLMClient, model: str) -> None:
        self._llm = llm_client
        self._model = model

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        if not text.strip():
            return ''
        prompt = build_translation_prompt(text, source_language, target_language)
        raw = await self._llm.chat_single(self._model, prompt, system=TRANSLATION_SYSTEM_PROMPT)
        log.debug('LLM translation (%d chars): %s', len(raw), raw[:200])
        if not raw.strip():
            raise TranslationFailedError(f'Empty translation from {self._model}')
        return raw.strip()
