"""Pure functions for building LLM translation prompts."""

from __future__ import annotations

TRANSLATION_SYSTEM_PROMPT = (
    'You are a subtitle translator. Translate the text you are given and reply with the '
    'translation only: no quotes, no notes, no explanations.'
)


def build_translation_prompt(text: str, source_language: str, target_language: str) -> str:
    """Build the user prompt for translating one segment."""
    return f'Translate from {source_language} to {target_language}:\n\n{text.strip()}'
