"""Pure functions for diffing a growing transcript against a consumed prefix."""

from __future__ import annotations


def unconsumed(cumulative_text: str, consumed_length: int) -> str:
    """Return the trimmed text after *consumed_length*.

    A transcript shorter than the consumed prefix breaks the recognizer
    contract; it is reported as no new text.
    """
    if consumed_length < 0:
        consumed_length = 0
    if len(cumulative_text) < consumed_length:
        return ''
    return cumulative_text[consumed_length:].strip()


def has_shrunk(cumulative_text: str, consumed_length: int) -> bool:
    return len(cumulative_text) < consumed_length
