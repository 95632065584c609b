"""Gateway: YAML recognizer script — implements RecognizerSource for replays.

A script lists cumulative transcript observations at session offsets::

    source_language: en-US
    events:
      - at: 4
        text: hello world
      - at: 12
        text: hello world this is a test
    stop_at: 15
"""

from __future__ import annotations

from pathlib import Path

import yaml

from dictaphone.l1_entities.errors import ScriptFormatError
from dictaphone.l2_use_cases.ports.recognizer import RecognizerEvent


class YamlScriptSource:
    """Replays recognizer output recorded in a YAML file."""

    def __init__(self, events: list[RecognizerEvent], stop_at: float, source_language: str | None = None) -> None:
        self._events = sorted(events, key=lambda e: e.at)
        self._stop_at = stop_at
        self._source_language = source_language

    @classmethod
    def from_path(cls, path: Path) -> YamlScriptSource:
        if not path.exists():
            raise FileNotFoundError(f'Script file not found: {path}')
        try:
            data = yaml.safe_load(path.read_text(encoding='utf-8'))
        except yaml.YAMLError as e:
            raise ScriptFormatError(f'{path}: invalid YAML: {e}') from e
        return cls.from_dict(data, origin=str(path))

    @classmethod
    def from_dict(cls, data: object, origin: str = '<script>') -> YamlScriptSource:
        if not isinstance(data, dict):
            raise ScriptFormatError(f'{origin}: expected a mapping at top level')
        raw_events = data.get('events') or []
        if not isinstance(raw_events, list):
            raise ScriptFormatError(f'{origin}: "events" must be a list')

        events = [_parse_event(item, idx, origin) for idx, item in enumerate(raw_events)]
        last_at = max((e.at for e in events), default=0.0)
        stop_at = data.get('stop_at', last_at)
        if not isinstance(stop_at, (int, float)) or stop_at < last_at:
            raise ScriptFormatError(f'{origin}: "stop_at" must be a number >= the last event time ({last_at})')

        language = data.get('source_language')
        return cls(events, float(stop_at), str(language) if language else None)

    @property
    def source_language(self) -> str | None:
        return self._source_language

    @property
    def stop_at(self) -> float:
        return self._stop_at

    def events(self) -> list[RecognizerEvent]:
        return list(self._events)


def _parse_event(item: object, idx: int, origin: str) -> RecognizerEvent:
    if not isinstance(item, dict) or 'at' not in item:
        raise ScriptFormatError(f'{origin}: event #{idx + 1} needs an "at" offset')
    at = item['at']
    if not isinstance(at, (int, float)) or at < 0:
        raise ScriptFormatError(f'{origin}: event #{idx + 1} has invalid "at": {at!r}')
    text = item.get('text')
    listening = item.get('listening')
    if text is None and listening is None:
        raise ScriptFormatError(f'{origin}: event #{idx + 1} sets neither "text" nor "listening"')
    if listening is not None and not isinstance(listening, bool):
        raise ScriptFormatError(f'{origin}: event #{idx + 1} "listening" must be true or false')
    return RecognizerEvent(at=float(at), text=None if text is None else str(text), listening=listening)
