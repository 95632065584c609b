"""Gateway: YAML settings reader — raw user settings for the CLI.

Only reads and merges. Defaults and validation are applied in
``l4_frameworks_and_drivers.infra_config`` so the same dict feeds both
``AppConfig`` and the provider settings.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from dictaphone.l1_entities.errors import ConfigFormatError
from dictaphone.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS

log = logging.getLogger('dph.config')


class YamlConfigLoader:
    """Finds the settings file and returns its contents merged with CLI overrides."""

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        self._search_paths = list(DEFAULT_CONFIG_PATHS if search_paths is None else search_paths)

    def resolve(self, config_path: str | None = None) -> Path | None:
        """An explicit path must exist; otherwise the first search path present wins."""
        if config_path is not None:
            path = Path(config_path)
            if not path.is_file():
                raise FileNotFoundError(f'Config file not found: {path}')
            return path
        return next((p for p in self._search_paths if p.is_file()), None)

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        path = self.resolve(config_path)
        data = _read_settings(path) if path is not None else {}
        if overrides:
            deep_merge(data, overrides)
        log.debug('Settings from %s, overrides %s', path or '<defaults>', sorted(overrides or {}))
        return data


def _read_settings(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8'))
    except yaml.YAMLError as e:
        raise ConfigFormatError(f'{path}: invalid YAML: {e}') from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigFormatError(f'{path}: expected a mapping at top level, got {type(data).__name__}')
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
