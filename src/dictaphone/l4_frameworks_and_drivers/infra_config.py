"""Infrastructure provider configs — lives in L4, not domain."""

from __future__ import annotations

import copy
from typing import Literal

from pydantic import BaseModel, Field

from dictaphone.l1_entities.config import AppConfig
from dictaphone.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'segmentation': {
        'window': 10.0,
        'tick_interval': 1.0,
    },
    'translation': {
        'model': 'gpt-oss:20b-cloud',
        'source_language': 'en-US',
        'target_language': 'es',
        'max_concurrency': 4,
    },
    'export': {
        'formats': ['txt', 'srt', 'vtt'],
        'include_translated': True,
    },
    'output': {
        'directory': './output',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


class OllamaProviderConfig(BaseModel):
    host: str = 'http://localhost:11434'


class OpenAIProviderConfig(BaseModel):
    api_key: str | None = None  # None → SDK reads OPENAI_API_KEY env
    base_url: str = 'https://api.openai.com/v1'


class MockProviderConfig(BaseModel):
    min_delay: float = 0.0
    max_delay: float = 0.0


class InfraConfig(BaseModel):
    """Groups all provider-specific settings outside the domain layer."""

    translator_provider: Literal['mock', 'ollama', 'openai'] = 'mock'
    mock: MockProviderConfig = Field(default_factory=MockProviderConfig)
    ollama: OllamaProviderConfig = Field(default_factory=OllamaProviderConfig)
    openai: OpenAIProviderConfig = Field(default_factory=OpenAIProviderConfig)
