"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from dictaphone.l1_entities.config import AppConfig
from dictaphone.l1_entities.export_format import ExportFormat
from dictaphone.l1_entities.segment import Segment
from dictaphone.l4_frameworks_and_drivers.infra_config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeTranslator:
    """Fake translator for L2/L3 tests — prefixes text, can fail or stall per text."""

    def __init__(self, prefix: str = 'T:'):
        self._prefix = prefix
        self._failing: set[str] = set()
        self._gates: dict[str, asyncio.Event] = {}
        self.calls: list[tuple[str, str, str]] = []

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        self.calls.append((text, source_language, target_language))
        gate = self._gates.get(text)
        if gate is not None:
            await gate.wait()
        if text in self._failing:
            raise ConnectionError(f'translator down for {text!r}')
        return f'{self._prefix}{text}'

    def fail_on(self, *texts: str) -> None:
        self._failing.update(texts)

    def hold(self, text: str) -> asyncio.Event:
        """Block translation of *text* until the returned event is set."""
        gate = asyncio.Event()
        self._gates[text] = gate
        return gate

    def release_holds(self) -> None:
        """Stop blocking texts for calls that have not reached their gate yet."""
        self._gates.clear()

    def set_prefix(self, prefix: str) -> None:
        self._prefix = prefix


class FakeLLMClient:
    """Fake LLM client for translator gateway tests."""

    def __init__(self, response: str = 'Fake LLM response'):
        self._response = response
        self.chat_single_calls: list[tuple[str, str, str | None]] = []
        self._connectivity = (True, '')
        self._missing_models: list[str] = []

    async def chat_single(self, model: str, prompt: str, *, system: str | None = None) -> str:
        self.chat_single_calls.append((model, prompt, system))
        return self._response

    def check_connectivity(self) -> tuple[bool, str]:
        return self._connectivity

    def check_models(self, models: list[str]) -> list[str]:
        return [m for m in models if m in self._missing_models]

    def set_response(self, response: str) -> None:
        self._response = response

    def set_connectivity(self, ok: bool, msg: str = '') -> None:
        self._connectivity = (ok, msg)

    def set_missing_models(self, models: list[str]) -> None:
        self._missing_models = list(models)


class FakeExportPersistence:
    """Fake export gateway for L2/L3 tests."""

    def __init__(self, output_dir: Path | None = None):
        self._output_dir = output_dir or Path('/fake/output')
        self.export_calls: list[tuple[ExportFormat, str, bool]] = []

    def save_export(self, fmt: ExportFormat, content: str, *, translated: bool = False) -> Path:
        self.export_calls.append((fmt, content, translated))
        return self._output_dir / fmt.filename(translated=translated)


def make_segments() -> list[Segment]:
    return [
        Segment(start_time=0, end_time=10, original_text='hello world'),
        Segment(start_time=10, end_time=15, original_text='this is a test'),
    ]


# --- Standard Fixtures ---


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'output'
    d.mkdir()
    return d


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
segmentation:
  window: 5
  tick_interval: 0.5
translation:
  model: "llama3:8b"
  source_language: "es-ES"
  target_language: "en"
  max_concurrency: 2
export:
  formats: ["srt", "vtt"]
  include_translated: false
output:
  directory: "./test_output"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def sample_script_yaml(tmp_path: Path) -> Path:
    content = """\
source_language: en-US
events:
  - at: 4
    text: hello world
  - at: 12
    text: hello world this is a test
stop_at: 15
"""
    p = tmp_path / 'script.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def fake_translator() -> FakeTranslator:
    return FakeTranslator()


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def fake_persistence(tmp_output_dir: Path) -> FakeExportPersistence:
    return FakeExportPersistence(tmp_output_dir)
