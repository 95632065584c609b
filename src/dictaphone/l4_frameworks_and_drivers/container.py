"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from pathlib import Path

from dictaphone.l1_entities.config import AppConfig
from dictaphone.l2_use_cases.ports.llm_client import LLMClient
from dictaphone.l2_use_cases.ports.persistence import ExportPersistence
from dictaphone.l2_use_cases.ports.translator import Translator
from dictaphone.l3_interface_adapters.controllers.session_controller import SessionController
from dictaphone.l3_interface_adapters.gateways.file_persistence import FileExportGateway
from dictaphone.l3_interface_adapters.gateways.llm_translator import LLMTranslator
from dictaphone.l3_interface_adapters.gateways.mock_translator import MockTranslator
from dictaphone.l4_frameworks_and_drivers.infra_config import InfraConfig


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        output_dir: Path,
        infra: InfraConfig | None = None,
    ) -> None:
        self.config = config
        self.output_dir = output_dir

        _infra = infra or InfraConfig()
        self.persistence: ExportPersistence = FileExportGateway(output_dir)
        self.llm_client: LLMClient | None = self.build_llm_client(_infra)
        self.translator: Translator = self._build_translator(_infra, config, self.llm_client)

        self.controller = SessionController(
            config=config,
            translator=self.translator,
            persistence=self.persistence,
        )

    @staticmethod
    def build_llm_client(infra: InfraConfig) -> LLMClient | None:
        if infra.translator_provider == 'ollama':
            from dictaphone.l3_interface_adapters.gateways.ollama_llm_client import (  # noqa: PLC0415 -- deferred: ollama only when selected
                OllamaLLMClient,
            )

            return OllamaLLMClient(host=infra.ollama.host)
        if infra.translator_provider == 'openai':
            from dictaphone.l3_interface_adapters.gateways.openai_llm_client import (  # noqa: PLC0415 -- deferred: openai only when selected
                OpenAICompatLLMClient,
            )

            return OpenAICompatLLMClient(api_key=infra.openai.api_key, base_url=infra.openai.base_url)
        return None

    @staticmethod
    def _build_translator(infra: InfraConfig, config: AppConfig, llm_client: LLMClient | None) -> Translator:
        if llm_client is None:
            return MockTranslator(min_delay=infra.mock.min_delay, max_delay=infra.mock.max_delay)
        return LLMTranslator(llm_client, model=config.translation.model)
