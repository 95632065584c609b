"""Gateway: Ollama LLM client — implements LLMClient port."""

from __future__ import annotations

import ollama as ollama_sync


class OllamaLLMClient:
    """Wraps ollama.AsyncClient to implement the LLMClient protocol."""

    def __init__(self, host: str = 'http://localhost:11434') -> None:
        self._host = host

    async def chat_single(self, model: str, prompt: str, *, system: str | None = None) -> str:
        client = ollama_sync.AsyncClient(host=self._host)
        messages = [{'role': 'system', 'content': system}] if system else []
        messages.append({'role': 'user', 'content': prompt})
        resp = await client.chat(model=model, messages=messages)
        return resp.message.content or ''

    def check_connectivity(self) -> tuple[bool, str]:
        try:
            client = ollama_sync.Client(host=self._host)
            client.list()
            return True, ''
        except Exception as e:
            return False, f'Cannot connect to Ollama: {e}'

    def check_models(self, models: list[str]) -> list[str]:
        """Return model names not pulled locally; empty list if Ollama is unreachable."""
        try:
            client = ollama_sync.Client(host=self._host)
            missing = []
            for model in models:
                try:
                    client.show(model)
                except ollama_sync.ResponseError:
                    missing.append(model)
            return missing
        except Exception:
            return []
