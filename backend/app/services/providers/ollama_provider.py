"""Ollama provider. Uses the local /api/chat endpoint (non-streaming)."""
import logging
from typing import Any

import httpx

from app.core.errors import BackendError
from app.models.chat import ModelConfig
from app.services.http_client import request_json
from app.services.providers.types import ProviderId, build_messages

logger = logging.getLogger(__name__)

DEFAULT_HOST = "http://127.0.0.1:11434"


class OllamaProvider:
    provider_id = ProviderId.OLLAMA

    def __init__(
        self,
        *,
        host: str = DEFAULT_HOST,
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.host = host.rstrip("/")
        self.timeout = timeout
        self._client = client

    def _build_body(self, message: str, history: list[dict[str, Any]], config: ModelConfig) -> dict[str, Any]:
        body: dict[str, Any] = {
            "model": config.model,
            "messages": build_messages(message, history),
            "stream": False,
        }
        options = config.options()
        if options:
            body["options"] = options
        return body

    async def chat(self, message: str, history: list[dict[str, Any]], config: ModelConfig) -> str:
        data = await request_json(
            "POST",
            f"{self.host}/api/chat",
            provider=self.provider_id.value,
            timeout=self.timeout,
            client=self._client,
            json=self._build_body(message, history, config),
        )
        content = (data.get("message") or {}).get("content")
        if not isinstance(content, str):
            logger.warning("Ollama response without message content: %s", str(data)[:200])
            raise BackendError("Ollama returned no message content", provider=self.provider_id.value)
        return content
