"""
Hugging Face provider. Uses the OpenAI-compatible chat completions route of the inference router.
Reasoning models (e.g. DeepSeek-R1) prefix their answer with <think>...</think>; only the answer is returned.
"""
import logging
from typing import Any

import httpx

from app.core.constants import HF_EMPTY_RESPONSE
from app.core.errors import BackendError
from app.models.chat import ModelConfig
from app.services.http_client import request_json
from app.services.providers.types import ProviderId, build_messages, strip_reasoning

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://router.huggingface.co/v1"


class HuggingFaceProvider:
    provider_id = ProviderId.HUGGINGFACE

    def __init__(
        self,
        *,
        token: str = "",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.token = (token or "").strip()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    def is_configured(self) -> bool:
        return bool(self.token)

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }

    def _build_body(self, message: str, history: list[dict[str, Any]], config: ModelConfig) -> dict[str, Any]:
        body: dict[str, Any] = config.options()
        body["model"] = config.model
        body["messages"] = build_messages(message, history)
        body["stream"] = False
        return body

    async def chat(self, message: str, history: list[dict[str, Any]], config: ModelConfig) -> str:
        if not self.is_configured():
            raise BackendError(
                "Hugging Face token not configured. Add HF_TOKEN to .env.",
                provider=self.provider_id.value,
            )
        data = await request_json(
            "POST",
            f"{self.base_url}/chat/completions",
            provider=self.provider_id.value,
            timeout=self.timeout,
            client=self._client,
            json=self._build_body(message, history, config),
            headers=self.headers(),
        )
        try:
            content = data["choices"][0]["message"].get("content")
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            logger.warning("Hugging Face response without choices: %s", str(data)[:200])
            raise BackendError("Hugging Face returned no choices", provider=self.provider_id.value) from e
        if not isinstance(content, str) or not content:
            content = HF_EMPTY_RESPONSE
        return strip_reasoning(content)
