"""Protocol for LLM providers. All clients take the same normalized request and return plain text."""
from typing import Any, Protocol

from app.models.chat import ModelConfig
from app.services.providers.types import ProviderId


class LLMProvider(Protocol):
    """Interface for Ollama, Hugging Face, etc. Same contract; only the backend call differs."""

    @property
    def provider_id(self) -> ProviderId:
        """Catalog key for this provider (e.g. ProviderId.OLLAMA)."""
        ...

    async def chat(
        self,
        message: str,
        history: list[dict[str, Any]],
        config: ModelConfig,
    ) -> str:
        """
        Send history + message to the backend and return the visible answer.
        Raises BackendError on any failure (transport, timeout, bad status, bad body).
        """
        ...
