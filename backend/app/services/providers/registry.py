"""Registry of LLM provider clients. One instance per app; add new clients in build_registry."""
import logging

from app.config import Settings
from app.core.errors import InternalInvariant
from app.services.providers.base import LLMProvider
from app.services.providers.types import ProviderId

logger = logging.getLogger(__name__)


class ProviderRegistry:
    def __init__(self) -> None:
        self._providers: dict[ProviderId, LLMProvider] = {}

    def register(self, provider: LLMProvider) -> None:
        """Register a provider under its provider_id (replaces any previous one)."""
        self._providers[ProviderId(provider.provider_id)] = provider
        logger.info("Registered LLM provider: %s", ProviderId(provider.provider_id).value)

    def get(self, provider_id: ProviderId) -> LLMProvider:
        """Get provider by id. Raises InternalInvariant if the catalog names a provider nobody registered."""
        provider = self._providers.get(ProviderId(provider_id))
        if provider is None:
            raise InternalInvariant(
                f"No client registered for provider: {ProviderId(provider_id).value}. "
                f"Available: {[p.value for p in self._providers]}"
            )
        return provider

    def list_providers(self) -> list[ProviderId]:
        """List registered provider ids."""
        return list(self._providers)


def build_registry(settings: Settings) -> ProviderRegistry:
    from app.services.providers.huggingface_provider import HuggingFaceProvider
    from app.services.providers.ollama_provider import OllamaProvider

    registry = ProviderRegistry()
    registry.register(OllamaProvider(host=settings.ollama_host, timeout=settings.llm_timeout_seconds))
    registry.register(
        HuggingFaceProvider(
            token=settings.hf_token,
            base_url=settings.hf_base_url,
            timeout=settings.llm_timeout_seconds,
        )
    )
    return registry
