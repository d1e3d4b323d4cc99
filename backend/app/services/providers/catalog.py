"""Static table of which model names each provider accepts, and model -> provider resolution."""
from collections.abc import Mapping, Sequence

from app.core.constants import HUGGINGFACE_MODELS, OLLAMA_MODELS
from app.core.errors import InvalidArgument
from app.services.providers.types import ProviderId


class ProviderCatalog:
    """
    Ordered provider -> model names. Resolution scans providers in insertion order and the first
    provider listing the model wins, so a model listed twice always goes to the earlier provider.
    """

    def __init__(self, entries: Mapping[ProviderId, Sequence[str]], default_provider: ProviderId) -> None:
        self._entries: dict[ProviderId, tuple[str, ...]] = {
            ProviderId(p): tuple(models) for p, models in entries.items()
        }
        default_provider = ProviderId(default_provider)
        if not self._entries.get(default_provider):
            raise ValueError(f"Default provider {default_provider.value} has no models in the catalog")
        self.default_provider = default_provider

    @property
    def providers(self) -> list[ProviderId]:
        return list(self._entries)

    def models_for(self, provider: ProviderId) -> tuple[str, ...]:
        return self._entries.get(ProviderId(provider), ())

    def allowed_models(self) -> list[str]:
        """Every model name across all providers, in catalog order."""
        return [m for models in self._entries.values() for m in models]

    def default_model(self, provider: ProviderId | None = None) -> str:
        """First model listed under provider (default provider if omitted)."""
        return self._entries[ProviderId(provider or self.default_provider)][0]

    def resolve(self, model: object | None) -> tuple[ProviderId, str]:
        """
        Return (provider, model) for the requested model name; the default provider and its
        default model when none is given. Raises InvalidArgument listing every allowed model.
        """
        if model is None:
            return self.default_provider, self.default_model()
        if isinstance(model, str):
            for provider, models in self._entries.items():
                if model in models:
                    return provider, model
        raise InvalidArgument(
            f"Invalid model: {model}. Allowed models: {', '.join(self.allowed_models())}"
        )


def default_catalog(default_provider: ProviderId | str = ProviderId.HUGGINGFACE) -> ProviderCatalog:
    return ProviderCatalog(
        {
            ProviderId.OLLAMA: OLLAMA_MODELS,
            ProviderId.HUGGINGFACE: HUGGINGFACE_MODELS,
        },
        default_provider=ProviderId(default_provider),
    )
