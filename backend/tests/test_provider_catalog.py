import pytest

from app.core.constants import HUGGINGFACE_MODELS, OLLAMA_MODELS
from app.core.errors import InternalInvariant, InvalidArgument
from app.services.providers.catalog import ProviderCatalog, default_catalog
from app.services.providers.registry import ProviderRegistry
from app.services.providers.types import ProviderId


def test_resolves_model_to_its_provider():
    catalog = default_catalog()
    assert catalog.resolve("llama3.2") == (ProviderId.OLLAMA, "llama3.2")
    assert catalog.resolve("deepseek-ai/DeepSeek-R1-0528") == (
        ProviderId.HUGGINGFACE,
        "deepseek-ai/DeepSeek-R1-0528",
    )


def test_no_model_uses_default_provider_and_its_first_model():
    assert default_catalog().resolve(None) == (ProviderId.HUGGINGFACE, HUGGINGFACE_MODELS[0])
    assert default_catalog("ollama").resolve(None) == (ProviderId.OLLAMA, OLLAMA_MODELS[0])


def test_resolution_is_deterministic_and_first_match_wins():
    catalog = ProviderCatalog(
        {ProviderId.OLLAMA: ["shared", "a"], ProviderId.HUGGINGFACE: ["shared", "b"]},
        default_provider=ProviderId.OLLAMA,
    )
    assert {catalog.resolve("shared") for _ in range(10)} == {(ProviderId.OLLAMA, "shared")}


@pytest.mark.parametrize("model", ["gpt-4", "LLAMA3.2", 5, ["llama3.2"]])
def test_unknown_model_lists_every_allowed_model(model):
    catalog = default_catalog()
    with pytest.raises(InvalidArgument) as exc:
        catalog.resolve(model)
    assert ", ".join([*OLLAMA_MODELS, *HUGGINGFACE_MODELS]) in exc.value.message
    assert catalog.allowed_models() == [*OLLAMA_MODELS, *HUGGINGFACE_MODELS]


def test_default_provider_must_have_models():
    with pytest.raises(ValueError):
        ProviderCatalog({ProviderId.OLLAMA: ["llama3.2"]}, default_provider=ProviderId.HUGGINGFACE)


def test_registry_raises_internal_invariant_for_unregistered_provider(ollama):
    registry = ProviderRegistry()
    registry.register(ollama)
    assert registry.get(ProviderId.OLLAMA) is ollama
    assert registry.list_providers() == [ProviderId.OLLAMA]
    with pytest.raises(InternalInvariant):
        registry.get(ProviderId.HUGGINGFACE)
