"""
LLM providers: Ollama, Hugging Face.
Each provider calls its backend in its own way but takes the same (message, history, config)
and returns plain text, so the chat orchestrator stays provider-agnostic.
"""
from app.services.providers.base import LLMProvider
from app.services.providers.catalog import ProviderCatalog, default_catalog
from app.services.providers.huggingface_provider import HuggingFaceProvider
from app.services.providers.ollama_provider import OllamaProvider
from app.services.providers.registry import ProviderRegistry, build_registry
from app.services.providers.types import ProviderId, strip_reasoning

__all__ = [
    "HuggingFaceProvider",
    "LLMProvider",
    "OllamaProvider",
    "ProviderCatalog",
    "ProviderId",
    "ProviderRegistry",
    "build_registry",
    "default_catalog",
    "strip_reasoning",
]
