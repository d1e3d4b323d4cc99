"""
Orchestrator: receives chat requests, routes them to the LLM provider that serves the requested
model, records both sides of the exchange, returns the assistant turn.
"""
import logging
from typing import Any

from app.core.errors import BackendError, InvalidArgument, ServiceError
from app.models.chat import ModelConfig, Role, Turn
from app.services.chat_session_service import SessionStore
from app.services.providers.catalog import ProviderCatalog
from app.services.providers.registry import ProviderRegistry

logger = logging.getLogger(__name__)


def _validate_content(content: Any) -> str:
    if not isinstance(content, str) or not content.strip():
        raise InvalidArgument("content required")
    return content


def _route(catalog: ProviderCatalog, config: ModelConfig):
    """Resolve (provider, model) and pin the model on the config sent to the backend."""
    provider_id, model = catalog.resolve(config.model)
    return provider_id, config.with_model(model)


async def run(
    chat_id: str,
    content: Any,
    raw_config: dict[str, Any] | None,
    *,
    sessions: SessionStore,
    catalog: ProviderCatalog,
    registry: ProviderRegistry,
) -> dict[str, str]:
    """
    Handle one chat message. Validation (content, chat id, model) happens before any backend call;
    the user and assistant turns are appended together only after the backend answers, so a
    failed call leaves the history untouched.
    Raises InvalidArgument, NotFound, BackendError or InternalInvariant.
    """
    message = _validate_content(content)
    history = sessions.get(chat_id)
    if raw_config is not None and not isinstance(raw_config, dict):
        raise InvalidArgument("config must be an object")
    config = ModelConfig.from_raw(raw_config)
    provider_id, config = _route(catalog, config)
    provider = registry.get(provider_id)

    logger.info("Chat %s: dispatching to %s (model=%s)", chat_id, provider_id.value, config.model)
    try:
        answer = await provider.chat(message, history, config)
    except ServiceError:
        logger.warning("Chat %s: provider %s failed", chat_id, provider_id.value, exc_info=True)
        raise
    except Exception as e:
        logger.exception("Chat %s: provider %s raised unexpectedly", chat_id, provider_id.value)
        raise BackendError(f"{provider_id.value} call failed: {e}", provider=provider_id.value) from e

    user_turn = Turn(role=Role.USER, content=message)
    assistant_turn = Turn(role=Role.ASSISTANT, content=answer)
    sessions.extend(chat_id, (user_turn, assistant_turn))
    return assistant_turn.to_public()
