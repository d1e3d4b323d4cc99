"""
Chat endpoints: create a chat, send a message (routed to an LLM provider by model), read history.
"""
import logging
from typing import Any, NoReturn

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from app.api.deps import Services, get_services
from app.core.errors import service_error_to_http
from app.orchestrator.orchestrator import run as orchestrator_run

router = APIRouter()
logger = logging.getLogger(__name__)


class ChatMessageRequest(BaseModel):
    # Loosely typed so a bad content/config is a 400 from the orchestrator, not a 422
    content: Any = None
    config: Any = None


def _handle_error(exc: Exception, log_message: str, *args: Any) -> NoReturn:
    logger.warning(log_message + ": %s", *args, exc)
    raise service_error_to_http(exc) from exc


@router.put("", status_code=status.HTTP_201_CREATED)
async def create_chat(services: Services = Depends(get_services)):
    """Start a new chat. Send chatId with each message to keep conversation context."""
    return {"chatId": services.sessions.create()}


@router.post("/{chat_id}", status_code=status.HTTP_201_CREATED)
async def send_message(
    chat_id: str,
    body: ChatMessageRequest | None = None,
    services: Services = Depends(get_services),
):
    """
    Send a message. config.model picks the provider (default provider when omitted);
    other config keys (e.g. temperature) go to the backend as generation options.
    """
    body = body or ChatMessageRequest()
    try:
        turn = await orchestrator_run(
            chat_id,
            body.content,
            body.config,
            sessions=services.sessions,
            catalog=services.catalog,
            registry=services.registry,
        )
    except Exception as e:  # noqa: BLE001
        _handle_error(e, "Chat %s failed", chat_id)
    return {"response": turn}


@router.get("/{chat_id}")
async def get_chat(chat_id: str, services: Services = Depends(get_services)):
    """Return the chat history as [{ role, content, timestamp }, ...]."""
    try:
        history = services.sessions.get(chat_id)
    except Exception as e:  # noqa: BLE001
        _handle_error(e, "Get chat %s failed", chat_id)
    return {"chatId": chat_id, "history": history}
