"""
Gaming-service integrations: link, list and unlink accounts. Linking Steam also returns the owned-games list.
"""
import logging
from typing import Any, NoReturn

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.api.deps import Services, get_services
from app.core.errors import STATUS_INTERNAL_ERROR, BackendError, service_error_to_http
from app.models.integration import IntegrationRecord, ServiceKind

router = APIRouter()
logger = logging.getLogger(__name__)


class IntegrationRequest(BaseModel):
    service: Any = None
    username: Any = None


def _handle_error(exc: Exception, log_message: str, *args: Any) -> NoReturn:
    logger.warning(log_message + ": %s", *args, exc)
    raise service_error_to_http(exc) from exc


def _enrichment_failed(record: IntegrationRecord, error: str) -> JSONResponse:
    """Integration is already saved; report the failed games lookup as a partial failure."""
    return JSONResponse(
        status_code=STATUS_INTERNAL_ERROR,
        content={
            "message": f"{record.service.value} integration saved, but fetching owned games failed",
            "integration": record.to_dict(),
            "error": error,
        },
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def link_integration(
    body: IntegrationRequest | None = None,
    services: Services = Depends(get_services),
):
    """
    Link (or re-link) a service account; an existing link for the service is replaced.
    For steam, the response includes games sorted by playtime. If that lookup fails the link is
    still saved and the response is a 500 with the integration and the lookup error.
    """
    body = body or IntegrationRequest()
    try:
        record = services.integrations.upsert(body.service, body.username)
    except Exception as e:  # noqa: BLE001
        _handle_error(e, "Link integration %s failed", body.service)

    result: dict[str, Any] = {
        "message": f"{record.service.value} integration saved",
        "integration": record.to_dict(),
    }
    if record.service is not ServiceKind.STEAM:
        return result

    try:
        result["games"] = await services.steam.owned_games(record.username)
    except BackendError as e:
        logger.warning("Steam games lookup failed for %s: %s", record.username, e.message)
        return _enrichment_failed(record, e.message)
    except Exception as e:  # noqa: BLE001
        logger.exception("Steam games lookup raised unexpectedly for %s", record.username)
        return _enrichment_failed(record, f"steam lookup failed: {e}")
    return result


@router.get("")
async def list_integrations(services: Services = Depends(get_services)):
    """All linked services (empty list when none)."""
    return {"integrations": [r.to_dict() for r in services.integrations.list()]}


@router.get("/{service}")
async def get_integration(service: str, services: Services = Depends(get_services)):
    """The linked account for one service, or null."""
    try:
        record = services.integrations.get(service)
    except Exception as e:  # noqa: BLE001
        _handle_error(e, "Get integration %s failed", service)
    return {"integration": record.to_dict() if record else None}


@router.delete("/{service}")
async def unlink_integration(service: str, services: Services = Depends(get_services)):
    try:
        services.integrations.remove(service)
    except Exception as e:  # noqa: BLE001
        _handle_error(e, "Unlink integration %s failed", service)
    return {"message": f"{service.strip().lower()} integration removed"}
