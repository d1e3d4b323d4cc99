"""
Integration store: linked gaming-service accounts, one record per service, in memory.
Validation happens here before any mutation so routes stay thin.
"""
import logging
from typing import Any

from app.core.constants import INTEGRATION_SERVICES
from app.core.errors import InvalidArgument, NotFound
from app.models.integration import IntegrationRecord, ServiceKind

logger = logging.getLogger(__name__)


def validate_service(service: Any) -> ServiceKind:
    """Normalize (strip, lowercase) and check against the closed set. Raises InvalidArgument."""
    if not isinstance(service, str) or not service.strip():
        raise InvalidArgument("service is required")
    name = service.strip().lower()
    if name not in INTEGRATION_SERVICES:
        raise InvalidArgument(
            f"Invalid service: {service}. Must be one of: {', '.join(INTEGRATION_SERVICES)}"
        )
    return ServiceKind(name)


def validate_username(username: Any) -> str:
    """Return the trimmed username. Raises InvalidArgument if missing or blank."""
    if not isinstance(username, str) or not username.strip():
        raise InvalidArgument("username is required")
    return username.strip()


class IntegrationStore:
    def __init__(self) -> None:
        self._records: dict[ServiceKind, IntegrationRecord] = {}

    def upsert(self, service: Any, username: Any) -> IntegrationRecord:
        """Validate, then replace any record for this service. connected_at is refreshed."""
        kind = validate_service(service)
        name = validate_username(username)
        record = IntegrationRecord(service=kind, username=name)
        replaced = kind in self._records
        self._records[kind] = record
        logger.info("Integration %s %s (username=%s)", kind.value, "replaced" if replaced else "added", name)
        return record

    def get(self, service: Any) -> IntegrationRecord | None:
        """Record for this service, or None if nothing is linked."""
        return self._records.get(validate_service(service))

    def list(self) -> list[IntegrationRecord]:
        """All records in service order. Empty list when none are linked."""
        return [self._records[k] for k in ServiceKind if k in self._records]

    def remove(self, service: Any) -> None:
        kind = validate_service(service)
        if kind not in self._records:
            raise NotFound(f"No {kind.value} integration found")
        del self._records[kind]
        logger.info("Integration %s removed", kind.value)
