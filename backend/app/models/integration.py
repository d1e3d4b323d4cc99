"""
Linked gaming-service account. Keyed by service: one record per service, replaced on upsert.
"""
from enum import Enum

from app.models.chat import timestamp_now


class ServiceKind(str, Enum):
    STEAM = "steam"
    EPIC = "epic"
    PLAYSTATION = "playstation"
    XBOX = "xbox"


class IntegrationRecord:
    __slots__ = ("service", "username", "connected_at")

    def __init__(self, *, service: ServiceKind, username: str, connected_at: str | None = None) -> None:
        self.service = ServiceKind(service)
        self.username = username
        self.connected_at = connected_at or timestamp_now()

    def to_dict(self) -> dict[str, str]:
        return {
            "service": self.service.value,
            "username": self.username,
            "connectedAt": self.connected_at,
        }
