"""
Dependencies for the routes (built once at startup, injected per request).
"""
from fastapi import Request

from app.config import Settings
from app.services.chat_session_service import SessionStore
from app.services.integration_service import IntegrationStore
from app.services.providers.catalog import ProviderCatalog, default_catalog
from app.services.providers.registry import ProviderRegistry, build_registry
from app.services.steam import SteamClient, SteamConfig, SteamLibrary


class Services:
    """Process-lifetime stores and clients. Tests construct their own with stub providers."""

    def __init__(
        self,
        *,
        sessions: SessionStore,
        integrations: IntegrationStore,
        catalog: ProviderCatalog,
        registry: ProviderRegistry,
        steam: SteamLibrary,
    ):
        self.sessions = sessions
        self.integrations = integrations
        self.catalog = catalog
        self.registry = registry
        self.steam = steam


def build_services(settings: Settings) -> Services:
    steam_config = SteamConfig(
        api_key=settings.steam_api_key,
        base_url=settings.steam_base_url,
        timeout=settings.steam_timeout_seconds,
    )
    return Services(
        sessions=SessionStore(),
        integrations=IntegrationStore(),
        catalog=default_catalog(settings.default_provider),
        registry=build_registry(settings),
        steam=SteamLibrary(SteamClient(steam_config)),
    )


def get_services(request: Request) -> Services:
    return request.app.state.services
