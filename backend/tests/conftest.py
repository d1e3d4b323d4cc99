from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.api.deps import Services
from app.core.errors import BackendError
from app.main import create_app
from app.models.chat import ModelConfig
from app.services.chat_session_service import SessionStore
from app.services.integration_service import IntegrationStore
from app.services.providers.catalog import default_catalog
from app.services.providers.registry import ProviderRegistry
from app.services.providers.types import ProviderId


class StubProvider:
    """Records calls and returns a fixed answer (or raises BackendError when fail=True)."""

    def __init__(self, provider_id: ProviderId, answer: str = "Hello", fail: bool = False) -> None:
        self.provider_id = provider_id
        self.answer = answer
        self.fail = fail
        self.calls: list[tuple[str, list[dict[str, Any]], ModelConfig]] = []

    async def chat(self, message: str, history: list[dict[str, Any]], config: ModelConfig) -> str:
        self.calls.append((message, history, config))
        if self.fail:
            raise BackendError(f"{self.provider_id.value} is down", provider=self.provider_id.value)
        return self.answer


class StubSteam:
    def __init__(self, games: list[dict[str, Any]] | None = None, fail: bool = False) -> None:
        self.games = games or []
        self.fail = fail
        self.usernames: list[str] = []

    async def owned_games(self, username: str) -> list[dict[str, Any]]:
        self.usernames.append(username)
        if self.fail:
            raise BackendError("Steam user not found: nobody (No match)", provider="steam")
        return self.games


@pytest.fixture
def ollama() -> StubProvider:
    return StubProvider(ProviderId.OLLAMA, answer="from ollama")


@pytest.fixture
def huggingface() -> StubProvider:
    return StubProvider(ProviderId.HUGGINGFACE, answer="Hello")


@pytest.fixture
def steam() -> StubSteam:
    return StubSteam(games=[{"name": "Portal 2", "play_minutes": 900}, {"name": "Dota 2", "play_minutes": 30}])


@pytest.fixture
def services(ollama, huggingface, steam) -> Services:
    registry = ProviderRegistry()
    registry.register(ollama)
    registry.register(huggingface)
    return Services(
        sessions=SessionStore(),
        integrations=IntegrationStore(),
        catalog=default_catalog(ProviderId.HUGGINGFACE),
        registry=registry,
        steam=steam,
    )


@pytest.fixture
def client(services):
    with TestClient(create_app(services)) as c:
        yield c
