"""Steam Web API client: lowest level, sends requests only. Failures raise BackendError."""
from typing import Any

import httpx

from app.core.errors import BackendError
from app.services.http_client import request_json
from app.services.steam.config import SteamConfig

PROVIDER = "steam"


class SteamClient:
    """Vanity-name resolution and owned-games lookup."""

    def __init__(self, config: SteamConfig, *, client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._client = client

    def _credentials_error(self) -> BackendError:
        return BackendError("Steam API key not configured. Add STEAM_API_KEY to .env.", provider=PROVIDER)

    async def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        if not self._config.is_configured():
            raise self._credentials_error()
        return await request_json(
            "GET",
            f"{self._config.base_url}{path}",
            provider=PROVIDER,
            timeout=self._config.timeout,
            client=self._client,
            params={"key": self._config.api_key, "format": "json", **params},
        )

    def _response(self, raw: dict[str, Any]) -> dict[str, Any]:
        """The "response" object every Steam Web API reply wraps its payload in."""
        response = raw.get("response")
        if response is None:
            return {}
        if not isinstance(response, dict):
            raise BackendError("Steam returned an unexpected body", provider=PROVIDER)
        return response

    async def resolve_vanity_url(self, vanity_name: str) -> str:
        """Return the SteamID64 for a custom profile name. Raises BackendError if Steam has no match."""
        raw = await self._get("/ISteamUser/ResolveVanityURL/v1/", {"vanityurl": vanity_name})
        response = self._response(raw)
        if response.get("success") != 1 or not response.get("steamid"):
            raise BackendError(
                f"Steam user not found: {vanity_name} ({response.get('message') or 'no match'})",
                provider=PROVIDER,
            )
        return str(response["steamid"])

    async def get_owned_games(self, steam_id: str) -> list[dict[str, Any]]:
        """Raw response.games for a SteamID64, free games and app info included. Empty for private profiles."""
        raw = await self._get(
            "/IPlayerService/GetOwnedGames/v1/",
            {"steamid": steam_id, "include_appinfo": 1, "include_played_free_games": 1},
        )
        games = self._response(raw).get("games") or []
        if not isinstance(games, list):
            raise BackendError("Steam returned an unexpected games list", provider=PROVIDER)
        return [g for g in games if isinstance(g, dict)]
