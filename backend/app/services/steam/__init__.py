"""Steam API client: owned games per user. Username handling here; client below just sends the request."""
import logging
import re

from app.services.steam.client import SteamClient
from app.services.steam.config import SteamConfig
from app.services.steam.types import OwnedGame, SteamOwnedGame

logger = logging.getLogger(__name__)

_STEAM_ID64 = re.compile(r"^\d{17}$")


def _to_owned_game(game: SteamOwnedGame) -> OwnedGame:
    try:
        minutes = int(game.get("playtime_forever") or 0)
    except (TypeError, ValueError):
        minutes = 0
    return {"name": str(game.get("name") or f"App {game.get('appid', '?')}"), "play_minutes": minutes}


class SteamLibrary:
    """Owned-games lookup by username (SteamID64 or custom profile name)."""

    def __init__(self, client: SteamClient) -> None:
        self._client = client

    async def resolve_steam_id(self, username: str) -> str:
        name = username.strip()
        if _STEAM_ID64.match(name):
            return name
        return await self._client.resolve_vanity_url(name)

    async def owned_games(self, username: str) -> list[OwnedGame]:
        """Games as [{ name, play_minutes }], most played first. Raises BackendError on any failure."""
        steam_id = await self.resolve_steam_id(username)
        games = [_to_owned_game(g) for g in await self._client.get_owned_games(steam_id)]
        games.sort(key=lambda g: g["play_minutes"], reverse=True)
        logger.info("Steam user %s (%s): %s owned games", username, steam_id, len(games))
        return games


__all__ = [
    "OwnedGame",
    "SteamClient",
    "SteamConfig",
    "SteamLibrary",
    "SteamOwnedGame",
]
