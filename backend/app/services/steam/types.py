"""
Typed definitions for Steam Web API responses.

GetOwnedGames (IPlayerService/GetOwnedGames/v1) returns {"response": {"game_count": N, "games": [...]}};
we keep only name and playtime per game.
"""

from typing import TypedDict


class SteamOwnedGame(TypedDict, total=False):
    """One entry from response.games[] (include_appinfo=1 adds name and icon)."""
    appid: int
    name: str
    playtime_forever: int  # minutes
    playtime_2weeks: int
    img_icon_url: str
    has_community_visible_stats: bool


class OwnedGame(TypedDict):
    """What we return for enrichment, sorted by play_minutes descending."""
    name: str
    play_minutes: int
