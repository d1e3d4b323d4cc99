"""Steam Web API config. Values come from Settings (STEAM_API_KEY etc.) via build_services."""

DEFAULT_BASE_URL = "https://api.steampowered.com"


class SteamConfig:
    """API key, base URL and request timeout for Steam."""

    __slots__ = ("api_key", "base_url", "timeout")

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 20.0,
    ) -> None:
        self.api_key = (api_key or "").strip()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.api_key)
