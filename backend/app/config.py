"""
Application settings (Pydantic Settings).
"""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

# .env next to backend/ (parent of app/)
_env_path = Path(__file__).resolve().parent.parent / ".env"


class Settings(BaseSettings):
    # Hugging Face: HF_TOKEN in .env. Calls fail (not startup) when empty.
    hf_token: str = ""
    hf_base_url: str = "https://router.huggingface.co/v1"
    ollama_host: str = "http://127.0.0.1:11434"
    # Steam Web API: STEAM_API_KEY in .env
    steam_api_key: str = ""
    steam_base_url: str = "https://api.steampowered.com"

    default_provider: str = "huggingface"
    llm_timeout_seconds: float = 60.0
    steam_timeout_seconds: float = 20.0

    cors_origins: str = ""  # comma-separated, added to the dev origins
    log_level: str = "INFO"
    port: int = 5000

    class Config:
        env_file = _env_path
        extra = "ignore"

    @field_validator("hf_token", "steam_api_key", mode="after")
    @classmethod
    def strip_token(cls, v: str) -> str:
        return (v or "").strip()


settings = Settings()
