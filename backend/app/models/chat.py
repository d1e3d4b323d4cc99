"""
Chat turns and per-request model configuration. In-memory only; nothing here is persisted.
"""
import math
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from app.core.constants import NUMERIC_CONFIG_KEYS, TIMESTAMP_FORMAT


def timestamp_now() -> str:
    """Human-readable UTC timestamp, e.g. 2026-10-19 14:03:22."""
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class Turn:
    """One message in a chat. Immutable once created; `id` is internal and never returned to callers."""

    __slots__ = ("id", "role", "content", "timestamp")

    def __init__(self, *, role: Role, content: str, timestamp: str | None = None) -> None:
        object.__setattr__(self, "id", uuid.uuid4().hex)
        object.__setattr__(self, "role", Role(role))
        object.__setattr__(self, "content", content)
        object.__setattr__(self, "timestamp", timestamp or timestamp_now())

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Turn is immutable")

    def __repr__(self) -> str:
        return f"Turn(role={self.role.value!r}, content={self.content[:40]!r}, timestamp={self.timestamp!r})"

    def to_public(self) -> dict[str, str]:
        """Format for callers and LLM context: { role, content, timestamp } (no id)."""
        return {"role": self.role.value, "content": self.content, "timestamp": self.timestamp}


def _coerce_float(value: Any) -> float | None:
    """Parse value as a finite float. Returns None for bools, NaN, infinities and anything unparseable."""
    if isinstance(value, bool):
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(parsed) or math.isinf(parsed):
        return None
    return parsed


class ModelConfig:
    """
    Generation options for one chat request.
    Known fields are typed (model, temperature); every other key is kept in `extra` and passed
    to the backend uninterpreted.
    """

    __slots__ = ("model", "temperature", "extra")

    def __init__(
        self,
        *,
        model: str | None = None,
        temperature: float | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.model = model
        self.temperature = temperature
        self.extra = dict(extra or {})

    @classmethod
    def from_raw(cls, raw: dict[str, Any] | None) -> "ModelConfig":
        """
        Sanitize a client-supplied config bag.
        Numeric keys are coerced to float; a value that does not parse drops the key instead of
        failing the request. An empty model name counts as unspecified.
        """
        raw = dict(raw or {})
        numeric: dict[str, float] = {}
        for key in NUMERIC_CONFIG_KEYS:
            if key not in raw:
                continue
            parsed = _coerce_float(raw.pop(key))
            if parsed is not None:
                numeric[key] = parsed
        model = raw.pop("model", None)
        if model == "":
            model = None
        return cls(model=model, temperature=numeric.get("temperature"), extra=raw)

    def with_model(self, model: str) -> "ModelConfig":
        return ModelConfig(model=model, temperature=self.temperature, extra=self.extra)

    def options(self) -> dict[str, Any]:
        """Generation options for the backend: passthrough keys plus typed numeric fields that are set."""
        out = dict(self.extra)
        if self.temperature is not None:
            out["temperature"] = self.temperature
        return out

    def to_dict(self) -> dict[str, Any]:
        out = self.options()
        if self.model is not None:
            out["model"] = self.model
        return out
