"""Shared types for LLM providers: provider ids, chat message shape, response text helpers."""
import re
from enum import Enum
from typing import Any

# Matches the first <think>...</think> block, across newlines, non-greedy
_THINK_BLOCK = re.compile(r"<think>[\s\S]*?</think>")


class ProviderId(str, Enum):
    OLLAMA = "ollama"
    HUGGINGFACE = "huggingface"


def build_messages(message: str, history: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Prior turns as { role, content } followed by the new user message."""
    messages = [{"role": str(t["role"]), "content": str(t["content"])} for t in history]
    messages.append({"role": "user", "content": message})
    return messages


def strip_reasoning(text: str) -> str:
    """Remove the first <think>...</think> block and trim. Text without one is only trimmed."""
    return _THINK_BLOCK.sub("", text, count=1).strip()
