"""
Chat session store: in-memory turn history per chat id, for context across requests.
One instance per process, created at startup and injected into routes; tests build their own.
"""
import logging
import uuid
from collections.abc import Iterable

from app.core.errors import NotFound
from app.models.chat import Turn

logger = logging.getLogger(__name__)


class SessionStore:
    """Maps chat id -> ordered list of turns. Turns are only ever appended."""

    def __init__(self) -> None:
        self._sessions: dict[str, list[Turn]] = {}

    def create(self) -> str:
        """Allocate a new chat id (UUID hex) with an empty history."""
        session_id = uuid.uuid4().hex
        while session_id in self._sessions:
            session_id = uuid.uuid4().hex
        self._sessions[session_id] = []
        logger.info("Created chat session %s", session_id)
        return session_id

    def exists(self, session_id: str) -> bool:
        return session_id in self._sessions

    def _turns(self, session_id: str) -> list[Turn]:
        turns = self._sessions.get(session_id)
        if turns is None:
            raise NotFound(f"Chat {session_id} not found")
        return turns

    def append(self, session_id: str, turn: Turn) -> None:
        self.extend(session_id, (turn,))

    def extend(self, session_id: str, turns: Iterable[Turn]) -> None:
        """
        Append turns in order. No await happens in here, so a pair appended together stays
        contiguous even when other requests for the same chat are in flight.
        """
        history = self._turns(session_id)
        new_turns = list(turns)
        history.extend(new_turns)
        logger.debug("Chat %s: appended turns %s", session_id, [t.id for t in new_turns])

    def get(self, session_id: str) -> list[dict[str, str]]:
        """Full history as [{ role, content, timestamp }, ...] (copies, without internal ids)."""
        return [t.to_public() for t in self._turns(session_id)]

    def __len__(self) -> int:
        return len(self._sessions)
