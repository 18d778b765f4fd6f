"""In-process registry of match sessions."""

import logging
import time
import uuid

from mindi.api.match_handler import MatchHandler
from mindi.config import Settings
from mindi.config import settings as default_settings
from mindi.models.deck import validate_table_size
from mindi.models.enums import ErrorCode
from mindi.models.errors import MatchNotFoundError, MindiError

logger = logging.getLogger(__name__)


class SessionManager:
    """Keeps one MatchHandler per session id.

    Sessions are independent; nothing is shared between their matches.
    Clients poll instead of holding a connection, so there is no disconnect
    to clean up on. When the registry is full, finished matches and sessions
    left untouched for ``session_ttl`` seconds are reclaimed before a new
    session is refused.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize an empty registry."""
        self.settings = settings or default_settings
        self.sessions: dict[str, MatchHandler] = {}
        self._last_seen: dict[str, float] = {}

    async def create(self, table_size: int) -> tuple[str, MatchHandler]:
        """Start a match in a new session.

        Raises:
            InvalidTableSizeError: Unsupported table size
            MindiError: The registry is full and nothing could be reclaimed

        """
        validate_table_size(table_size)
        if len(self.sessions) >= self.settings.max_sessions:
            await self.reclaim()
        if len(self.sessions) >= self.settings.max_sessions:
            msg = f"Session limit of {self.settings.max_sessions} reached"
            raise MindiError(msg, ErrorCode.TOO_MANY_SESSIONS)

        handler = MatchHandler(self.settings)
        await handler.start_match(table_size)
        session_id = uuid.uuid4().hex
        self.sessions[session_id] = handler
        self._last_seen[session_id] = time.monotonic()
        logger.info("Session %s created (%d players)", session_id, table_size)
        return session_id, handler

    def get(self, session_id: str) -> MatchHandler:
        """Get a session's handler and mark it as in use."""
        handler = self.sessions.get(session_id)
        if handler is None:
            raise MatchNotFoundError(session_id)
        self._last_seen[session_id] = time.monotonic()
        return handler

    def is_reclaimable(self, session_id: str, now: float | None = None) -> bool:
        """Check if a session holds a finished match or has been idle too long."""
        match = self.sessions[session_id].match
        if match is None or match.is_over():
            return True
        idle = (now if now is not None else time.monotonic()) - self._last_seen[session_id]
        return idle >= self.settings.session_ttl

    async def reclaim(self) -> int:
        """Close finished and idle sessions. Returns how many were closed."""
        now = time.monotonic()
        stale = [sid for sid in self.sessions if self.is_reclaimable(sid, now)]
        for session_id in stale:
            await self.remove(session_id)
        if stale:
            logger.info("Reclaimed %d finished or idle session(s)", len(stale))
        return len(stale)

    async def remove(self, session_id: str) -> None:
        """Close and drop a session."""
        handler = self.get(session_id)
        await handler.close()
        del self.sessions[session_id]
        del self._last_seen[session_id]
        logger.info("Session %s closed", session_id)

    async def clear(self) -> None:
        """Close every session."""
        for session_id in list(self.sessions):
            await self.remove(session_id)


# Global session registry
session_manager = SessionManager()
