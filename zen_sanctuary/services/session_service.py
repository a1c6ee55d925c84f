"""Session service for managing short-lived conversation memory."""
import logging
from collections import OrderedDict
from typing import Dict, List, Optional

from zen_sanctuary.utils.colored_logger import get_plugin_logger

logger = logging.getLogger(__name__)
plugin_logger = get_plugin_logger(__name__, 'session')

DEFAULT_SESSION = "default"


class SessionService:
    """Service for managing chat sessions.

    Each session holds a bounded sliding window of turns. At most
    ``max_sessions`` sessions are kept; the least recently used one is
    dropped to make room. Nothing survives a restart.
    """

    def __init__(self, history_limit: int = 12, max_sessions: int = 100):
        """Initialize session service.

        Args:
            history_limit: Maximum number of turns kept per session
            max_sessions: Maximum number of sessions held at once
        """
        self.history_limit = history_limit
        self.max_sessions = max(max_sessions, 1)
        self._sessions: "OrderedDict[str, List[Dict]]" = OrderedDict()

    @staticmethod
    def _key(session_id: Optional[str]) -> str:
        return session_id or DEFAULT_SESSION

    def __len__(self) -> int:
        return len(self._sessions)

    def get_history(self, session_id: Optional[str] = None) -> List[Dict]:
        """Get a copy of the chat history for a session.

        Args:
            session_id: Session identifier (None means the default session)

        Returns:
            List of turn dicts, oldest first
        """
        key = self._key(session_id)
        if key not in self._sessions:
            return []
        self._sessions.move_to_end(key)
        return list(self._sessions[key])

    def append_exchange(self, session_id: Optional[str], user_text: str, assistant_text: str) -> None:
        """Record one user/assistant exchange and trim to the limit.

        Args:
            session_id: Session identifier
            user_text: The user's message as typed
            assistant_text: The model's reply
        """
        key = self._key(session_id)
        history = self._sessions.setdefault(key, [])
        self._sessions.move_to_end(key)
        history.append({"role": "user", "content": user_text})
        history.append({"role": "assistant", "content": assistant_text})

        if len(history) > self.history_limit:
            self._sessions[key] = history[-self.history_limit:] if self.history_limit else []
        logger.debug(f"Session {key} now holds {len(self._sessions[key])} turns")

        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            plugin_logger.info(f"Evicted idle session {evicted} ({self.max_sessions} max)")

    def clear(self, session_id: Optional[str] = None) -> None:
        """Forget a session's history."""
        key = self._key(session_id)
        self._sessions.pop(key, None)
        plugin_logger.info(f"Cleared session {key}")
