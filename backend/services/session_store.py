"""
In-memory editor sessions.

Sessions live in an LRU map capped at settings.MAX_SESSIONS; opening one
more evicts the least recently used. Nothing is persisted.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from uuid import uuid4

from backend.config import settings
from pagewright.kernel import EditorSession, Node

logger = logging.getLogger(__name__)


class SessionNotFound(Exception):
    def __init__(self, session_id: str) -> None:
        super().__init__(f"session not found: {session_id}")
        self.session_id = session_id


class SessionStore:
    def __init__(self, max_sessions: int, history_limit: int | None = None) -> None:
        self.max_sessions = max_sessions
        self.history_limit = history_limit
        self._sessions: OrderedDict[str, EditorSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self, tree: Node | None = None) -> tuple[str, EditorSession]:
        session_id = uuid4().hex
        session = EditorSession(tree, history_limit=self.history_limit)
        self._sessions[session_id] = session
        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("session_store: evicted %s (limit %d)", evicted, self.max_sessions)
        logger.info("session_store: opened %s (%d live)", session_id, len(self._sessions))
        return session_id, session

    def get(self, session_id: str) -> EditorSession:
        """Look up a session and mark it most recently used."""
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        self._sessions.move_to_end(session_id)
        return session

    def delete(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFound(session_id)
        logger.info("session_store: closed %s (%d live)", session_id, len(self._sessions))

    def clear(self) -> None:
        self._sessions.clear()


# Singleton instance
session_store = SessionStore(settings.MAX_SESSIONS, settings.HISTORY_LIMIT)
