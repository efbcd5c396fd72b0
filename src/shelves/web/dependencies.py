"""FastAPI dependency injection for editing sessions."""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from shelves.application.session import DividerSession
from shelves.web.exceptions import SessionNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 256


class SessionRegistry:
    """In-process store of open editing sessions, keyed by a random id.

    At most ``max_sessions`` stay open. Opening one more closes the session
    that was used least recently.
    """

    def __init__(self, max_sessions: int = DEFAULT_MAX_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, DividerSession] = OrderedDict()

    def open(self, session: DividerSession) -> str:
        session_id = uuid.uuid4().hex
        self._sessions[session_id] = session
        logger.debug(f"Opened session {session_id}")
        while len(self._sessions) > self._max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info(f"Evicted idle session {evicted}")
        return session_id

    def get(self, session_id: str) -> DividerSession:
        try:
            session = self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None
        self._sessions.move_to_end(session_id)
        return session

    def close(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.debug(f"Closed session {session_id}")

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


@lru_cache(maxsize=1)
def get_session_registry() -> SessionRegistry:
    """Get the process-wide SessionRegistry instance."""
    return SessionRegistry()


SessionRegistryDep = Annotated[SessionRegistry, Depends(get_session_registry)]
