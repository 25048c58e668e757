"""
Active Session Registry

Tracks the feedback sessions currently waiting on a human. Each request
registers its session on entry and removes it on every exit path through
track(), so a failed or cancelled request never leaves an entry behind.
"""

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List, Optional

from ..config import SESSION_MAX_AGE_MS
from ..models import FeedbackSession

logger = logging.getLogger(__name__)


class SessionRegistry:
    """In-memory map of session ID to in-flight FeedbackSession."""

    def __init__(self, max_age_ms: int = SESSION_MAX_AGE_MS):
        self._sessions: Dict[str, FeedbackSession] = {}
        self.max_age_ms = max_age_ms
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def get(self, session_id: str) -> Optional[FeedbackSession]:
        return self._sessions.get(session_id)

    def session_ids(self) -> List[str]:
        return list(self._sessions)

    async def register(self, session: FeedbackSession) -> None:
        async with self._lock:
            self._sessions[session.id] = session
            logger.debug(f"Registered session {session.id}, active sessions: {len(self._sessions)}")

    async def remove(self, session_id: str) -> bool:
        """Remove a session; returns False if it was not registered."""
        async with self._lock:
            removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.debug(f"Removed session {session_id}")
        return removed

    async def cleanup_expired(self, now_ms: Optional[int] = None) -> int:
        """Drop sessions older than max_age_ms and return how many were dropped."""
        if now_ms is None:
            now_ms = int(time.time() * 1000)

        async with self._lock:
            expired = [
                session_id
                for session_id, session in self._sessions.items()
                if now_ms - session.get_snapshot().start_time > self.max_age_ms
            ]
            for session_id in expired:
                del self._sessions[session_id]

        for session_id in expired:
            logger.info(f"Cleaned up expired session {session_id}")
        if expired:
            logger.info(
                f"Cleaned up {len(expired)} expired sessions, remaining: {len(self._sessions)}"
            )
        return len(expired)

    def clear(self) -> int:
        """Drop every session. Used at shutdown."""
        count = len(self._sessions)
        self._sessions.clear()
        return count

    @asynccontextmanager
    async def track(self, session: FeedbackSession) -> AsyncIterator[FeedbackSession]:
        """Register a session for the duration of the block."""
        await self.register(session)
        try:
            yield session
        finally:
            await self.remove(session.id)
            await self.cleanup_expired()
            logger.info(f"Session {session.id} finalized, active sessions: {len(self._sessions)}")
