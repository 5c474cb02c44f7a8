"""In-memory session store. Keyed by session ID, bounded by idle TTL and capacity."""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from typing import Protocol

from models import GameSession, SecretWord

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL_SECONDS = 24 * 3600
DEFAULT_MAX_SESSIONS = 10_000


class SecretWordProvider(Protocol):
    async def fetch_random(self) -> SecretWord: ...


class SessionStore:
    """
    Process-local session map, constructed at startup and injected into routes.

    Entries are kept in least-recently-seen order so the capacity bound can
    drop the stalest session first. Nothing is persisted.
    """

    def __init__(
        self,
        *,
        ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._ttl = timedelta(seconds=ttl_seconds)
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, GameSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._sessions))

    def get(self, session_id: str, *, now: datetime | None = None) -> GameSession | None:
        now_dt = now or datetime.now(timezone.utc)
        self.evict_expired(now=now_dt)
        session = self._sessions.get(session_id)
        if session is not None:
            session.last_seen_at = now_dt
            self._sessions.move_to_end(session_id)
        return session

    async def get_or_create(
        self,
        session_id: str,
        word_source: SecretWordProvider,
        *,
        now: datetime | None = None,
    ) -> GameSession:
        """Return the live session for session_id, creating it with a fresh secret word."""
        session = self.get(session_id, now=now)
        if session is not None:
            return session

        # Word source errors propagate; nothing is stored for this id.
        secret = await word_source.fetch_random()
        existing = self._sessions.get(session_id)
        if existing is not None:
            # Another request created it while we were waiting on the word source.
            return existing

        now_dt = now or datetime.now(timezone.utc)
        session = GameSession(id=session_id, created_at=now_dt, last_seen_at=now_dt)
        session.assign_secret(secret)
        self._sessions[session_id] = session
        self._enforce_capacity()
        logger.info("[store] Session created: session_id=%s (live=%d)", session_id, len(self._sessions))
        return session

    def evict_expired(self, *, now: datetime | None = None) -> int:
        """Drop idle sessions from the stale end; stops at the first one still live."""
        now_dt = now or datetime.now(timezone.utc)
        cutoff = now_dt - self._ttl
        evicted = 0
        while self._sessions:
            sid, session = next(iter(self._sessions.items()))
            if session.last_seen_at >= cutoff:
                break
            del self._sessions[sid]
            evicted += 1
        if evicted:
            logger.info("[store] Evicted %d idle session(s).", evicted)
        return evicted

    def clear(self) -> None:
        self._sessions.clear()

    def _enforce_capacity(self) -> None:
        while len(self._sessions) > self._max_sessions:
            sid, _ = self._sessions.popitem(last=False)
            logger.warning("[store] Capacity %d reached; dropped session %s.", self._max_sessions, sid)
