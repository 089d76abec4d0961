"""In-memory session store.

Holds one Session per uploaded document for the lifetime of the process.
Every operation runs as a single critical section under a lock, so readers
always see whole sessions and whole question/answer pairs.
"""

import logging
import threading
import uuid
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

from errors import SessionNotFoundError
from services.storage import FileStorage
from services.types import ConversationTurn, Session

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SessionStore:
    """Process-wide mapping from session id to document state.

    Args:
        file_storage: Releases the raw upload when a session goes away.
        ttl: Optional lifetime measured from upload. Expired sessions are
            invisible to lookups and purged on the next create.
        clock: Time source, injectable for tests.
    """

    def __init__(
        self,
        file_storage: FileStorage | None = None,
        ttl: timedelta | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._file_storage = file_storage
        self._ttl = ttl
        self._clock = clock
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            now = self._clock()
            return sum(1 for s in self._sessions.values() if not self._expired(s, now))

    def create(
        self,
        filename: str,
        content_type: str,
        text: str,
        storage_path: Path | None = None,
    ) -> str:
        """Insert a new session with empty history and return its id."""
        session_id = str(uuid.uuid4())
        now = self._clock()
        session = Session(
            session_id=session_id,
            filename=filename,
            content_type=content_type,
            storage_path=storage_path,
            text=text,
            created_at=now,
        )

        with self._lock:
            expired = self._pop_expired(now)
            self._sessions[session_id] = session

        for old in expired:
            self._release_file(old)

        logger.info("Created session %s for %s", session_id, filename)
        return session_id

    def get(self, session_id: str) -> Session:
        """Look up a session.

        Raises:
            SessionNotFoundError: Unknown or expired id.
        """
        with self._lock:
            return self._get_locked(session_id)

    def history(self, session_id: str) -> tuple[ConversationTurn, ...]:
        """Return an immutable snapshot of a session's history."""
        with self._lock:
            return tuple(self._get_locked(session_id).history)

    def append_turns(
        self, session_id: str, user_content: str, model_content: str
    ) -> tuple[ConversationTurn, ...]:
        """Append one question/answer pair and return the resulting history."""
        with self._lock:
            session = self._get_locked(session_id)
            session.history.extend(
                (
                    ConversationTurn(role="user", content=user_content),
                    ConversationTurn(role="model", content=model_content),
                )
            )
            return tuple(session.history)

    def delete(self, session_id: str) -> None:
        """Remove a session and release its stored file.

        Raises:
            SessionNotFoundError: Unknown or expired id.
        """
        with self._lock:
            self._get_locked(session_id)
            session = self._sessions.pop(session_id)

        self._release_file(session)
        logger.info("Deleted session %s", session_id)

    def _get_locked(self, session_id: str) -> Session:
        session = self._sessions.get(session_id)
        if session is None or self._expired(session, self._clock()):
            raise SessionNotFoundError(f"Session not found: {session_id}")
        return session

    def _expired(self, session: Session, now: datetime) -> bool:
        return self._ttl is not None and now - session.created_at >= self._ttl

    def _pop_expired(self, now: datetime) -> list[Session]:
        expired_ids = [
            sid for sid, s in self._sessions.items() if self._expired(s, now)
        ]
        return [self._sessions.pop(sid) for sid in expired_ids]

    def _release_file(self, session: Session) -> None:
        if self._file_storage is not None:
            self._file_storage.delete(session.storage_path)
