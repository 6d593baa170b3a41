"""In-memory configuration sessions.

A session holds the mutable per-user state: the server pool, the
deployment parameters, the multi-vendor target list and the optional
project details. Mutations on one session are serialized by its lock.
"""

import logging
import threading
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, UTC
from typing import Iterator, Optional

from dot1x_app.core.exceptions import SessionNotFoundError
from dot1x_app.core.server_pool import ServerPool
from dot1x_app.core.targets import TargetList
from dot1x_app.schemas.deployment import DeploymentParameters
from dot1x_app.schemas.targets import ProjectMetadata

logger = logging.getLogger(__name__)


@dataclass
class ConfigSession:
    id: str
    servers: ServerPool = field(default_factory=ServerPool.with_primary)
    targets: TargetList = field(default_factory=TargetList)
    parameters: Optional[DeploymentParameters] = None
    project: Optional[ProjectMetadata] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)


class SessionStore:
    """Thread-safe registry of configuration sessions."""

    def __init__(self):
        self._sessions: dict[str, ConfigSession] = {}
        self._lock = threading.Lock()

    def create(self) -> ConfigSession:
        session = ConfigSession(id=uuid.uuid4().hex)
        with self._lock:
            self._sessions[session.id] = session
        logger.info(f"Created configuration session {session.id}")
        return session

    def get(self, session_id: str) -> ConfigSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def delete(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFoundError(session_id)
        logger.info(f"Deleted configuration session {session_id}")

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)

    @contextmanager
    def locked(self, session_id: str) -> Iterator[ConfigSession]:
        """Hold a session's lock for a compound read or mutation."""
        session = self.get(session_id)
        with session.lock:
            yield session


_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Get the process-wide session store."""
    global _store
    if _store is None:
        _store = SessionStore()
    return _store
