import threading
from typing import Dict, List, Optional

from packages.mip_core.errors import ConflictError, NotFoundError
from packages.mip_session.dto import InterviewSession
from packages.mip_session.repository import SessionStore, sort_newest_first


class MemorySessionStore(SessionStore):
    """
    In-memory implementation of SessionStore.
    Used for local development and testing.
    Copies on the way in and out so callers never share stored objects.
    """
    def __init__(self):
        self._store: Dict[str, InterviewSession] = {}
        self._lock = threading.Lock()

    def create(self, session: InterviewSession) -> InterviewSession:
        with self._lock:
            if session.id in self._store:
                raise ConflictError(f"Session {session.id} already exists")
            self._store[session.id] = session.model_copy(deep=True)
        return session.model_copy(deep=True)

    def get_by_id(self, session_id: str) -> Optional[InterviewSession]:
        stored = self._store.get(session_id)
        return stored.model_copy(deep=True) if stored else None

    def list_by_user(self, user_id: str) -> List[InterviewSession]:
        """
        Iterates through the whole store (O(N)).
        """
        with self._lock:
            owned = [s.model_copy(deep=True) for s in self._store.values() if s.user_id == user_id]
        return sort_newest_first(owned)

    def update(self, session: InterviewSession) -> InterviewSession:
        with self._lock:
            if session.id not in self._store:
                raise NotFoundError(f"Session {session.id} not found")
            self._store[session.id] = session.model_copy(deep=True)
        return session.model_copy(deep=True)
