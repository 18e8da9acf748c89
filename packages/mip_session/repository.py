from abc import ABC, abstractmethod
from typing import List, Optional

from .dto import InterviewSession


class SessionStore(ABC):
    """
    Interface for interview session persistence.
    Implementations are interchangeable; the question generator and
    feedback scorer never depend on them.
    """
    @abstractmethod
    def create(self, session: InterviewSession) -> InterviewSession:
        """Persist a new session and return the stored copy."""
        pass

    @abstractmethod
    def get_by_id(self, session_id: str) -> Optional[InterviewSession]:
        pass

    @abstractmethod
    def list_by_user(self, user_id: str) -> List[InterviewSession]:
        """All sessions owned by the user, newest first."""
        pass

    @abstractmethod
    def update(self, session: InterviewSession) -> InterviewSession:
        """
        Replace a stored session.
        Raises NotFoundError if the session does not exist.
        """
        pass


def sort_newest_first(sessions: List[InterviewSession]) -> List[InterviewSession]:
    return sorted(sessions, key=lambda s: s.created_at, reverse=True)
