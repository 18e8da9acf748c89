from .state import SessionStatus
from .dto import InterviewSession
from .repository import SessionStore

__all__ = [
    "SessionStatus",
    "InterviewSession",
    "SessionStore",
]
