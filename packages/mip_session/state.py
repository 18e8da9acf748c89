from enum import Enum


class SessionStatus(str, Enum):
    """
    Interview session status.
    CREATED -> COMPLETED once answers are scored.
    """
    CREATED = "created"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
