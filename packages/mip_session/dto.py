import uuid
from datetime import datetime, timezone
from typing import List

from pydantic import Field

from packages.mip_core.dto import BaseDTO
from packages.mip_dto.interview import Answer, Feedback, InterviewSetup, Question
from .state import SessionStatus


def new_session_id() -> str:
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InterviewSession(BaseDTO):
    """
    One interview attempt.
    Snapshot stored by every SessionStore implementation.
    """
    id: str = Field(default_factory=new_session_id)
    user_id: str
    setup: InterviewSetup
    questions: List[Question] = Field(default_factory=list)
    answers: List[Answer] = Field(default_factory=list)
    feedback: List[Feedback] = Field(default_factory=list)
    status: SessionStatus = SessionStatus.CREATED
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def is_completed(self) -> bool:
        return self.status == SessionStatus.COMPLETED
