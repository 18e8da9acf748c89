from typing import List, Optional, Sequence

from packages.mip_core.errors import ConflictError, NotFoundError, ValidationError
from packages.mip_core.logging import get_logger
from packages.mip_dto.interview import Answer, InterviewSetup, Question
from packages.mip_feedback.engine import FeedbackScorer
from packages.mip_qgen.generator import QuestionGenerator
from packages.mip_session.dto import InterviewSession
from packages.mip_session.repository import SessionStore
from packages.mip_session.state import SessionStatus
from .concurrency import ConcurrencyManager

logger = get_logger("mip.service")

SAMPLE_SETUP = InterviewSetup(
    job_title="Frontend Developer",
    job_description="Building responsive web applications using React",
    tech_stack=["React", "JavaScript", "CSS"],
    years_of_experience=2,
)

SAMPLE_QUESTIONS = [
    Question(
        id="sample_q1",
        text="Explain the virtual DOM in React and why it's important.",
        keywords=["efficiency", "performance", "rendering", "comparison", "updates"],
    ),
    Question(
        id="sample_q2",
        text="What are React hooks and how have you used them?",
        keywords=["useState", "useEffect", "custom hooks", "state management"],
    ),
]


class InterviewService:
    """
    Application Service for interview sessions.
    Responsible for:
    1. Request validation the core does not perform
    2. Calling the question generator and feedback scorer
    3. Persisting sessions and driving the status lifecycle
    """
    def __init__(
        self,
        store: SessionStore,
        question_generator: Optional[QuestionGenerator] = None,
        feedback_scorer: Optional[FeedbackScorer] = None,
        concurrency_manager: Optional[ConcurrencyManager] = None,
    ):
        self.store = store
        self.question_generator = question_generator or QuestionGenerator()
        self.feedback_scorer = feedback_scorer or FeedbackScorer()
        self.concurrency_manager = concurrency_manager or ConcurrencyManager()

    def create_interview(self, user_id: str, setup: InterviewSetup) -> InterviewSession:
        if not setup.job_title:
            raise ValidationError("Job title is required")
        if not setup.tech_stack:
            raise ValidationError("Please add at least one technology")

        questions = self.question_generator.generate(setup)
        session = self.store.create(InterviewSession(
            user_id=user_id,
            setup=setup,
            questions=questions,
            status=SessionStatus.CREATED,
        ))
        logger.info(f"Interview {session.id} created for user {user_id} with {len(questions)} questions")
        return session

    def list_interviews(self, user_id: str) -> List[InterviewSession]:
        return self.store.list_by_user(user_id)

    def get_interview(self, user_id: str, session_id: str) -> InterviewSession:
        session = self.store.get_by_id(session_id)
        # Another user's session is reported exactly like a missing one
        if session is None or session.user_id != user_id:
            raise NotFoundError("Interview not found")
        return session

    def submit_answers(self, user_id: str, session_id: str, answers: Sequence[Answer]) -> InterviewSession:
        """
        Score the answers once and complete the session.
        """
        try:
            with self.concurrency_manager.acquire_lock(session_id):
                session = self.get_interview(user_id, session_id)
                if session.is_completed:
                    raise ConflictError("Interview has already been completed")

                self._validate_answers(session.questions, answers)

                session.answers = list(answers)
                session.feedback = self.feedback_scorer.score(session.questions, answers)
                session.status = SessionStatus.COMPLETED
                session = self.store.update(session)
        except BlockingIOError as e:
            raise ConflictError("Answers for this interview are already being submitted") from e

        logger.info(f"Interview {session_id} completed with {len(session.feedback)} feedback items")
        return session

    def create_sample(self, user_id: str) -> InterviewSession:
        # Check and create under one per-user lock so two requests cannot both see an empty list
        try:
            with self.concurrency_manager.acquire_lock(f"sample:{user_id}"):
                if self.store.list_by_user(user_id):
                    raise ValidationError("User already has interviews")

                session = self.store.create(InterviewSession(
                    user_id=user_id,
                    setup=SAMPLE_SETUP,
                    questions=list(SAMPLE_QUESTIONS),
                    status=SessionStatus.CREATED,
                ))
        except BlockingIOError as e:
            raise ConflictError("A sample interview is already being created") from e

        logger.info(f"Sample interview {session.id} created for user {user_id}")
        return session

    @staticmethod
    def _validate_answers(questions: Sequence[Question], answers: Sequence[Answer]):
        question_ids = {q.id for q in questions}
        seen = set()
        for answer in answers:
            if answer.question_id not in question_ids:
                raise ValidationError(
                    f"Unknown question id: {answer.question_id}",
                    details={"question_id": answer.question_id},
                )
            if answer.question_id in seen:
                raise ValidationError(
                    f"Duplicate answer for question: {answer.question_id}",
                    details={"question_id": answer.question_id},
                )
            seen.add(answer.question_id)

        answered = {a.question_id for a in answers if a.text.strip()}
        missing = [q.id for q in questions if q.id not in answered]
        if missing:
            raise ValidationError(
                "Please answer all questions before submitting",
                details={"missing_question_ids": missing},
            )
