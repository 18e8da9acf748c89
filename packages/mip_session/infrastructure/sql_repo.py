from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, Enum, String, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker

from packages.mip_core.errors import ConflictError, NotFoundError, StorageError
from packages.mip_core.logging import get_logger
from packages.mip_session.dto import InterviewSession
from packages.mip_session.repository import SessionStore
from packages.mip_session.state import SessionStatus

logger = get_logger("mip.session.sql_repo")


class Base(DeclarativeBase):
    pass


class InterviewRecord(Base):
    """Interview session table."""

    __tablename__ = "interviews"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    setup: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    questions: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    answers: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    feedback: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    status: Mapped[SessionStatus] = mapped_column(
        Enum(SessionStatus, values_callable=lambda e: [m.value for m in e]),
        default=SessionStatus.CREATED,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


def _to_record_fields(session: InterviewSession) -> dict[str, Any]:
    wire = session.to_wire()
    return {
        "user_id": session.user_id,
        "setup": wire["setup"],
        "questions": wire["questions"],
        "answers": wire["answers"],
        "feedback": wire["feedback"],
        "status": session.status,
        "created_at": session.created_at,
    }


def _to_session(record: InterviewRecord) -> InterviewSession:
    created_at = record.created_at
    # SQLite drops tzinfo; stored values are always UTC
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return InterviewSession.model_validate({
        "id": record.id,
        "userId": record.user_id,
        "setup": record.setup,
        "questions": record.questions,
        "answers": record.answers,
        "feedback": record.feedback,
        "status": record.status,
        "createdAt": created_at,
    })


def _ensure_sqlite_directory(engine: Engine) -> None:
    """File-backed SQLite needs its parent directory to exist."""
    if engine.url.get_backend_name() != "sqlite":
        return
    database = engine.url.database
    if not database or database == ":memory:" or database.startswith("file:"):
        return
    directory = os.path.dirname(os.path.abspath(database))
    os.makedirs(directory, exist_ok=True)


class SqlSessionStore(SessionStore):
    """
    SQLAlchemy implementation of SessionStore.
    Works with any database URL SQLAlchemy supports; tables are created on init.
    """

    def __init__(self, database_url: str | None = None, engine: Engine | None = None):
        if engine is None:
            if database_url is None:
                raise ValueError("database_url or engine is required")
            engine = create_engine(database_url, future=True)
        self.engine = engine
        self.session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        try:
            _ensure_sqlite_directory(engine)
            Base.metadata.create_all(engine)
        except (OSError, SQLAlchemyError) as e:
            logger.exception(f"Failed to initialize session database {engine.url!r}")
            raise StorageError(f"Failed to initialize session database {engine.url!r}") from e

    def create(self, session: InterviewSession) -> InterviewSession:
        try:
            with self.session_factory() as db:
                if db.get(InterviewRecord, session.id) is not None:
                    raise ConflictError(f"Session {session.id} already exists")
                db.add(InterviewRecord(id=session.id, **_to_record_fields(session)))
                db.commit()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to create session {session.id}")
            raise StorageError(f"Failed to create session {session.id}") from e
        logger.info(f"Interview created: {session.id} for user: {session.user_id}")
        return session.model_copy(deep=True)

    def get_by_id(self, session_id: str) -> InterviewSession | None:
        try:
            with self.session_factory() as db:
                record: InterviewRecord | None = db.get(InterviewRecord, session_id)
                return _to_session(record) if record is not None else None
        except SQLAlchemyError as e:
            logger.exception(f"Failed to load session {session_id}")
            raise StorageError(f"Failed to load session {session_id}") from e

    def list_by_user(self, user_id: str) -> list[InterviewSession]:
        stmt = (
            select(InterviewRecord)
            .where(InterviewRecord.user_id == user_id)
            .order_by(InterviewRecord.created_at.desc())
        )
        try:
            with self.session_factory() as db:
                return [_to_session(r) for r in db.execute(stmt).scalars()]
        except SQLAlchemyError as e:
            logger.exception(f"Failed to list sessions for user {user_id}")
            raise StorageError(f"Failed to list sessions for user {user_id}") from e

    def update(self, session: InterviewSession) -> InterviewSession:
        try:
            with self.session_factory() as db:
                record: InterviewRecord | None = db.get(InterviewRecord, session.id)
                if record is None:
                    raise NotFoundError(f"Session {session.id} not found")
                for field, value in _to_record_fields(session).items():
                    setattr(record, field, value)
                db.commit()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to update session {session.id}")
            raise StorageError(f"Failed to update session {session.id}") from e
        return session.model_copy(deep=True)
