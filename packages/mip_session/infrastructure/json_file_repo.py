import json
import os
import tempfile
import threading
from typing import List, Optional

from packages.mip_core.errors import ConflictError, NotFoundError, StorageError
from packages.mip_core.logging import get_logger
from packages.mip_session.dto import InterviewSession
from packages.mip_session.repository import SessionStore, sort_newest_first

logger = get_logger("mip.session.json_repo")


class JsonFileSessionStore(SessionStore):
    """
    File-based implementation of SessionStore using a single JSON file.
    The whole file is rewritten on every change; fine for local use and
    small data sets, swap for the SQL store otherwise.
    """

    def __init__(self, file_path: str):
        self.file_path = file_path
        self._lock = threading.Lock()
        self._ensure_file_exists()

    def _ensure_file_exists(self):
        if not os.path.exists(self.file_path):
            directory = os.path.dirname(self.file_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.file_path, 'w', encoding='utf-8') as f:
                json.dump([], f)

    def _load_all(self) -> List[InterviewSession]:
        try:
            with open(self.file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load sessions from {self.file_path}: {e}")
            raise StorageError(f"Failed to load sessions from {self.file_path}") from e
        return [InterviewSession.model_validate(item) for item in data]

    def _save_all(self, sessions: List[InterviewSession]):
        data = [s.to_wire() for s in sessions]
        # Write a sibling temp file, then swap it in so readers never see a partial file
        directory = os.path.dirname(os.path.abspath(self.file_path))
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=".sessions-", suffix=".tmp", dir=directory)
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            logger.error(f"Failed to save sessions to {self.file_path}: {e}")
            raise StorageError(f"Failed to save sessions to {self.file_path}") from e

    def create(self, session: InterviewSession) -> InterviewSession:
        with self._lock:
            sessions = self._load_all()
            if any(s.id == session.id for s in sessions):
                raise ConflictError(f"Session {session.id} already exists")
            sessions.append(session)
            self._save_all(sessions)
        logger.info(f"Saved new session {session.id} for user {session.user_id}.")
        return session.model_copy(deep=True)

    def get_by_id(self, session_id: str) -> Optional[InterviewSession]:
        with self._lock:
            sessions = self._load_all()
        for s in sessions:
            if s.id == session_id:
                return s
        return None

    def list_by_user(self, user_id: str) -> List[InterviewSession]:
        with self._lock:
            sessions = self._load_all()
        return sort_newest_first([s for s in sessions if s.user_id == user_id])

    def update(self, session: InterviewSession) -> InterviewSession:
        with self._lock:
            sessions = self._load_all()
            for i, s in enumerate(sessions):
                if s.id == session.id:
                    sessions[i] = session
                    self._save_all(sessions)
                    logger.info(f"Updated session {session.id}.")
                    return session.model_copy(deep=True)
        logger.warning(f"Attempted to update non-existent session {session.id}.")
        raise NotFoundError(f"Session {session.id} not found")
