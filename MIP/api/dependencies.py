from functools import lru_cache

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from packages.mip_auth.dto import User
from packages.mip_auth.repository import UserRepository
from packages.mip_auth.service import AuthService
from packages.mip_core.config import MIPConfig
from packages.mip_core.errors import AuthenticationError, ConfigurationError
from packages.mip_qgen.generator import QuestionGenerator
from packages.mip_feedback.engine import FeedbackScorer
from packages.mip_service.concurrency import ConcurrencyManager
from packages.mip_service.interview_service import InterviewService
from packages.mip_session.repository import SessionStore
from packages.mip_session.infrastructure.memory_repo import MemorySessionStore
from packages.mip_session.infrastructure.json_file_repo import JsonFileSessionStore
from packages.mip_session.infrastructure.sql_repo import SqlSessionStore

bearer: HTTPBearer = HTTPBearer(auto_error=False)


# Per-app state is set up by create_app; each app owns its config and stores.

def get_config(request: Request) -> MIPConfig:
    return request.app.state.config

# --- Core (pure) ---

@lru_cache
def get_question_generator() -> QuestionGenerator:
    return QuestionGenerator()


@lru_cache
def get_feedback_scorer() -> FeedbackScorer:
    return FeedbackScorer()

# --- Repositories (Persistence) ---

def get_session_store(request: Request) -> SessionStore:
    """
    Session Store of the running app.
    Shared across requests to keep state.
    """
    return request.app.state.session_store


def build_session_store(config: MIPConfig) -> SessionStore:
    """Instantiate the backend named by SESSION_STORE_BACKEND."""
    backend = config.SESSION_STORE_BACKEND
    if backend == "memory":
        return MemorySessionStore()
    if backend == "json":
        return JsonFileSessionStore(file_path=config.SESSION_STORE_PATH)
    if backend == "sql":
        return SqlSessionStore(database_url=config.DATABASE_URL)
    raise ConfigurationError(f"Unknown session store backend: {backend}")


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.user_repository


def get_concurrency_manager(request: Request) -> ConcurrencyManager:
    return request.app.state.concurrency_manager

# --- Domain Services (Application Logic) ---

def get_auth_service(
    repository: UserRepository = Depends(get_user_repository),
    config: MIPConfig = Depends(get_config),
) -> AuthService:
    return AuthService(repository=repository, token_ttl_minutes=config.TOKEN_TTL_MINUTES)


def get_interview_service(
    store: SessionStore = Depends(get_session_store),
    question_generator: QuestionGenerator = Depends(get_question_generator),
    feedback_scorer: FeedbackScorer = Depends(get_feedback_scorer),
    concurrency_manager: ConcurrencyManager = Depends(get_concurrency_manager),
) -> InterviewService:
    """
    Transient Interview Service.
    Injected with the app's store and core components.
    """
    return InterviewService(
        store=store,
        question_generator=question_generator,
        feedback_scorer=feedback_scorer,
        concurrency_manager=concurrency_manager,
    )

# --- Auth ---

def get_bearer_token(cred: HTTPAuthorizationCredentials | None = Depends(bearer)) -> str:
    if cred is None:
        raise AuthenticationError("Missing token")
    return cred.credentials


def get_current_user(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """Resolve the bearer token to the current user."""
    return auth_service.authenticate(token)
