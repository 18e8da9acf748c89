from .dto import User, AuthToken
from .repository import UserRepository, MemoryUserRepository
from .service import AuthService

__all__ = [
    "User",
    "AuthToken",
    "UserRepository",
    "MemoryUserRepository",
    "AuthService",
]
