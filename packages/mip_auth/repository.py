import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .dto import AuthToken, User


class UserRepository(ABC):
    """
    Interface for user and token storage.
    """
    @abstractmethod
    def add_user(self, user: User) -> None:
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    def save_token(self, token: AuthToken) -> None:
        pass

    @abstractmethod
    def find_token(self, token: str) -> Optional[AuthToken]:
        pass

    @abstractmethod
    def delete_token(self, token: str) -> None:
        pass


class MemoryUserRepository(UserRepository):
    """
    In-memory implementation of UserRepository.
    Used for local development and testing.
    """
    def __init__(self):
        self._users: Dict[str, User] = {}
        self._emails: Dict[str, str] = {}  # lower-cased email -> user id
        self._tokens: Dict[str, AuthToken] = {}
        self._lock = threading.Lock()

    def add_user(self, user: User) -> None:
        with self._lock:
            self._users[user.id] = user
            self._emails[user.email.lower()] = user.id

    def find_by_email(self, email: str) -> Optional[User]:
        user_id = self._emails.get(email.lower())
        return self._users.get(user_id) if user_id else None

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def save_token(self, token: AuthToken) -> None:
        with self._lock:
            self._tokens[token.token] = token

    def find_token(self, token: str) -> Optional[AuthToken]:
        return self._tokens.get(token)

    def delete_token(self, token: str) -> None:
        with self._lock:
            self._tokens.pop(token, None)
