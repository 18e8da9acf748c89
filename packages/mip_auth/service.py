from typing import Optional, Tuple

from packages.mip_core.errors import AuthenticationError, ConflictError, ValidationError
from packages.mip_core.logging import get_logger
from .dto import AuthToken, User
from .repository import UserRepository
from .security import hash_password, new_token, token_expiry, utc_now, verify_password

logger = get_logger("mip.auth")

DEFAULT_TOKEN_TTL_MINUTES = 60 * 24 * 7


class AuthService:
    """
    Signup / login with stored opaque bearer tokens.
    """

    def __init__(self, repository: UserRepository, token_ttl_minutes: int = DEFAULT_TOKEN_TTL_MINUTES):
        self.repository = repository
        self.token_ttl_minutes = token_ttl_minutes

    def signup(self, email: str, password: str, name: Optional[str] = None) -> Tuple[User, str]:
        email = email.strip()
        if not email or not password:
            raise ValidationError("Email and password are required")

        if self.repository.find_by_email(email) is not None:
            raise ConflictError("User with this email already exists")

        user = User(email=email, name=name, password_hash=hash_password(password))
        self.repository.add_user(user)
        logger.info(f"User registered: {user.id}")
        return user, self._issue_token(user)

    def login(self, email: str, password: str) -> Tuple[User, str]:
        user = self.repository.find_by_email(email.strip())
        if user is None or not verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid email or password")
        logger.info(f"User logged in: {user.id}")
        return user, self._issue_token(user)

    def authenticate(self, token: str) -> User:
        """Resolve a bearer token to its user."""
        stored = self.repository.find_token(token)
        if stored is None or stored.is_expired():
            raise AuthenticationError("Invalid/expired token")

        user = self.repository.find_by_id(stored.user_id)
        if user is None:
            raise AuthenticationError("User not found")
        return user

    def logout(self, token: str) -> None:
        self.repository.delete_token(token)

    def _issue_token(self, user: User) -> str:
        token = new_token()
        self.repository.save_token(AuthToken(
            token=token,
            user_id=user.id,
            expires_at=token_expiry(self.token_ttl_minutes, utc_now()),
        ))
        return token
