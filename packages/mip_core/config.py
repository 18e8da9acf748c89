from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from packages.mip_core.errors import ConfigurationError


class MIPConfig(BaseSettings):
    """
    Application-wide settings.
    Values are read from the environment and the .env file.
    """
    PROJECT_NAME: str = "MIP Mock Interview"
    VERSION: str = "0.1.0"

    # Session persistence
    SESSION_STORE_BACKEND: Literal["memory", "json", "sql"] = "memory"
    SESSION_STORE_PATH: str = "data/sessions.json"
    DATABASE_URL: str = "sqlite:///data/mip.db"

    # Auth tokens live for 7 days
    TOKEN_TTL_MINUTES: int = 60 * 24 * 7

    CLIENT_ORIGIN: str = "http://localhost:5173"
    LOG_DIR: str = "logs"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"  # unknown environment variables are ignored
    )

    @classmethod
    def load(cls) -> "MIPConfig":
        """
        Load settings, wrapping any failure in ConfigurationError.
        """
        try:
            return cls()
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e
