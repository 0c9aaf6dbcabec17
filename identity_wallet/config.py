"""Configuration management for the identity wallet."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urlparse, urlunparse

from decouple import Choices
from decouple import config


class Environment(Enum):
    """Supported deployment environments."""

    DEVELOPMENT = "development"
    CI = "CI"
    PRODUCTION = "production"


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class Config:
    """Configuration for the identity wallet."""

    # Required fields
    database_url: str
    database_name: str = "identity_wallet_db"

    # Environment configuration
    environment: Environment = Environment.DEVELOPMENT

    # Database configuration
    database_echo: bool = False

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(
            config("ENVIRONMENT", default="development", cast=Choices(["development", "CI", "production"]))
        )

        return cls(
            # Required
            database_url=config("DATABASE_URL"),
            database_name=config("DATABASE_NAME", default="identity_wallet_db"),
            # Environment
            environment=env,
            # Database
            database_echo=config("DATABASE_ECHO", default=False, cast=bool),
            # Logging
            log_level=config("LOG_LEVEL", default="INFO", cast=Choices(LOG_LEVELS)),
            log_format=config("LOG_FORMAT", default="json", cast=Choices(["json", "text"])),
        )

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == Environment.CI

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    def get_database_url(self) -> str:
        """Construct the SQLAlchemy async database URL.

        PostgreSQL URLs get the asyncpg driver and have their database name
        replaced by ``database_name``. SQLite URLs get the aiosqlite driver
        and keep their file path.
        """
        parsed = urlparse(self.database_url)

        scheme = parsed.scheme
        if scheme.startswith("sqlite"):
            return "sqlite+aiosqlite" + self.database_url[len(scheme):]

        if scheme in ("postgres", "postgresql"):
            scheme = "postgresql+asyncpg"

        # The path includes the leading '/'
        path = f"/{self.database_name}"

        return urlunparse(
            (scheme, parsed.netloc, path, parsed.params, parsed.query, parsed.fragment)
        )


# Global configuration instance
_config: Optional[Config] = None


def init_config() -> Config:
    """Initialize the global configuration from the environment."""
    global _config
    _config = Config.from_env()
    return _config


def get_config() -> Config:
    """Get the global configuration instance."""
    if _config is None:
        raise RuntimeError("Configuration not initialized. Call init_config() first.")
    return _config


def is_config_initialized() -> bool:
    """Check whether the global configuration has been initialized."""
    return _config is not None


def reset_config() -> None:
    """Reset the global configuration. Used by tests."""
    global _config
    _config = None
