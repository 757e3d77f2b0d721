"""Application configuration with environment-based settings."""
import os
from typing import Optional
from dotenv import load_dotenv


DEFAULT_SECRET_KEY = "dev-secret-key-change-in-production"


class Config:
    """Base configuration loaded from the environment."""

    load_dotenv()

    # Document store (Redis)
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    REDIS_KEY_PREFIX: str = os.getenv("REDIS_KEY_PREFIX", "library")

    # Pagination
    DEFAULT_PAGE_LIMIT: int = int(os.getenv("DEFAULT_PAGE_LIMIT", "20"))
    MAX_PAGE_LIMIT: int = int(os.getenv("MAX_PAGE_LIMIT", "100"))

    # Identity assertion headers set by the authenticating reverse proxy
    AUTH_HEADER_EXTERNAL_ID: str = os.getenv("AUTH_HEADER_EXTERNAL_ID", "X-Forwarded-User")
    AUTH_HEADER_EMAIL: str = os.getenv("AUTH_HEADER_EMAIL", "X-Forwarded-Email")
    AUTH_HEADER_NAME: str = os.getenv("AUTH_HEADER_NAME", "X-Forwarded-Preferred-Username")
    # Header login stays disabled until the proxy is given this shared secret
    AUTH_PROXY_SECRET: Optional[str] = os.getenv("AUTH_PROXY_SECRET")
    AUTH_PROXY_SECRET_HEADER: str = os.getenv("AUTH_PROXY_SECRET_HEADER", "X-Auth-Proxy-Secret")

    # Rate Limiting
    RATELIMIT_STORAGE_URL: str = os.getenv("RATELIMIT_STORAGE_URL", "redis://localhost:6379/2")
    RATELIMIT_ENABLED: bool = os.getenv("RATELIMIT_ENABLED", "true").lower() == "true"
    RATELIMIT_DEFAULT: str = os.getenv("RATELIMIT_DEFAULT", "1000 per hour;100 per minute")

    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    ENV_NAME: str = os.getenv("FLASK_ENV", "development").lower()
    ENABLE_METRICS: bool = os.getenv("ENABLE_METRICS", "true").lower() == "true"

    # Application
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    SECRET_KEY: str = os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
    SESSION_COOKIE_HTTPONLY: bool = True
    SESSION_COOKIE_SAMESITE: str = "Lax"

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        if not cls.REDIS_URL:
            raise ValueError("Missing required environment variable: REDIS_URL")
        if cls.DEFAULT_PAGE_LIMIT < 1 or cls.DEFAULT_PAGE_LIMIT > cls.MAX_PAGE_LIMIT:
            raise ValueError(
                f"DEFAULT_PAGE_LIMIT must be between 1 and MAX_PAGE_LIMIT ({cls.MAX_PAGE_LIMIT})"
            )


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    SESSION_COOKIE_SECURE = True

    @classmethod
    def validate(cls) -> None:
        super().validate()
        if cls.SECRET_KEY == DEFAULT_SECRET_KEY:
            raise ValueError("SECRET_KEY must be set in production")


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    REDIS_URL = "redis://localhost:6379/15"  # Use different DB for tests
    RATELIMIT_ENABLED = False
    ENABLE_METRICS = False
    SENTRY_DSN = None
    SECRET_KEY = "testing-secret-key"
    AUTH_PROXY_SECRET = "testing-proxy-secret"
    ENV_NAME = "testing"


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("FLASK_ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)
