"""Application settings read from the environment (and a local .env file)."""
import os
import secrets
from dataclasses import dataclass

from dotenv import load_dotenv

from storefront.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PORT = 4242
DEFAULT_SESSION_TTL = 24 * 60 * 60
SESSION_COOKIE_NAME = "sid"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %s", name, raw, default)
        return default


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, resolved once at startup."""

    port: int = DEFAULT_PORT
    stripe_secret_key: str = ""
    session_secret: str = ""
    public_base_url: str = ""
    session_ttl_seconds: int = DEFAULT_SESSION_TTL
    session_cookie_secure: bool = False
    environment: str = "development"

    @property
    def payments_enabled(self) -> bool:
        return bool(self.stripe_secret_key)

    @property
    def is_test(self) -> bool:
        return self.environment == "test"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """
        Build settings from environment variables.

        Variables already present in the environment win over .env entries.
        A missing SESSION_SECRET gets a random per-process value, which means
        sessions do not survive a restart.
        """
        if dotenv:
            load_dotenv()

        session_secret = os.environ.get("SESSION_SECRET", "")
        if not session_secret:
            logger.warning("SESSION_SECRET is not set; using a random secret for this process")
            session_secret = secrets.token_urlsafe(32)

        return cls(
            port=_env_int("PORT", DEFAULT_PORT),
            stripe_secret_key=os.environ.get("STRIPE_SECRET_KEY", ""),
            session_secret=session_secret,
            public_base_url=os.environ.get("PUBLIC_BASE_URL", "").rstrip("/"),
            session_ttl_seconds=_env_int("SESSION_TTL_SECONDS", DEFAULT_SESSION_TTL),
            session_cookie_secure=_env_flag("SESSION_COOKIE_SECURE"),
            environment=os.environ.get("APP_ENV", "development"),
        )
