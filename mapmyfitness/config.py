"""Configuration management for mapmyfitness."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _get_int_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class Config:
    """Application configuration."""

    # Base paths
    BASE_DIR = Path(__file__).parent.parent
    DATA_DIR = BASE_DIR / "data"
    LOGS_DIR = BASE_DIR / "logs"

    # Database (CLI token storage)
    DATABASE_PATH = DATA_DIR / "mapmyfitness.db"

    # Security
    ENCRYPTION_KEY = os.environ.get("MMF_ENCRYPTION_KEY")
    ENCRYPTION_KEY_PATH = DATA_DIR / ".encryption_key"
    SECRET_KEY = os.environ.get("MMF_SECRET_KEY")

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Web
    WEB_HOST = "127.0.0.1"
    WEB_PORT = 5000

    # Application credentials
    CONSUMER_KEY = os.environ.get("MMF_CONSUMER_KEY", "")
    CONSUMER_SECRET = os.environ.get("MMF_CONSUMER_SECRET", "")
    CALLBACK_URL = os.environ.get("MMF_CALLBACK_URL")
    RESPONSE_FORMAT = os.environ.get("MMF_RESPONSE_FORMAT", "json")

    # Provider endpoints
    API_BASE_URL = os.environ.get(
        "MMF_API_BASE_URL", "https://api.mapmyfitness.com/3.1/"
    )
    REQUEST_TOKEN_URL = os.environ.get(
        "MMF_REQUEST_TOKEN_URL",
        "https://api.mapmyfitness.com/v7.0/oauth/temporary_credential/",
    )
    AUTHORIZE_URL = os.environ.get(
        "MMF_AUTHORIZE_URL",
        "https://www.mapmyfitness.com/v7.0/oauth/authorize/",
    )
    ACCESS_TOKEN_URL = os.environ.get(
        "MMF_ACCESS_TOKEN_URL",
        "https://api.mapmyfitness.com/v7.0/oauth/token_credential/",
    )

    # API Settings
    REQUEST_TIMEOUT = _get_int_env("MMF_REQUEST_TIMEOUT", 30)  # seconds

    # Key of the handshake progress flag in the per-session state store
    SESSION_STATE_KEY = "mapmyfitness_session"

    @classmethod
    def ensure_directories(cls):
        """Ensure all required directories exist."""
        cls.DATA_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    def __repr__(self):
        return f"Config(BASE_DIR={self.BASE_DIR}, API={self.API_BASE_URL})"
