# FILE: config.py
import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "y"}


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///interviews.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Roll back every row of a failed submission instead of leaving partial rows.
    ATOMIC_SUBMISSIONS = _env_flag("ATOMIC_SUBMISSIONS", "true")
    # Reject submissions that leave a canned question unanswered.
    REQUIRE_CANNED_ANSWERS = _env_flag("REQUIRE_CANNED_ANSWERS", "false")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    ATOMIC_SUBMISSIONS = True
    REQUIRE_CANNED_ANSWERS = False
    LOG_LEVEL = "DEBUG"
