"""
Configuration loader for the job board.

Loads all settings from environment variables (.env file).
Validates required settings and provides type-safe access.
"""

import os
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """
    Centralized configuration for the job board library.

    All values loaded from environment variables - NO SECRETS IN CODE.
    """

    # ===== MongoDB =====
    MONGODB_URI: str = os.getenv("MONGODB_URI", "")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "job_board")
    JOBS_COLLECTION: str = os.getenv("JOBS_COLLECTION", "jobs")

    # ===== Logging =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "simple")  # "simple" or "json"

    # ===== Runtime =====
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development").lower()

    @classmethod
    def validate(cls) -> List[str]:
        """
        Check configuration for problems.

        Returns:
            List of human-readable issues (empty when configuration is usable)
        """
        issues = []

        if not cls.MONGODB_URI:
            issues.append("MONGODB_URI is not set. Please check your .env file.")
        elif not cls.MONGODB_URI.startswith(("mongodb://", "mongodb+srv://")):
            issues.append(f"MONGODB_URI has an invalid scheme: {cls.MONGODB_URI.split(':', 1)[0]}")

        if cls.LOG_FORMAT not in ("simple", "json"):
            issues.append(f"LOG_FORMAT must be 'simple' or 'json', got '{cls.LOG_FORMAT}'")

        return issues

    @classmethod
    def summary(cls) -> str:
        """Return a summary of the current configuration (safe for logging)."""
        return f"""
Configuration Summary:
  MongoDB: {'✓ Configured' if cls.MONGODB_URI else '✗ Missing'}
  Database: {cls.MONGO_DB_NAME}.{cls.JOBS_COLLECTION}
  Environment: {cls.ENVIRONMENT}
  Logging: {cls.LOG_LEVEL} ({cls.LOG_FORMAT})
        """.strip()
