"""
Repository Configuration and Factory

Provides the factory function that builds the job posting repository
from environment configuration.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .base import JobPostingRepositoryInterface

logger = logging.getLogger(__name__)


@dataclass
class RepositoryConfig:
    """
    Configuration for repository initialization.

    Loaded from environment variables with sensible defaults.
    """
    mongodb_uri: str
    database: str = "job_board"
    collection: str = "jobs"

    @classmethod
    def from_env(cls) -> "RepositoryConfig":
        """
        Load configuration from environment variables.

        Environment variables:
        - MONGODB_URI (required): MongoDB connection string
        - MONGO_DB_NAME: Database name (default: job_board)
        - JOBS_COLLECTION: Collection name (default: jobs)

        Raises:
            ValueError: If MONGODB_URI is not set
        """
        mongodb_uri = os.getenv("MONGODB_URI")
        if not mongodb_uri:
            raise ValueError("MONGODB_URI environment variable is required")

        return cls(
            mongodb_uri=mongodb_uri,
            database=os.getenv("MONGO_DB_NAME", "job_board"),
            collection=os.getenv("JOBS_COLLECTION", "jobs"),
        )


# Singleton repository instance
_repository_instance: Optional[JobPostingRepositoryInterface] = None


def get_job_posting_repository() -> JobPostingRepositoryInterface:
    """
    Get the job posting repository instance.

    Uses singleton pattern for connection pooling.

    Raises:
        ValueError: If MongoDB URI is not configured
    """
    global _repository_instance

    if _repository_instance is None:
        config = RepositoryConfig.from_env()

        from .atlas_repository import AtlasJobPostingRepository
        _repository_instance = AtlasJobPostingRepository(
            mongodb_uri=config.mongodb_uri,
            database=config.database,
            collection=config.collection,
        )
        logger.info(f"Initialized job posting repository ({config.database}.{config.collection})")

    return _repository_instance


def reset_repository() -> None:
    """
    Reset the repository singleton.

    Used for testing or when configuration changes.
    """
    global _repository_instance

    if _repository_instance is not None:
        from .atlas_repository import AtlasJobPostingRepository
        if isinstance(_repository_instance, AtlasJobPostingRepository):
            AtlasJobPostingRepository.reset_connection()

    _repository_instance = None
    logger.info("Repository singleton reset")
