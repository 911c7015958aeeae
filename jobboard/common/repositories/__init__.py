"""
Repository Pattern for MongoDB Operations

Provides an abstraction layer over the ``jobs`` collection.

Public API:
- get_job_posting_repository(): Factory to get the repository instance
- JobPostingRepositoryInterface: Abstract interface for the jobs collection
- WriteResult: Result dataclass for write operations

Usage:
    from jobboard.common.repositories import get_job_posting_repository

    repo = get_job_posting_repository()
    jobs = repo.find({"jobType": "Full-time"}, sort=[("createdAt", -1)])
"""

from .base import JobPostingRepositoryInterface, WriteResult
from .config import (
    get_job_posting_repository,
    reset_repository,
    RepositoryConfig,
)

__all__ = [
    "get_job_posting_repository",
    "reset_repository",
    "JobPostingRepositoryInterface",
    "WriteResult",
    "RepositoryConfig",
]
