"""
Pytest fixtures for API service tests.
"""

import os
from unittest.mock import MagicMock

# IMPORTANT: Set environment variables BEFORE any imports from api_service
# so ApiSettings is configured correctly when first loaded.
os.environ["ENVIRONMENT"] = "development"
os.environ["MONGODB_URI"] = "mongodb://localhost:27017/job_board_test"
os.environ["ENSURE_INDEXES_ON_STARTUP"] = "false"
os.environ["CORS_ORIGINS"] = "*"

import pytest
from fastapi.testclient import TestClient

from jobboard.services import JobPostingService


@pytest.fixture
def mock_service():
    """JobPostingService double injected in place of the MongoDB-backed one."""
    return MagicMock(spec=JobPostingService)


@pytest.fixture
def client(mock_service):
    """FastAPI test client with the job service overridden."""
    from api_service.app import app
    from api_service.routes.jobs import get_job_service

    app.dependency_overrides[get_job_service] = lambda: mock_service
    # Unhandled errors should come back as 500 responses, not re-raise
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def service_with_repository():
    """A real JobPostingService over a MagicMock repository."""
    from bson import ObjectId
    from jobboard.common.repositories import JobPostingRepositoryInterface, WriteResult

    repo = MagicMock(spec=JobPostingRepositoryInterface)

    def insert(document):
        document["_id"] = ObjectId("65a1b2c3d4e5f6a7b8c9d0e1")
        return WriteResult(inserted_count=1, inserted_id="65a1b2c3d4e5f6a7b8c9d0e1")

    repo.insert_one.side_effect = insert
    repo.count_documents.return_value = 0
    repo.find.return_value = []
    return JobPostingService(repository=repo), repo
