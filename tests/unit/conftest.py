"""
Global fixtures for all unit tests.

This conftest provides autouse fixtures that prevent real external service calls:
- MongoDB connection attempts (would cause 5-30s timeout per test)
- Environment variable isolation (prevents credential leakage)

These fixtures apply automatically to ALL tests in tests/unit/.
"""

import os
import pytest
from datetime import datetime, timezone
from unittest.mock import patch, MagicMock

# Set test environment BEFORE any imports to prevent Config from loading real values
os.environ["ENVIRONMENT"] = "development"
os.environ["MONGODB_URI"] = "mongodb://localhost:27017/job_board_test"


@pytest.fixture(autouse=True)
def mock_mongodb():
    """
    Prevent MongoDB connection attempts in all unit tests.

    MongoClient("...") would try localhost:27017, causing 5-30s timeout per test.
    """
    with patch("jobboard.common.repositories.atlas_repository.MongoClient") as mock_client:
        mock_instance = MagicMock()
        mock_db = MagicMock()
        mock_collection = MagicMock()

        # Setup chain: client["db"]["collection"]
        mock_instance.__getitem__ = MagicMock(return_value=mock_db)
        mock_db.__getitem__ = MagicMock(return_value=mock_collection)
        mock_collection.find = MagicMock(return_value=[])

        mock_client.return_value = mock_instance
        yield mock_client


@pytest.fixture(autouse=True)
def reset_repositories():
    """Drop repository singletons between tests."""
    from jobboard.common.repositories import reset_repository
    from jobboard.common.repositories.atlas_repository import AtlasJobPostingRepository

    reset_repository()
    AtlasJobPostingRepository.reset_connection()
    yield
    reset_repository()
    AtlasJobPostingRepository.reset_connection()


@pytest.fixture
def fixed_now():
    """A fixed 'current time' so date rules are deterministic."""
    return datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def valid_payload():
    """A creation payload that passes every rule at fixed_now."""
    return {
        "jobTitle": "  Senior Python Developer ",
        "companyName": "Razorpay",
        "location": "Bengaluru",
        "jobType": "Full-time",
        "minSalary": "1200000",
        "maxSalary": 2400000,
        "applicationDeadline": "2024-08-01",
        "jobDescription": "Build payment APIs in Python and FastAPI. " * 2,
    }
