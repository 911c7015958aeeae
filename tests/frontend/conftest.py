"""
Pytest fixtures for frontend/Flask tests.
"""

import os

# Set test environment BEFORE importing the Flask app
os.environ["FLASK_SECRET_KEY"] = "test-secret-key"
os.environ["FLASK_ENV"] = "testing"
os.environ["JOB_API_URL"] = "http://job-api.test/api"

import pytest
from unittest.mock import MagicMock


@pytest.fixture
def app():
    """Flask app fixture with test configuration."""
    from frontend.app import app
    app.config["TESTING"] = True
    app.config["SECRET_KEY"] = "test-secret-key"
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


def _make_response(status_code=200, json_data=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    response.reason = ""
    if json_data is None:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def api_response():
    """Factory for requests.Response stand-ins."""
    return _make_response


@pytest.fixture
def mock_requests(mocker):
    """Mock requests.get / requests.post as used by the API client."""
    mock_get = mocker.patch("frontend.api_client.requests.get")
    mock_post = mocker.patch("frontend.api_client.requests.post")
    mock_get.return_value = _make_response(200, {"jobs": [], "totalJobs": 0})
    return {"get": mock_get, "post": mock_post}


@pytest.fixture
def valid_form():
    """A creation form as typed in the browser."""
    from datetime import datetime, timedelta, timezone

    deadline = (datetime.now(timezone.utc) + timedelta(days=45)).date().isoformat()
    return {
        "jobTitle": "React Developer",
        "companyName": "Swiggy",
        "location": "Bengaluru",
        "jobType": "Full-time",
        "minSalary": "900000",
        "maxSalary": "1500000",
        "applicationDeadline": deadline,
        "jobDescription": "Build fast, accessible ordering flows used by millions every day.",
    }
