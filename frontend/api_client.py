"""
HTTP client for the job board REST API.

Used by the Flask front end to forward listing and creation requests.
"""

import logging
import os
from typing import Any, Dict, Optional

import requests
from dotenv import load_dotenv

from jobboard.common.utils import parse_number

load_dotenv()

logger = logging.getLogger(__name__)

JOB_API_URL = os.getenv("JOB_API_URL", "http://localhost:5000/api")
REQUEST_TIMEOUT = 15  # seconds

LISTING_TEXT_FILTERS = ["searchQuery", "location", "jobType"]
LISTING_SALARY_FILTERS = ["minSalary", "maxSalary"]


def build_listing_params(filters: Dict[str, Any]) -> Dict[str, str]:
    """
    Query-string parameters for GET /api/jobs.

    Empty text filters are dropped, and salary bounds are sent only when
    they are positive numbers.
    """
    params: Dict[str, str] = {}

    for key in LISTING_TEXT_FILTERS:
        value = filters.get(key)
        if value:
            params[key] = str(value)

    for key in LISTING_SALARY_FILTERS:
        number = parse_number(filters.get(key))
        if number is not None and number > 0:
            params[key] = f"{number:g}" if not number.is_integer() else str(int(number))

    return params


class JobBoardClient:
    """
    Thin wrapper over ``requests`` for the two job board endpoints.

    Transport errors (timeouts, refused connections) propagate as
    ``requests.exceptions.RequestException`` so callers can map them to
    HTTP statuses.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: int = REQUEST_TIMEOUT):
        self.base_url = (base_url or JOB_API_URL).rstrip("/")
        self.timeout = timeout

    def list_jobs(self, filters: Dict[str, Any]) -> requests.Response:
        """GET /jobs with the given filters."""
        params = build_listing_params(filters)
        url = f"{self.base_url}/jobs"
        logger.debug(f"Fetching jobs from {url} with {params}")
        return requests.get(url, params=params, timeout=self.timeout)

    def create_job(self, payload: Dict[str, Any]) -> requests.Response:
        """POST /jobs with a creation form."""
        url = f"{self.base_url}/jobs"
        return requests.post(
            url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
