"""
Job Posting Service

Orchestrates the two operations the job board supports:

    create_job()  - validate, persist and return the stored posting
    list_jobs()   - build the filter query, count, fetch newest-first, shape

Usage:
    service = JobPostingService()
    listing = service.list_jobs(JobFilters.from_query_params(job_type="Contract"))
    listing.to_dict()  # {"jobs": [...], "totalJobs": N}
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from jobboard.common.error_handling import FieldValidationError, StoreError, log_on_exception
from jobboard.common.repositories import JobPostingRepositoryInterface, get_job_posting_repository
from jobboard.common.types import JOB_FIELD_LABELS, TEXT_FIELDS, JobPosting
from jobboard.common.utils import parse_datetime, parse_number, serialize_document
from jobboard.services.job_query_builder import JobFilters, build_job_query
from jobboard.services.job_result_shaper import shape_jobs
from jobboard.services.job_validation import check_domain_rules, validate_job_fields

logger = logging.getLogger(__name__)

# Newest postings first
LISTING_SORT = [("createdAt", DESCENDING)]


@dataclass
class JobListing:
    """Result of a listing request."""
    jobs: List[Dict[str, Any]]
    total_jobs: int

    def to_dict(self) -> dict:
        return {"jobs": self.jobs, "totalJobs": self.total_jobs}


# BSON integers are signed 64-bit
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _store_number(value: Any) -> Any:
    number = parse_number(value)
    if number.is_integer() and INT64_MIN <= number <= INT64_MAX:
        return int(number)
    return number


def build_job_document(payload: Dict[str, Any], now: datetime) -> JobPosting:
    """
    Build the document to insert from a validated payload.

    Only known fields are copied; text is trimmed, salaries become numbers,
    the deadline becomes a datetime. ``createdAt`` and ``updatedAt`` are
    both set to ``now``.
    """
    document: Dict[str, Any] = {}
    for field in JOB_FIELD_LABELS:
        value = payload[field]
        if field in TEXT_FIELDS or field == "jobType":
            document[field] = value.strip()
        elif field in ("minSalary", "maxSalary"):
            document[field] = _store_number(value)
        elif field == "applicationDeadline":
            document[field] = parse_datetime(value)

    document["createdAt"] = now
    document["updatedAt"] = now
    return document


class JobPostingService:
    """
    Coordinates validation, persistence and read-time shaping of postings.

    Holds no per-request state; a single instance can serve every request.
    """

    def __init__(
        self,
        repository: Optional[JobPostingRepositoryInterface] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the job posting service.

        Args:
            repository: Optional repository (defaults to the configured singleton)
            clock: Optional callable returning the current aware datetime
        """
        self._repository = repository
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @property
    def repository(self) -> JobPostingRepositoryInterface:
        if self._repository is None:
            self._repository = get_job_posting_repository()
        return self._repository

    def create_job(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and store a new job posting.

        Args:
            payload: Submitted posting fields (createdAt is ignored)

        Returns:
            The stored posting, JSON-ready (``_id`` as string)

        Raises:
            FieldValidationError: One or more fields failed their rules
            DomainRuleError: A cross-field rule was violated
            StoreError: The insert failed
        """
        field_errors = validate_job_fields(payload)
        if field_errors:
            raise FieldValidationError(field_errors)

        now = self._clock()
        check_domain_rules(payload, now)

        document = build_job_document(payload, now)
        try:
            with log_on_exception(logger, "MongoDB insert", level=logging.ERROR, include_traceback=True):
                result = self.repository.insert_one(document)
        except PyMongoError as e:
            raise StoreError(str(e), cause=e) from e

        logger.info(f"Created job posting {result.inserted_id}: {document['jobTitle']} at {document['companyName']}")
        return serialize_document(document)

    def list_jobs(self, filters: Optional[JobFilters] = None) -> JobListing:
        """
        List postings matching the filters, newest first.

        Args:
            filters: Parsed listing filters (None means no filters)

        Returns:
            JobListing with shaped postings and the total match count

        Raises:
            StoreError: The count or fetch failed
        """
        query = build_job_query(filters or JobFilters())

        try:
            total_jobs = self.repository.count_documents(query)
            jobs = self.repository.find(query, sort=LISTING_SORT)
        except PyMongoError as e:
            logger.exception(f"Job listing query failed: {e}")
            raise StoreError(str(e), cause=e) from e

        shaped = shape_jobs(jobs, self._clock())
        logger.debug(f"Listed {len(shaped)} of {total_jobs} job postings")
        return JobListing(jobs=shaped, total_jobs=total_jobs)
