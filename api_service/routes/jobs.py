"""
Job Posting Routes

REST API for creating and searching job postings.

Endpoints:
    POST /api/jobs  - Create a job posting
    GET  /api/jobs  - List job postings with optional filters
"""

import logging
import uuid
from functools import lru_cache
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool

from jobboard.common.logger import get_logger
from jobboard.common.repositories.atlas_repository import AtlasJobPostingRepository
from jobboard.services import JobFilters, JobPostingService

from ..config import settings
from ..models import (
    FieldErrorsResponse,
    JobListResponse,
    JobPostingRequest,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


# =============================================================================
# Dependencies
# =============================================================================

@lru_cache()
def get_job_service() -> JobPostingService:
    """Get the JobPostingService bound to the configured MongoDB collection."""
    repository = AtlasJobPostingRepository(
        mongodb_uri=settings.mongodb_uri,
        database=settings.mongo_db_name,
    )
    return JobPostingService(repository=repository)


# =============================================================================
# Endpoints
# =============================================================================

@router.post(
    "",
    status_code=201,
    responses={
        400: {"model": FieldErrorsResponse, "description": "Field or domain-rule validation failed"},
        500: {"model": MessageResponse, "description": "Store failure"},
    },
)
async def create_job(
    request: JobPostingRequest,
    service: JobPostingService = Depends(get_job_service),
):
    """
    Create a new job posting.

    Field errors are returned together as ``{"errors": [...]}``; cross-field
    rules (salary range, deadline window, description length) return a
    single ``{"message": ...}``. Both use status 400.
    """
    request_logger = get_logger(__name__, request_id=uuid.uuid4().hex)
    request_logger.debug(f"Create job request for '{request.jobTitle}'")

    job = await run_in_threadpool(service.create_job, request.model_dump())

    request_logger.info(f"Job posting created: {job.get('_id')}")
    return job


@router.get("", response_model=JobListResponse)
async def list_jobs(
    searchQuery: Optional[str] = Query(None, description="Substring searched in title, company and description"),
    location: Optional[str] = Query(None, description="Substring matched against location"),
    jobType: Optional[str] = Query(None, description="Exact job type"),
    minSalary: Optional[str] = Query(None, description="Lower bound on maxSalary"),
    maxSalary: Optional[str] = Query(None, description="Upper bound on maxSalary"),
    service: JobPostingService = Depends(get_job_service),
):
    """
    List job postings, newest first.

    All filters are optional strings. Malformed salary values are ignored
    rather than rejected. ``totalJobs`` is the number of matching postings.
    """
    filters = JobFilters.from_query_params(
        search_query=searchQuery,
        location=location,
        job_type=jobType,
        min_salary=minSalary,
        max_salary=maxSalary,
    )

    listing = await run_in_threadpool(service.list_jobs, filters)

    return JobListResponse(jobs=listing.jobs, totalJobs=listing.total_jobs)
