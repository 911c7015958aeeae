"""
Services for searching, shaping and creating job postings.
"""

from jobboard.services.job_posting_service import JobListing, JobPostingService
from jobboard.services.job_query_builder import JobFilters, build_job_query
from jobboard.services.job_result_shaper import shape_job, shape_jobs
from jobboard.services.job_validation import (
    FormValidation,
    check_domain_rules,
    validate_job_fields,
    validate_job_form,
)

__all__ = [
    "JobListing",
    "JobPostingService",
    "JobFilters",
    "build_job_query",
    "shape_job",
    "shape_jobs",
    "FormValidation",
    "check_domain_rules",
    "validate_job_fields",
    "validate_job_form",
]
