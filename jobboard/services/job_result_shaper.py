"""
Job Result Shaper

Turns stored job postings into display records: backfills the optional
experience level and work-location tag, adds a relative "time ago" label
and makes every value JSON-safe.

Display fields are recomputed on every read rather than stored, so
``timeAgo`` is always relative to the request time.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List

from jobboard.common.types import DEFAULT_EXPERIENCE_LEVEL, REMOTE_LOCATION, ShapedJobPosting
from jobboard.common.utils import format_time_ago, serialize_document


def default_work_location(location: Any) -> str:
    """Work-location tag for postings that never stored one."""
    return "remote" if location == REMOTE_LOCATION else "onsite"


def shape_job(job: Dict[str, Any], now: datetime) -> ShapedJobPosting:
    """
    Build the display copy of a single posting. The input is not modified.

    Args:
        job: Stored job posting document
        now: Current instant used for the ``timeAgo`` label

    Returns:
        JSON-ready dict with experienceLevel, workLocation and timeAgo set
    """
    shaped = dict(job)

    if not shaped.get("experienceLevel"):
        shaped["experienceLevel"] = DEFAULT_EXPERIENCE_LEVEL

    if not shaped.get("workLocation"):
        shaped["workLocation"] = default_work_location(shaped.get("location"))

    # Legacy documents may carry "created" instead of "createdAt"
    created_at = shaped.get("createdAt") or shaped.get("created")
    shaped["timeAgo"] = format_time_ago(created_at, now)

    return serialize_document(shaped)


def shape_jobs(jobs: Iterable[Dict[str, Any]], now: datetime) -> List[ShapedJobPosting]:
    """Shape an ordered sequence of postings, preserving order."""
    return [shape_job(job, now) for job in jobs]
