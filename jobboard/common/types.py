"""
Canonical Types and Schemas for the Job Board

Defines the JobPosting document shape as stored in MongoDB and the
closed vocabularies shared by the API, the front end and the seed script.
"""

from datetime import datetime
from typing import Any, Dict, List, TypedDict

from typing_extensions import NotRequired


# Closed enumeration; the store and both validators agree on this list.
JOB_TYPES: List[str] = [
    "Full-time",
    "Part-time",
    "Contract",
    "Internship",
    "Remote",
    "Freelance",
]

# Required creation fields in form order, with the label used in messages.
JOB_FIELD_LABELS: Dict[str, str] = {
    "jobTitle": "Job title",
    "companyName": "Company name",
    "location": "Location",
    "jobType": "Job type",
    "minSalary": "Minimum salary",
    "maxSalary": "Maximum salary",
    "applicationDeadline": "Application deadline",
    "jobDescription": "Job description",
}

TEXT_FIELDS: List[str] = ["jobTitle", "companyName", "location", "jobDescription"]

DEFAULT_EXPERIENCE_LEVEL = "1-3 years"
REMOTE_LOCATION = "Remote"
MIN_DESCRIPTION_LENGTH = 50
MAX_DEADLINE_YEARS_AHEAD = 2


class JobPosting(TypedDict):
    """
    A single job listing as stored in the ``jobs`` collection.

    ``createdAt`` is set once on insert and never changes; there is no
    update or delete path.
    """
    # Required on creation
    jobTitle: str
    companyName: str
    location: str
    jobType: str                       # One of JOB_TYPES
    minSalary: float
    maxSalary: float                   # Salary filters match on this field
    applicationDeadline: datetime
    jobDescription: str

    # Set by the store / repository
    _id: NotRequired[Any]              # ObjectId
    createdAt: NotRequired[datetime]
    updatedAt: NotRequired[datetime]

    # Optional display fields (backfilled on read when absent)
    experienceLevel: NotRequired[str]
    workLocation: NotRequired[str]     # "remote" or "onsite"


class ShapedJobPosting(TypedDict):
    """JobPosting after read-time shaping, ready for JSON."""
    _id: str
    jobTitle: str
    companyName: str
    location: str
    jobType: str
    minSalary: float
    maxSalary: float
    applicationDeadline: str
    jobDescription: str
    createdAt: str
    experienceLevel: str
    workLocation: str
    timeAgo: str
