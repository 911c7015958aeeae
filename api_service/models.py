"""
Shared Pydantic models for the API service.

These models define the structure for API requests and responses.
Field rules for job creation live in jobboard.services.job_validation so the
API can report every failing field in one 400 response; the request model
below only documents the payload shape.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class JobPostingRequest(BaseModel):
    """Request body for creating a job posting."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "jobTitle": "Senior Backend Engineer",
                "companyName": "Razorpay",
                "location": "Bangalore",
                "jobType": "Full-time",
                "minSalary": 1800000,
                "maxSalary": 2600000,
                "applicationDeadline": "2026-12-31",
                "jobDescription": "Own the payments ledger services end to end, from design to on-call.",
            }
        },
    )

    jobTitle: Any = Field(None, description="Job title (required)")
    companyName: Any = Field(None, description="Company name (required)")
    location: Any = Field(None, description="Location, e.g. 'Pune' or 'Remote' (required)")
    jobType: Any = Field(
        None,
        description="One of Full-time, Part-time, Contract, Internship, Remote, Freelance",
    )
    minSalary: Any = Field(None, description="Minimum salary, non-negative number")
    maxSalary: Any = Field(None, description="Maximum salary, >= minSalary")
    applicationDeadline: Any = Field(None, description="ISO-8601 date, within the next two years")
    jobDescription: Any = Field(None, description="At least 50 characters")


class JobListResponse(BaseModel):
    """Response model for listing job postings."""

    jobs: List[Dict[str, Any]]
    totalJobs: int


class FieldErrorModel(BaseModel):
    """A single failed field rule."""

    type: str = "field"
    value: Any = None
    msg: str
    path: str
    location: str = "body"


class FieldErrorsResponse(BaseModel):
    """400 response listing every failed field."""

    errors: List[FieldErrorModel]


class MessageResponse(BaseModel):
    """Single-message error response (domain rule or server failure)."""

    message: str
    error: Optional[str] = None
    stack: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    environment: str
