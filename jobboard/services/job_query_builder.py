"""
Job Query Builder

Translates optional listing filters into a MongoDB filter document.

Every clause is optional and the result is the AND of whichever clauses
are present; an empty filter set yields ``{}`` and matches every posting.

Usage:
    filters = JobFilters.from_query_params(search_query="python", min_salary="50000")
    query = build_job_query(filters)
    repo.find(query)
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from jobboard.common.utils import parse_number

logger = logging.getLogger(__name__)

DEFAULT_MIN_SALARY = 0
DEFAULT_MAX_SALARY = 2_900_000

# Free-text search covers these fields (logical OR)
SEARCH_FIELDS = ["jobTitle", "companyName", "jobDescription"]


@dataclass
class JobFilters:
    """
    Parsed listing filters. ``None`` means "no constraint".

    ``salary_requested`` records whether the caller supplied any salary
    input at all, because a supplied-but-invalid bound still turns the
    salary clause on (with the default for that bound).
    """
    search_text: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    min_salary: Optional[float] = None
    max_salary: Optional[float] = None
    salary_requested: bool = False

    @classmethod
    def from_query_params(
        cls,
        search_query: Optional[str] = None,
        location: Optional[str] = None,
        job_type: Optional[str] = None,
        min_salary: Optional[str] = None,
        max_salary: Optional[str] = None,
    ) -> "JobFilters":
        """
        Build filters from raw query-string values.

        Malformed salary input is treated as absent, never as an error.
        """
        search_text = search_query.strip() if search_query else ""

        return cls(
            search_text=search_text or None,
            location=location or None,
            job_type=job_type or None,
            min_salary=_positive_or_none(min_salary),
            max_salary=_positive_or_none(max_salary),
            salary_requested=bool(min_salary) or bool(max_salary),
        )

    @property
    def effective_min_salary(self) -> float:
        return self.min_salary if self.min_salary is not None else DEFAULT_MIN_SALARY

    @property
    def effective_max_salary(self) -> float:
        return self.max_salary if self.max_salary is not None else DEFAULT_MAX_SALARY

    def is_empty(self) -> bool:
        return not (self.search_text or self.location or self.job_type or self.salary_requested)


def _positive_or_none(raw: Optional[str]) -> Optional[float]:
    number = parse_number(raw)
    if number is None or number <= 0:
        return None
    return number


def literal_pattern(text: str) -> Dict[str, str]:
    """
    Case-insensitive substring match that treats ``text`` literally.

    Regex metacharacters are escaped so adversarial input such as
    ``"C++ (Senior)"`` or ``"(a+)+$"`` behaves as plain text.
    """
    return {"$regex": re.escape(text), "$options": "i"}


def build_job_query(filters: JobFilters) -> Dict[str, Any]:
    """
    Build the MongoDB filter for a listing request.

    Args:
        filters: Parsed listing filters

    Returns:
        MongoDB filter document (AND of all present clauses)
    """
    query: Dict[str, Any] = {}

    if filters.is_empty():
        logger.debug("No listing filters, matching every posting")
        return query

    if filters.search_text:
        pattern = literal_pattern(filters.search_text)
        query["$or"] = [{field: dict(pattern)} for field in SEARCH_FIELDS]

    if filters.location:
        query["location"] = literal_pattern(filters.location)

    if filters.job_type:
        # Closed enumeration, so exact match
        query["jobType"] = filters.job_type

    if filters.salary_requested:
        query["maxSalary"] = {
            "$gte": filters.effective_min_salary,
            "$lte": filters.effective_max_salary,
        }

    logger.debug(f"Built job query: {query}")
    return query
