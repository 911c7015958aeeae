"""
Job Posting Validation

Creation rules, written once and applied on two paths:

    validate_job_form()     - front-end path, first failing rule wins
    validate_job_fields()   - API path, per-field errors are aggregated
    check_domain_rules()    - API path, cross-field rules, first violation wins

Both paths reject blank required fields, an unknown job type, non-numeric
or negative salaries, minSalary > maxSalary, an unparseable deadline, a
deadline in the past or more than two years ahead, and a description
shorter than 50 characters.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from jobboard.common.error_handling import DomainRuleError, FieldError
from jobboard.common.types import (
    JOB_FIELD_LABELS,
    JOB_TYPES,
    MAX_DEADLINE_YEARS_AHEAD,
    MIN_DESCRIPTION_LENGTH,
    TEXT_FIELDS,
)
from jobboard.common.utils import ensure_utc, parse_datetime, parse_number

# Front-end messages (sentence case with trailing period)
MSG_ALL_REQUIRED = "All fields are required."
MSG_INVALID_JOB_TYPE = "Please select a valid job type."
MSG_SALARY_RANGE = "Minimum salary cannot be greater than maximum salary."
MSG_SALARY_NOT_NUMBER = "Salary values must be valid numbers."
MSG_SALARY_NEGATIVE = "Salary values cannot be negative."
MSG_DEADLINE_INVALID = "Please enter a valid application deadline date."
MSG_DEADLINE_PAST = "Application deadline cannot be in the past."
MSG_DEADLINE_TOO_FAR = "Application deadline cannot be more than 2 years in the future."
MSG_DESCRIPTION_SHORT = "Job description should be at least 50 characters long."


@dataclass
class FormValidation:
    """Outcome of the front-end validator."""
    valid: bool
    message: str = ""


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def add_years(moment: datetime, years: int) -> datetime:
    """Calendar-year offset; Feb 29 rolls over to Mar 1 in non-leap years."""
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        return moment.replace(year=moment.year + years, month=3, day=1)


def _deadline_message(deadline: datetime, now: datetime) -> Optional[str]:
    if deadline < now:
        return MSG_DEADLINE_PAST
    if deadline > add_years(now, MAX_DEADLINE_YEARS_AHEAD):
        return MSG_DEADLINE_TOO_FAR
    return None


def _description_too_short(description: Any) -> bool:
    return len(str(description).strip()) < MIN_DESCRIPTION_LENGTH


# =============================================================================
# Front-end path
# =============================================================================

def validate_job_form(form: Dict[str, Any], now: Optional[datetime] = None) -> FormValidation:
    """
    Validate a creation form the way the browser does before submitting.

    Only the first failing rule is reported.

    Args:
        form: Raw form values (strings as typed by the user)
        now: Current instant (defaults to the real clock)

    Returns:
        FormValidation with ``valid`` and the user-facing message
    """
    now = ensure_utc(now) if now else datetime.now(timezone.utc)

    if any(is_blank(form.get(field)) for field in JOB_FIELD_LABELS):
        return FormValidation(False, MSG_ALL_REQUIRED)

    if form.get("jobType") not in JOB_TYPES:
        return FormValidation(False, MSG_INVALID_JOB_TYPE)

    min_salary = parse_number(form.get("minSalary"))
    max_salary = parse_number(form.get("maxSalary"))

    if min_salary is not None and max_salary is not None and min_salary > max_salary:
        return FormValidation(False, MSG_SALARY_RANGE)

    if min_salary is None or max_salary is None:
        return FormValidation(False, MSG_SALARY_NOT_NUMBER)

    if min_salary < 0 or max_salary < 0:
        return FormValidation(False, MSG_SALARY_NEGATIVE)

    deadline = parse_datetime(form.get("applicationDeadline"))
    if deadline is None:
        return FormValidation(False, MSG_DEADLINE_INVALID)

    deadline_message = _deadline_message(deadline, now)
    if deadline_message:
        return FormValidation(False, deadline_message)

    if _description_too_short(form.get("jobDescription")):
        return FormValidation(False, MSG_DESCRIPTION_SHORT)

    return FormValidation(True)


# =============================================================================
# API path
# =============================================================================

def validate_job_fields(payload: Dict[str, Any]) -> List[FieldError]:
    """
    Check each field on its own and collect every failure.

    A field reports at most one error: "required" wins over format rules.

    Returns:
        List of FieldError (empty when every field passes)
    """
    errors: List[FieldError] = []

    for field, label in JOB_FIELD_LABELS.items():
        value = payload.get(field)

        if is_blank(value):
            errors.append(FieldError(path=field, msg=f"{label} is required", value=value))
            continue

        if field == "jobType" and value not in JOB_TYPES:
            errors.append(FieldError(path=field, msg="Invalid job type", value=value))
        elif field in ("minSalary", "maxSalary") and parse_number(value) is None:
            errors.append(FieldError(path=field, msg=f"{label} must be a number", value=value))
        elif field == "applicationDeadline" and parse_datetime(value) is None:
            errors.append(FieldError(path=field, msg="Invalid date format", value=value))
        elif field in TEXT_FIELDS and not isinstance(value, str):
            errors.append(FieldError(path=field, msg=f"{label} must be text", value=value))

    return errors


def check_domain_rules(payload: Dict[str, Any], now: Optional[datetime] = None) -> None:
    """
    Apply cross-field rules to a payload that already passed field rules.

    Raises:
        DomainRuleError: On the first violated rule
    """
    now = ensure_utc(now) if now else datetime.now(timezone.utc)

    min_salary = parse_number(payload.get("minSalary"))
    max_salary = parse_number(payload.get("maxSalary"))

    if min_salary > max_salary:
        raise DomainRuleError("Minimum salary cannot be greater than maximum salary")

    if min_salary < 0 or max_salary < 0:
        raise DomainRuleError("Salary values cannot be negative")

    deadline = parse_datetime(payload.get("applicationDeadline"))
    deadline_message = _deadline_message(deadline, now)
    if deadline_message:
        raise DomainRuleError(deadline_message.rstrip("."))

    if _description_too_short(payload.get("jobDescription")):
        raise DomainRuleError(
            f"Job description should be at least {MIN_DESCRIPTION_LENGTH} characters long"
        )
