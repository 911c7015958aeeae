"""
Unit tests for jobboard/services/job_validation.py

Covers both paths:
- validate_job_form(): front end, first failing rule wins
- validate_job_fields() + check_domain_rules(): API, aggregated field errors
  then a single cross-field message
"""

from datetime import datetime, timezone

import pytest

from jobboard.common.error_handling import DomainRuleError
from jobboard.services.job_validation import (
    MSG_ALL_REQUIRED,
    MSG_DEADLINE_INVALID,
    MSG_DEADLINE_PAST,
    MSG_DEADLINE_TOO_FAR,
    MSG_DESCRIPTION_SHORT,
    MSG_INVALID_JOB_TYPE,
    MSG_SALARY_NEGATIVE,
    MSG_SALARY_NOT_NUMBER,
    MSG_SALARY_RANGE,
    add_years,
    check_domain_rules,
    is_blank,
    validate_job_fields,
    validate_job_form,
)


# =============================================================================
# Helpers
# =============================================================================


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank("   ")
    assert not is_blank("x")
    assert not is_blank(0)


def test_add_years_rolls_leap_day_forward():
    leap_day = datetime(2024, 2, 29, 10, 0, tzinfo=timezone.utc)

    assert add_years(leap_day, 2) == datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc)
    assert add_years(datetime(2024, 6, 15, tzinfo=timezone.utc), 2).year == 2026


# =============================================================================
# Front-end path
# =============================================================================


class TestValidateJobForm:
    """Tests for validate_job_form()."""

    def test_valid_form(self, valid_payload, fixed_now):
        outcome = validate_job_form(valid_payload, now=fixed_now)

        assert outcome.valid is True
        assert outcome.message == ""

    @pytest.mark.parametrize("field", ["jobTitle", "minSalary", "applicationDeadline", "jobDescription"])
    def test_blank_field_reports_all_required(self, valid_payload, fixed_now, field):
        valid_payload[field] = "  "

        outcome = validate_job_form(valid_payload, now=fixed_now)

        assert outcome.valid is False
        assert outcome.message == MSG_ALL_REQUIRED

    def test_unknown_job_type(self, valid_payload, fixed_now):
        valid_payload["jobType"] = "Gig"

        assert validate_job_form(valid_payload, now=fixed_now).message == MSG_INVALID_JOB_TYPE

    def test_min_greater_than_max(self, valid_payload, fixed_now):
        valid_payload["minSalary"] = "50000"
        valid_payload["maxSalary"] = "40000"

        assert validate_job_form(valid_payload, now=fixed_now).message == MSG_SALARY_RANGE

    def test_non_numeric_salary(self, valid_payload, fixed_now):
        valid_payload["maxSalary"] = "a lot"

        assert validate_job_form(valid_payload, now=fixed_now).message == MSG_SALARY_NOT_NUMBER

    def test_negative_salary(self, valid_payload, fixed_now):
        valid_payload["minSalary"] = "-5000"

        assert validate_job_form(valid_payload, now=fixed_now).message == MSG_SALARY_NEGATIVE

    def test_unparseable_deadline(self, valid_payload, fixed_now):
        valid_payload["applicationDeadline"] = "next friday"

        assert validate_job_form(valid_payload, now=fixed_now).message == MSG_DEADLINE_INVALID

    def test_deadline_in_past(self, valid_payload, fixed_now):
        valid_payload["applicationDeadline"] = "2024-06-01"

        assert validate_job_form(valid_payload, now=fixed_now).message == MSG_DEADLINE_PAST

    def test_deadline_today_counts_as_past(self, valid_payload, fixed_now):
        # Date-only values resolve to midnight UTC, which is before noon
        valid_payload["applicationDeadline"] = "2024-06-15"

        assert validate_job_form(valid_payload, now=fixed_now).message == MSG_DEADLINE_PAST

    def test_deadline_more_than_two_years_ahead(self, valid_payload, fixed_now):
        valid_payload["applicationDeadline"] = "2026-06-16"

        assert validate_job_form(valid_payload, now=fixed_now).message == MSG_DEADLINE_TOO_FAR

    def test_deadline_just_inside_two_years(self, valid_payload, fixed_now):
        valid_payload["applicationDeadline"] = "2026-06-15"

        assert validate_job_form(valid_payload, now=fixed_now).valid is True

    def test_description_of_49_characters_rejected(self, valid_payload, fixed_now):
        valid_payload["jobDescription"] = "d" * 49

        assert validate_job_form(valid_payload, now=fixed_now).message == MSG_DESCRIPTION_SHORT

    def test_description_of_50_characters_accepted(self, valid_payload, fixed_now):
        valid_payload["jobDescription"] = "d" * 50

        assert validate_job_form(valid_payload, now=fixed_now).valid is True


# =============================================================================
# API path
# =============================================================================


class TestValidateJobFields:
    """Tests for validate_job_fields()."""

    def test_valid_payload_has_no_errors(self, valid_payload):
        assert validate_job_fields(valid_payload) == []

    def test_empty_payload_reports_every_field(self):
        errors = validate_job_fields({})

        assert [e.path for e in errors] == [
            "jobTitle",
            "companyName",
            "location",
            "jobType",
            "minSalary",
            "maxSalary",
            "applicationDeadline",
            "jobDescription",
        ]
        assert errors[0].msg == "Job title is required"
        assert errors[4].msg == "Minimum salary is required"

    def test_one_error_per_field(self, valid_payload):
        valid_payload["jobType"] = "Gig"
        valid_payload["minSalary"] = "fifty"
        valid_payload["applicationDeadline"] = "31/12/2024"

        errors = validate_job_fields(valid_payload)

        assert [(e.path, e.msg) for e in errors] == [
            ("jobType", "Invalid job type"),
            ("minSalary", "Minimum salary must be a number"),
            ("applicationDeadline", "Invalid date format"),
        ]

    def test_non_text_title(self, valid_payload):
        valid_payload["jobTitle"] = 42

        errors = validate_job_fields(valid_payload)

        assert errors[0].to_dict() == {
            "type": "field",
            "value": 42,
            "msg": "Job title must be text",
            "path": "jobTitle",
            "location": "body",
        }


class TestCheckDomainRules:
    """Tests for check_domain_rules()."""

    def test_valid_payload_passes(self, valid_payload, fixed_now):
        check_domain_rules(valid_payload, now=fixed_now)

    def test_salary_range(self, valid_payload, fixed_now):
        valid_payload["minSalary"] = 50000
        valid_payload["maxSalary"] = 40000

        with pytest.raises(DomainRuleError) as exc_info:
            check_domain_rules(valid_payload, now=fixed_now)

        assert exc_info.value.message == "Minimum salary cannot be greater than maximum salary"

    def test_negative_salary(self, valid_payload, fixed_now):
        valid_payload["minSalary"] = -10

        with pytest.raises(DomainRuleError, match="Salary values cannot be negative"):
            check_domain_rules(valid_payload, now=fixed_now)

    def test_deadline_in_past(self, valid_payload, fixed_now):
        valid_payload["applicationDeadline"] = "2024-01-01T00:00:00Z"

        with pytest.raises(DomainRuleError) as exc_info:
            check_domain_rules(valid_payload, now=fixed_now)

        assert exc_info.value.message == "Application deadline cannot be in the past"

    def test_deadline_too_far(self, valid_payload, fixed_now):
        valid_payload["applicationDeadline"] = "2030-01-01"

        with pytest.raises(DomainRuleError) as exc_info:
            check_domain_rules(valid_payload, now=fixed_now)

        assert exc_info.value.message == "Application deadline cannot be more than 2 years in the future"

    def test_short_description(self, valid_payload, fixed_now):
        valid_payload["jobDescription"] = "d" * 49

        with pytest.raises(DomainRuleError) as exc_info:
            check_domain_rules(valid_payload, now=fixed_now)

        assert exc_info.value.message == "Job description should be at least 50 characters long"

    def test_first_violation_wins(self, valid_payload, fixed_now):
        valid_payload["minSalary"] = 50000
        valid_payload["maxSalary"] = 40000
        valid_payload["jobDescription"] = "too short"

        with pytest.raises(DomainRuleError, match="Minimum salary"):
            check_domain_rules(valid_payload, now=fixed_now)


class TestOutOfRangeDeadlines:
    """Offsets that push a deadline outside year 1..9999 are invalid dates."""

    @pytest.mark.parametrize("deadline", ["0001-01-01T00:00:00+05:00", "9999-12-31T23:00:00-05:00"])
    def test_form_reports_invalid_deadline(self, valid_payload, fixed_now, deadline):
        valid_payload["applicationDeadline"] = deadline

        assert validate_job_form(valid_payload, now=fixed_now).message == MSG_DEADLINE_INVALID

    @pytest.mark.parametrize("deadline", ["0001-01-01T00:00:00+05:00", "9999-12-31T23:00:00-05:00"])
    def test_field_rules_report_invalid_date(self, valid_payload, deadline):
        valid_payload["applicationDeadline"] = deadline

        errors = validate_job_fields(valid_payload)

        assert [(e.path, e.msg) for e in errors] == [("applicationDeadline", "Invalid date format")]
