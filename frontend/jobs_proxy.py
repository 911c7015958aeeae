"""
Job Board API Proxy Blueprint.

Proxies listing and creation requests from the browser to the REST API,
runs the creation form checks before anything is sent, and keeps the
unsubmitted form in the session as a draft.
"""

import logging
from typing import Any, Dict, Optional

import requests
from flask import Blueprint, jsonify, request, session

from frontend.api_client import JobBoardClient
from frontend.drafts import clear_draft, has_any_data, load_draft, save_draft
from frontend.salary_range import SLIDER_MAX, SLIDER_MIN, clamp_salary_range, range_label
from jobboard.common.utils import parse_number
from jobboard.services.job_query_builder import DEFAULT_MAX_SALARY
from jobboard.services.job_validation import validate_job_form

logger = logging.getLogger(__name__)

# Create blueprint
jobs_bp = Blueprint("jobs", __name__, url_prefix="/api/jobs")

MSG_PUBLISHED = "Job published successfully!"
MSG_DRAFT_SAVED = "Draft saved successfully!"
MSG_DRAFT_EMPTY = "Cannot save empty form as draft."
MSG_DRAFT_CLEARED = "Draft cleared."


def get_client() -> JobBoardClient:
    return JobBoardClient()


def _error_detail(response: requests.Response) -> str:
    """Best human-readable message from an API error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason or "Unknown error"

    if isinstance(body, dict):
        if body.get("message") and body.get("message") != "Server Error":
            return str(body["message"])
        errors = body.get("errors")
        if errors:
            return "; ".join(str(e.get("msg", e)) if isinstance(e, dict) else str(e) for e in errors)
        if body.get("error"):
            return str(body["error"])
        if body.get("message"):
            return str(body["message"])
    return str(body)


def _listing_filters(args) -> Dict[str, Any]:
    filters: Dict[str, Any] = {
        key: args.get(key, "").strip()
        for key in ("searchQuery", "location", "jobType")
    }

    min_salary: Optional[float] = parse_number(args.get("minSalary"))
    max_salary: Optional[float] = parse_number(args.get("maxSalary"))

    # A lone lower bound is paired with the upper bound the API falls back to
    if max_salary is None:
        default_max = DEFAULT_MAX_SALARY if min_salary and min_salary > 0 else SLIDER_MAX
    else:
        default_max = max_salary

    low, high = clamp_salary_range(
        min_salary if min_salary is not None else SLIDER_MIN,
        default_max,
    )
    if min_salary is not None:
        filters["minSalary"] = low
    if max_salary is not None:
        filters["maxSalary"] = high
    filters["salaryRangeLabel"] = range_label(low, high)
    return filters


@jobs_bp.route("", methods=["GET"])
def list_jobs():
    """
    List job postings through the REST API.

    Query Parameters:
        searchQuery, location, jobType: optional text filters
        minSalary, maxSalary: optional slider positions

    Returns:
        JSON with jobs, totalJobs and salaryRangeLabel
    """
    try:
        filters = _listing_filters(request.args)
        response = get_client().list_jobs(filters)

        if not response.ok:
            return jsonify({"message": _error_detail(response)}), response.status_code

        payload = response.json()
        payload["salaryRangeLabel"] = filters["salaryRangeLabel"]
        return jsonify(payload), 200

    except requests.exceptions.Timeout:
        return jsonify({"error": "Job API timeout"}), 504
    except requests.exceptions.ConnectionError:
        return jsonify({"error": "Cannot connect to job API"}), 503
    except Exception as e:
        logger.exception("Failed to list jobs")
        return jsonify({"error": str(e)}), 500


@jobs_bp.route("/publish", methods=["POST"])
def publish_job():
    """
    Validate a creation form and forward it to the REST API.

    The session draft is cleared only after the API accepts the posting.
    """
    form = request.get_json(silent=True)
    if not isinstance(form, dict):
        return jsonify({"message": "Request body must be a JSON object."}), 400

    outcome = validate_job_form(form)
    if not outcome.valid:
        return jsonify({"message": outcome.message}), 400

    try:
        response = get_client().create_job(form)

        if not response.ok:
            detail = _error_detail(response)
            logger.warning(f"Job API rejected posting ({response.status_code}): {detail}")
            return jsonify({"message": f"Error publishing job: {detail}"}), response.status_code

        clear_draft(session)
        return jsonify({"message": MSG_PUBLISHED, "job": response.json()}), 201

    except requests.exceptions.Timeout:
        return jsonify({"message": "Error publishing job: Job API timeout"}), 504
    except requests.exceptions.ConnectionError:
        return jsonify({"message": "Error publishing job: Cannot connect to job API"}), 503
    except Exception as e:
        logger.exception("Failed to publish job")
        return jsonify({"message": f"Error publishing job: {e}"}), 500


@jobs_bp.route("/draft", methods=["GET"])
def get_draft():
    return jsonify({"draft": load_draft(session)}), 200


@jobs_bp.route("/draft", methods=["PUT"])
def put_draft():
    """Save the creation form; an all-blank form is refused."""
    form = request.get_json(silent=True)
    if not isinstance(form, dict) or not has_any_data(form):
        return jsonify({"message": MSG_DRAFT_EMPTY}), 400

    save_draft(session, form)
    return jsonify({"message": MSG_DRAFT_SAVED}), 200


@jobs_bp.route("/draft", methods=["DELETE"])
def delete_draft():
    clear_draft(session)
    return jsonify({"message": MSG_DRAFT_CLEARED}), 200
