"""
Unit tests for scripts/seed_jobs.py
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

from jobboard.common.repositories import JobPostingRepositoryInterface, WriteResult
from jobboard.common.types import JOB_TYPES
from jobboard.services.job_validation import check_domain_rules, validate_job_fields
from scripts.seed_jobs import generate_sample_job, seed_jobs


def test_generated_job_is_valid():
    now = datetime(2024, 6, 15, tzinfo=timezone.utc)

    job = generate_sample_job(now)

    assert job["jobType"] in JOB_TYPES
    assert job["minSalary"] <= job["maxSalary"]
    assert job["createdAt"] <= now
    assert validate_job_fields(job) == []
    check_domain_rules(job, now=now)


def test_seed_jobs_inserts_and_clears():
    repo = MagicMock(spec=JobPostingRepositoryInterface)
    repo.insert_one.return_value = WriteResult(inserted_count=1)
    repo.delete_all.return_value = 3
    repo.count_documents.return_value = 5

    inserted = seed_jobs(count=5, clear=True, repository=repo)

    assert inserted == 5
    repo.delete_all.assert_called_once()
    repo.ensure_indexes.assert_called_once()
    assert repo.insert_one.call_count == 5


def test_config_validate_reports_bad_uri(monkeypatch):
    from jobboard.common.config import Config

    monkeypatch.setattr(Config, "MONGODB_URI", "postgres://db")
    monkeypatch.setattr(Config, "LOG_FORMAT", "xml")

    issues = Config.validate()

    assert len(issues) == 2
    assert "invalid scheme: postgres" in issues[0]
