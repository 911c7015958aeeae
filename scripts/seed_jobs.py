"""
Seed script to populate sample job postings for demo purposes.

Usage:
    python -m scripts.seed_jobs              # Add 20 sample jobs
    python -m scripts.seed_jobs --count 50   # Add 50 sample jobs
    python -m scripts.seed_jobs --clear      # Clear all jobs first, then seed
"""

import argparse
import random
from datetime import datetime, timedelta, timezone
from typing import Optional

from jobboard.common.config import Config
from jobboard.common.logger import get_logger, setup_logging
from jobboard.common.repositories import JobPostingRepositoryInterface, get_job_posting_repository
from jobboard.common.types import JOB_TYPES
from jobboard.services.job_posting_service import build_job_document

logger = get_logger(__name__)

# Sample data for generating realistic job listings
COMPANIES = [
    "Amazon", "Microsoft", "Google", "Flipkart", "Swiggy", "Zomato", "Razorpay",
    "Freshworks", "Zoho", "Infosys", "TCS", "Wipro", "Paytm", "PhonePe",
    "CRED", "Meesho", "Ola", "Atlassian", "Postman", "BrowserStack",
]

ROLES = [
    "Full Stack Developer",
    "Backend Engineer",
    "Frontend Developer",
    "Node.js Developer",
    "React Developer",
    "Python Developer",
    "Data Analyst",
    "Data Engineer",
    "ML Engineer",
    "DevOps Engineer",
    "QA Engineer",
    "UI/UX Designer",
    "Product Manager",
    "Android Developer",
    "iOS Developer",
]

LOCATIONS = [
    "Bengaluru",
    "Chennai",
    "Hyderabad",
    "Mumbai",
    "Pune",
    "Delhi NCR",
    "Kolkata",
    "Remote",
    "Remote",  # Weighted more heavily
]

EXPERIENCE_LEVELS = ["0-1 years", "1-3 years", "3-5 years", "5+ years"]

WORK_LOCATIONS = ["Onsite", "Hybrid", "Remote"]


def generate_sample_job(now: datetime) -> dict:
    """Generate a single sample job document with a creation time in the last year."""
    company = random.choice(COMPANIES)
    role = random.choice(ROLES)

    min_salary = random.randrange(200_000, 1_500_000, 50_000)
    max_salary = min_salary + random.randrange(100_000, 1_400_000, 50_000)

    created_at = now - timedelta(
        days=random.randint(0, 364),
        hours=random.randint(0, 23),
        minutes=random.randint(0, 59),
    )
    deadline = now + timedelta(days=random.randint(7, 180))

    payload = {
        "jobTitle": role,
        "companyName": company,
        "location": random.choice(LOCATIONS),
        "jobType": random.choice(JOB_TYPES),
        "minSalary": min_salary,
        "maxSalary": max_salary,
        "applicationDeadline": deadline.date().isoformat(),
        "jobDescription": (
            f"We are looking for a {role} to join our team at {company}. "
            f"You will build and ship features used by millions of customers."
        ),
    }
    document = build_job_document(payload, created_at)

    # Optional display fields; listings backfill them when absent
    if random.random() < 0.5:
        document["experienceLevel"] = random.choice(EXPERIENCE_LEVELS)
    if random.random() < 0.5:
        document["workLocation"] = random.choice(WORK_LOCATIONS)

    return document


def seed_jobs(
    count: int = 20,
    clear: bool = False,
    repository: Optional[JobPostingRepositoryInterface] = None,
) -> int:
    """
    Seed the database with sample job postings.

    Args:
        count: Number of jobs to create
        clear: If True, clear existing jobs first
        repository: Repository to write to (defaults to the configured one)

    Returns:
        Number of jobs inserted
    """
    repository = repository or get_job_posting_repository()
    repository.ensure_indexes()

    if clear:
        deleted = repository.delete_all()
        logger.info(f"Cleared {deleted} existing jobs")

    now = datetime.now(timezone.utc)
    jobs = [generate_sample_job(now) for _ in range(count)]

    inserted = 0
    for job in jobs:
        inserted += repository.insert_one(job).inserted_count
    logger.info(f"Inserted {inserted} sample jobs")

    for job in jobs[:3]:
        logger.info(f"  - {job['companyName']}: {job['jobTitle']} ({job['location']})")

    logger.info(f"Total jobs: {repository.count_documents({})}")
    return inserted


def main():
    parser = argparse.ArgumentParser(description="Seed sample jobs for demo")
    parser.add_argument("--count", type=int, default=20, help="Number of jobs to create")
    parser.add_argument("--clear", action="store_true", help="Clear existing jobs first")

    args = parser.parse_args()

    setup_logging(level=Config.LOG_LEVEL, format=Config.LOG_FORMAT)

    issues = Config.validate()
    if issues:
        for issue in issues:
            logger.error(issue)
        raise SystemExit(1)
    logger.info(Config.summary())

    seed_jobs(count=args.count, clear=args.clear)


if __name__ == "__main__":
    main()
