"""
API service route modules.

Each module handles a specific area of functionality.
"""

from .jobs import router as jobs_router

__all__ = [
    "jobs_router",
]
