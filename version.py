"""
Version information for the Job Board application.

This file is the single source of truth for version numbers.
Both the API service and the frontend import from here.
"""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)

# Build metadata (set by CI/CD or manually)
BUILD_DATE = "2026-10-18"
GIT_COMMIT = None  # Will be set at runtime if available
