"""Package marker for the job board REST API service."""
