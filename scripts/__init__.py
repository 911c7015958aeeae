"""Operational scripts for the job board."""
