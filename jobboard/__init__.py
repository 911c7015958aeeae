"""Core library for the job board: storage, search and creation rules."""
