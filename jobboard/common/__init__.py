"""Shared configuration, logging, error types, storage and helpers."""
