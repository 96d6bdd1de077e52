"""Queries: read-only use-cases returning DTOs."""
