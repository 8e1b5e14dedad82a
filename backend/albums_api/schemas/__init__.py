"""Pydantic Schemas — the Album shape and response envelopes for API endpoints."""
