# armpose/models/pose.py
"""
Pydantic models for the non-pose API responses.

Pose rows themselves are passed through as plain dicts: their columns are
whatever the poses table holds.
"""
from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body for any request the store could not serve."""
    ok: bool = False
    error: str


class StatusResponse(BaseModel):
    ok: bool
    store: str
    table: str
