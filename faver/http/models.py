# faver/http/models.py
"""
Data models for the faver HTTP layer.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class FetchedResource:
    """Fully buffered response to a single GET request."""

    url: str
    final_url: str
    status: int
    content_type: str
    content: bytes
