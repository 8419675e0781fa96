"""Small string helpers."""

from __future__ import annotations

from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    """Return True if value is None, empty or whitespace only."""
    return value is None or not value.strip()
