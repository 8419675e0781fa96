# -*- coding: utf-8 -*-
"""Build result categories and commit-status states."""

from __future__ import annotations

from enum import Enum


class ResultCategory(str, Enum):
    """Semantic build outcome used for filtering and message selection.

    QUEUED and PENDING only occur while no terminal result exists yet.
    OTHER covers every terminal outcome not listed here (e.g. NOT_BUILT).
    """

    QUEUED = "QUEUED"
    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    UNSTABLE = "UNSTABLE"
    FAILURE = "FAILURE"
    ABORTED = "ABORTED"
    OTHER = "OTHER"

    @property
    def is_terminal(self) -> bool:
        """True once the build has finished."""
        return self not in (ResultCategory.QUEUED, ResultCategory.PENDING)


class StatusState(str, Enum):
    """Commit status state accepted by the hosting API."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"
