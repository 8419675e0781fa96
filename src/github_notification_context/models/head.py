# -*- coding: utf-8 -*-
"""Head kinds and the source reference a build was started from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class HeadKind(str, Enum):
    """What is being built."""

    BRANCH = "BRANCH"
    PR_HEAD = "PR_HEAD"
    """Source commit of a pull request."""
    PR_MERGE = "PR_MERGE"
    """Synthetic merge of a pull request into its target branch."""


@dataclass(frozen=True, slots=True)
class SourceReference:
    """Host-side descriptor of the reference a build checked out."""

    name: str
    """Branch name, or the job name of a pull request (e.g. PR-42)."""
    pull_request_number: Optional[int] = None
    """None for branch builds."""
    merge: bool = False
    """True when a pull request is built as merged with its target."""

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request_number is not None
