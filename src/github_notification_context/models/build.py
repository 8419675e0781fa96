# -*- coding: utf-8 -*-
"""Build views handed to the resolution strategy.

BuildInfo is what the host knows about a build (raw result, source reference,
environment). BuildContext is the classified, read-only view the assembler works on.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from github_notification_context.models.head import HeadKind, SourceReference
from github_notification_context.models.result import ResultCategory, StatusState


@dataclass(frozen=True, slots=True)
class BuildInfo:
    """Raw host-side build handle."""

    source: SourceReference
    url: str
    result: Optional[str] = None
    """Raw result string (e.g. SUCCESS, NOT_BUILT); None while running or queued."""
    has_run: bool = True
    """False while the build is still waiting in the queue."""
    environment: Mapping[str, str] = field(default_factory=dict)
    """Variables available to macro tokens in the context label."""


@dataclass(frozen=True, slots=True)
class BuildContext:
    """Per-invocation view of a build: classification plus host defaults."""

    head_kind: HeadKind
    result_category: Optional[ResultCategory]
    """None means the build is still running (treated as PENDING)."""
    default_target_url: str
    default_state: StatusState
    default_ignore_error: bool = False
    default_message: Optional[str] = None
    """Host's single static message, used when per-result messages are disabled."""
    build: Any = None
    """Opaque handle passed through to the macro expander."""

    @property
    def effective_result(self) -> ResultCategory:
        if self.result_category is None:
            return ResultCategory.PENDING
        return self.result_category
