# -*- coding: utf-8 -*-
"""Unit tests for result, head and build models."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from github_notification_context.models.build import BuildContext
from github_notification_context.models.head import SourceReference
from github_notification_context.models.result import ResultCategory


@pytest.mark.parametrize(
    ("category", "terminal"),
    [
        (ResultCategory.QUEUED, False),
        (ResultCategory.PENDING, False),
        (ResultCategory.SUCCESS, True),
        (ResultCategory.UNSTABLE, True),
        (ResultCategory.FAILURE, True),
        (ResultCategory.ABORTED, True),
        (ResultCategory.OTHER, True),
    ],
)
def test_is_terminal(category: ResultCategory, terminal: bool) -> None:
    assert category.is_terminal is terminal


def test_missing_result_category_is_treated_as_pending(
    build_context_factory: Callable[..., BuildContext],
) -> None:
    context = build_context_factory(result_category=None)

    assert context.effective_result is ResultCategory.PENDING


def test_source_reference_is_pull_request_only_with_number() -> None:
    assert SourceReference(name="main").is_pull_request is False
    assert SourceReference(name="PR-3", pull_request_number=3).is_pull_request is True
