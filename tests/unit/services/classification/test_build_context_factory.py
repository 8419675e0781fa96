# -*- coding: utf-8 -*-
"""Unit tests for BuildContextFactory."""

from __future__ import annotations

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any, cast
from unittest.mock import Mock

import pytest

from github_notification_context.models.build import BuildInfo
from github_notification_context.models.head import HeadKind, SourceReference
from github_notification_context.models.result import ResultCategory, StatusState
from github_notification_context.services.classification.build_context_factory import (
    BuildContextFactory,
    default_state_for,
)


def test_create_classifies_result_and_head(
    build_info_factory: Callable[..., BuildInfo],
    target_url: str,
) -> None:
    build = build_info_factory(
        source=SourceReference(name="PR-5", pull_request_number=5, merge=True),
        result="UNSTABLE",
    )

    context = BuildContextFactory().create(build, default_message="Build finished", ignore_error=True)

    assert context.head_kind is HeadKind.PR_MERGE
    assert context.result_category is ResultCategory.UNSTABLE
    assert context.default_state is StatusState.FAILURE
    assert context.default_target_url == target_url
    assert context.default_ignore_error is True
    assert context.default_message == "Build finished"
    assert context.build is build


def test_create_marks_queued_build_pending_state(
    build_info_factory: Callable[..., BuildInfo],
) -> None:
    build = build_info_factory(result=None, has_run=False)

    context = BuildContextFactory().create(build)

    assert context.result_category is ResultCategory.QUEUED
    assert context.default_state is StatusState.PENDING


def test_create_uses_injected_classifiers(build_info_factory: Callable[..., BuildInfo]) -> None:
    result_classifier = SimpleNamespace(classify=Mock(return_value=ResultCategory.ABORTED))
    head_classifier = SimpleNamespace(classify=Mock(return_value=HeadKind.PR_HEAD))
    factory = BuildContextFactory(
        result_classifier=cast(Any, result_classifier),
        head_classifier=cast(Any, head_classifier),
    )
    build = build_info_factory(result="whatever", has_run=True)

    context = factory.create(build)

    result_classifier.classify.assert_called_once_with("whatever", has_run=True)
    head_classifier.classify.assert_called_once_with(build.source)
    assert context.result_category is ResultCategory.ABORTED
    assert context.head_kind is HeadKind.PR_HEAD


def test_default_state_covers_every_category() -> None:
    assert {default_state_for(category) for category in ResultCategory} <= set(StatusState)
    assert default_state_for(ResultCategory.SUCCESS) is StatusState.SUCCESS
    assert default_state_for(ResultCategory.OTHER) is StatusState.ERROR


@pytest.mark.parametrize(
    ("result", "has_run", "expected"),
    [
        (None, False, True),
        (None, True, True),
        ("SUCCESS", True, False),
        ("FAILURE", True, False),
        ("NOT_BUILT", True, False),
    ],
)
def test_ignore_error_defaults_to_in_progress(
    result: str | None,
    has_run: bool,
    expected: bool,
    build_info_factory: Callable[..., BuildInfo],
) -> None:
    build = build_info_factory(result=result, has_run=has_run)

    context = BuildContextFactory().create(build)

    assert context.default_ignore_error is expected


def test_explicit_ignore_error_overrides_default(build_info_factory: Callable[..., BuildInfo]) -> None:
    queued = build_info_factory(result=None, has_run=False)
    finished = build_info_factory(result="SUCCESS", has_run=True)

    assert BuildContextFactory().create(queued, ignore_error=False).default_ignore_error is False
    assert BuildContextFactory().create(finished, ignore_error=True).default_ignore_error is True
