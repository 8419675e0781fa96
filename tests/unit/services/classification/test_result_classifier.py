# -*- coding: utf-8 -*-
"""Unit tests for ResultClassifier."""

from __future__ import annotations

import pytest

from github_notification_context.models.result import ResultCategory
from github_notification_context.services.classification.result_classifier import (
    ResultClassifier,
)


def test_no_result_with_run_is_pending() -> None:
    assert ResultClassifier().classify(None, has_run=True) is ResultCategory.PENDING


def test_no_result_without_run_is_queued() -> None:
    assert ResultClassifier().classify(None, has_run=False) is ResultCategory.QUEUED


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("SUCCESS", ResultCategory.SUCCESS),
        ("UNSTABLE", ResultCategory.UNSTABLE),
        ("FAILURE", ResultCategory.FAILURE),
        ("ABORTED", ResultCategory.ABORTED),
        ("success", ResultCategory.SUCCESS),
        (" Failure ", ResultCategory.FAILURE),
    ],
)
def test_known_terminal_results_map_one_to_one(raw: str, expected: ResultCategory) -> None:
    assert ResultClassifier().classify(raw) is expected


@pytest.mark.parametrize("raw", ["NOT_BUILT", "CANCELLED_BY_SCHEDULER", ""])
def test_unknown_terminal_results_map_to_other(raw: str) -> None:
    assert ResultClassifier().classify(raw) is ResultCategory.OTHER


def test_has_run_is_ignored_once_a_result_exists() -> None:
    assert ResultClassifier().classify("SUCCESS", has_run=False) is ResultCategory.SUCCESS
