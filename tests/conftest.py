# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from github_notification_context.diagnostics.sinks import BuildLogDiagnosticSink
from github_notification_context.exceptions import MacroExpansionError
from github_notification_context.models.build import BuildContext, BuildInfo
from github_notification_context.models.head import HeadKind, SourceReference
from github_notification_context.models.notification_config import NotificationConfig
from github_notification_context.models.result import ResultCategory, StatusState


@pytest.fixture
def target_url() -> str:
    """Default build URL used by tests."""
    return "https://ci.example.org/job/app/job/main/7/display/redirect"


@pytest.fixture
def build_log() -> BuildLogDiagnosticSink:
    """Fresh line-collecting sink per test."""
    return BuildLogDiagnosticSink()


@pytest.fixture
def identity_expander() -> Callable[[str, Any], str]:
    """Macro expander that returns the template unchanged."""
    return lambda template, build: template


@pytest.fixture
def failing_expander() -> Callable[[str, Any], str]:
    """Macro expander that rejects every template."""

    def _expand(template: str, build: Any) -> str:
        raise MacroExpansionError(f"Unrecognized macro in '{template}'", template=template)

    return _expand


@pytest.fixture
def config_factory() -> Callable[..., NotificationConfig]:
    """Build NotificationConfig with a default label and easy overrides."""

    def _build(**overrides: Any) -> NotificationConfig:
        overrides.setdefault("context_label", "ci")
        return NotificationConfig(**overrides)

    return _build


@pytest.fixture
def build_context_factory(target_url: str) -> Callable[..., BuildContext]:
    """Build BuildContext for a successful branch build with easy overrides."""

    def _build(**overrides: Any) -> BuildContext:
        return BuildContext(
            head_kind=overrides.pop("head_kind", HeadKind.BRANCH),
            result_category=overrides.pop("result_category", ResultCategory.SUCCESS),
            default_target_url=overrides.pop("default_target_url", target_url),
            default_state=overrides.pop("default_state", StatusState.SUCCESS),
            default_ignore_error=overrides.pop("default_ignore_error", False),
            default_message=overrides.pop("default_message", None),
            build=overrides.pop("build", None),
        )

    return _build


@pytest.fixture
def build_info_factory(target_url: str) -> Callable[..., BuildInfo]:
    """Build BuildInfo for a finished branch build with easy overrides."""

    def _build(**overrides: Any) -> BuildInfo:
        return BuildInfo(
            source=overrides.pop("source", SourceReference(name="main")),
            url=overrides.pop("url", target_url),
            result=overrides.pop("result", "SUCCESS"),
            has_run=overrides.pop("has_run", True),
            environment=overrides.pop("environment", {"BRANCH_NAME": "main"}),
        )

    return _build
