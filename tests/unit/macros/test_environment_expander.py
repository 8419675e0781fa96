# -*- coding: utf-8 -*-
"""Unit tests for EnvironmentMacroExpander."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from github_notification_context.exceptions import MacroExpansionError
from github_notification_context.macros.environment import EnvironmentMacroExpander
from github_notification_context.models.build import BuildInfo


def test_expands_braced_and_bare_tokens_from_build_environment(
    build_info_factory: Callable[..., BuildInfo],
) -> None:
    build = build_info_factory(environment={"BRANCH_NAME": "main", "JOB": "app"})

    assert EnvironmentMacroExpander()("ci/${BRANCH_NAME}/$JOB", build) == "ci/main/app"


def test_accepts_plain_mapping_as_build() -> None:
    assert EnvironmentMacroExpander()("${A}-${ B }", {"A": "1", "B": "2"}) == "1-2"


def test_label_without_tokens_is_unchanged() -> None:
    assert EnvironmentMacroExpander()("continuous-integration/jenkins", None) == (
        "continuous-integration/jenkins"
    )


def test_double_dollar_is_literal_dollar() -> None:
    assert EnvironmentMacroExpander()("cost$$ ${A}", {"A": "x"}) == "cost$ x"


def test_lone_dollar_is_left_alone() -> None:
    assert EnvironmentMacroExpander()("a $ b $", {}) == "a $ b $"


def test_extra_variables_are_overridden_by_build() -> None:
    expander = EnvironmentMacroExpander(extra={"A": "extra", "B": "extra"})

    assert expander("${A}/${B}", {"A": "build"}) == "build/extra"


def test_unknown_token_raises() -> None:
    with pytest.raises(MacroExpansionError) as exc_info:
        EnvironmentMacroExpander()("ci/${MISSING}", {})

    assert exc_info.value.template == "ci/${MISSING}"
    assert exc_info.value.token == "${MISSING}"


def test_unterminated_token_raises() -> None:
    with pytest.raises(MacroExpansionError, match="Unterminated"):
        EnvironmentMacroExpander()("ci/${BRANCH", {"BRANCH": "x"})


@pytest.mark.parametrize("template", ["${}", "${1A}", "${A-B}"])
def test_invalid_names_raise(template: str) -> None:
    with pytest.raises(MacroExpansionError, match="Invalid macro name"):
        EnvironmentMacroExpander()(template, {"A": "x"})


def test_object_without_environment_has_no_variables() -> None:
    with pytest.raises(MacroExpansionError):
        EnvironmentMacroExpander()("$A", object())
