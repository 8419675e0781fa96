# -*- coding: utf-8 -*-
"""Environment-variable macro expander.

Supports $NAME and ${NAME} tokens, resolved from the build's environment;
$$ yields a literal $. Unknown names and unterminated ${ raise MacroExpansionError.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from github_notification_context.exceptions import MacroExpansionError

_TOKEN = re.compile(
    r"\$(?:(?P<escaped>\$)|\{(?P<braced>[^}]*)\}|(?P<named>[A-Za-z_][A-Za-z0-9_]*)|(?P<unterminated>\{))"
)
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class EnvironmentMacroExpander:
    """Expand label tokens from BuildInfo.environment (or a plain mapping)."""

    def __init__(self, extra: Mapping[str, str] | None = None) -> None:
        """
        Args:
            extra: Variables available to every build; build variables win on conflict.
        """
        self._extra = dict(extra or {})

    def __call__(self, template: str, build: Any) -> str:
        variables = {**self._extra, **self._environment_of(build)}

        def _substitute(match: re.Match[str]) -> str:
            if match.group("escaped") is not None:
                return "$"
            if match.group("unterminated") is not None:
                raise MacroExpansionError(
                    f"Unterminated macro at offset {match.start()}",
                    template=template,
                    token=match.group(0),
                )
            name = match.group("braced")
            if name is None:
                name = match.group("named")
            name = name.strip()
            if not _IDENTIFIER.fullmatch(name):
                raise MacroExpansionError(
                    f"Invalid macro name '{name}'",
                    template=template,
                    token=match.group(0),
                )
            if name not in variables:
                raise MacroExpansionError(
                    f"Unrecognized macro '{name}'",
                    template=template,
                    token=match.group(0),
                )
            return str(variables[name])

        return _TOKEN.sub(_substitute, template)

    @staticmethod
    def _environment_of(build: Any) -> Mapping[str, str]:
        if build is None:
            return {}
        if isinstance(build, Mapping):
            return build
        environment = getattr(build, "environment", None)
        if isinstance(environment, Mapping):
            return environment
        return {}
