# -*- coding: utf-8 -*-
"""MessageResolver: picks the status description for a result category."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from github_notification_context.models.result import ResultCategory
from github_notification_context.utils.text import is_blank

DEFAULT_MESSAGES: Mapping[ResultCategory, str] = MappingProxyType(
    {
        ResultCategory.QUEUED: "This commit is scheduled to be built",
        ResultCategory.PENDING: "This commit is being built",
        ResultCategory.SUCCESS: "This commit looks good",
        ResultCategory.UNSTABLE: "This commit has test failures",
        ResultCategory.FAILURE: "This commit cannot be built",
        ResultCategory.ABORTED: "The build of this commit was aborted",
        ResultCategory.OTHER: "Something is wrong with the build of this commit",
    }
)


class MessageResolver:
    """Pure resolver with two modes.

    Per-result (default): a non-blank override for the category wins,
    otherwise the built-in text for the category is used.

    Legacy: overrides are ignored and the host's single default message is
    used for every category, so configs from before per-result messages
    keep producing the same descriptions.
    """

    def __init__(self, defaults: Mapping[ResultCategory, str] = DEFAULT_MESSAGES) -> None:
        self._defaults = defaults

    def resolve(
        self,
        category: ResultCategory,
        overrides: Mapping[ResultCategory, str],
        *,
        legacy: bool = False,
        host_default: Optional[str] = None,
    ) -> str:
        if legacy:
            if not is_blank(host_default):
                return host_default  # type: ignore[return-value]
            return self._defaults[category]
        override = overrides.get(category)
        if not is_blank(override):
            return override  # type: ignore[return-value]
        return self._defaults[category]
