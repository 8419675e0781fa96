# -*- coding: utf-8 -*-
"""Custom-context strategy: statuses named by a configurable label template."""

from __future__ import annotations

from typing import TYPE_CHECKING

from github_notification_context.notifications.strategies.base import BaseNotificationStrategy

if TYPE_CHECKING:  # pragma: no cover
    from github_notification_context.models.build import BuildContext
    from github_notification_context.models.notification_config import NotificationConfig
    from github_notification_context.models.notification_request import NotificationRequest
    from github_notification_context.services.notification_assembler import (
        NotificationAssembler,
    )


class CustomContextNotificationStrategy(BaseNotificationStrategy):
    """Report statuses under contexts derived from a NotificationConfig.

    Equality is by config only; the assembler is a stateless collaborator.
    """

    def __init__(
        self,
        config: "NotificationConfig",
        assembler: "NotificationAssembler",
    ) -> None:
        self._config = config
        self._assembler = assembler

    @property
    def config(self) -> "NotificationConfig":
        return self._config

    def notifications(self, build_context: "BuildContext") -> list["NotificationRequest"]:
        return self._assembler.assemble(self._config, build_context)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._config == other._config  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._config))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(config={self._config!r})"
