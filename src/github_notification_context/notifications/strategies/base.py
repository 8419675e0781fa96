# -*- coding: utf-8 -*-
"""Base notification strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from github_notification_context.models.build import BuildContext
    from github_notification_context.models.notification_request import NotificationRequest


class BaseNotificationStrategy(ABC):
    """Abstract base for strategies deciding which commit statuses a build reports.

    Hosts keep strategies in sets and de-duplicate them, so subclasses must
    implement value equality and hashing.
    """

    @abstractmethod
    def notifications(self, build_context: "BuildContext") -> list["NotificationRequest"]:
        """
        Return the commit statuses to publish

        Args:
            build_context: Classified view of the build

        Returns:
            Ordered, possibly empty, list of requests
        """
        pass

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        pass

    @abstractmethod
    def __hash__(self) -> int:
        pass
