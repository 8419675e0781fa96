# -*- coding: utf-8 -*-
"""Commit status to publish, produced by the resolution strategy."""

from __future__ import annotations

from dataclasses import dataclass

from github_notification_context.models.result import StatusState


@dataclass(frozen=True, slots=True)
class NotificationRequest:
    """One commit status. Delivery is the host's job."""

    context: str
    target_url: str
    message: str
    state: StatusState
    ignore_error: bool = False
