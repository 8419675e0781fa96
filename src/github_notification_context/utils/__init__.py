# -*- coding: utf-8 -*-
"""Utility modules."""

from github_notification_context.utils.text import is_blank

__all__ = ["is_blank"]
