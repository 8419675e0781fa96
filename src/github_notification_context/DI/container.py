# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from github_notification_context.config import Settings, get_settings
from github_notification_context.diagnostics.sinks import StructlogDiagnosticSink
from github_notification_context.macros.environment import EnvironmentMacroExpander
from github_notification_context.models.notification_config import NotificationConfig
from github_notification_context.notifications.strategies.custom_context import (
    CustomContextNotificationStrategy,
)
from github_notification_context.services.classification import BuildContextFactory
from github_notification_context.services.notification_assembler import NotificationAssembler


def _build_notification_config(settings: Settings) -> NotificationConfig:
    """Build the notification config from NOTIFICATION__* settings."""
    return NotificationConfig.from_settings(settings.notification)


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, config, sink, expander, assembler, strategy.

    Hosts with their own macro engine or build log override the providers:

        container = Container()
        container.macro_expander.override(providers.Object(my_expander))
    """

    config = providers.Callable(get_settings)

    notification_config = providers.Singleton(_build_notification_config, config)

    diagnostic_sink = providers.Singleton(StructlogDiagnosticSink)

    macro_expander = providers.Singleton(EnvironmentMacroExpander)

    notification_assembler = providers.Singleton(
        NotificationAssembler,
        expander=macro_expander,
        sink=diagnostic_sink,
    )

    build_context_factory = providers.Singleton(BuildContextFactory)

    notification_strategy = providers.Singleton(
        CustomContextNotificationStrategy,
        config=notification_config,
        assembler=notification_assembler,
    )
