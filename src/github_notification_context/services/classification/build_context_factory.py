"""Host-boundary adapter: BuildInfo -> BuildContext."""

from __future__ import annotations

from github_notification_context.models.build import BuildContext, BuildInfo
from github_notification_context.models.result import ResultCategory, StatusState
from github_notification_context.services.classification.head_classifier import HeadClassifier
from github_notification_context.services.classification.result_classifier import (
    ResultClassifier,
)

_STATE_BY_RESULT: dict[ResultCategory, StatusState] = {
    ResultCategory.QUEUED: StatusState.PENDING,
    ResultCategory.PENDING: StatusState.PENDING,
    ResultCategory.SUCCESS: StatusState.SUCCESS,
    ResultCategory.UNSTABLE: StatusState.FAILURE,
    ResultCategory.FAILURE: StatusState.ERROR,
    ResultCategory.ABORTED: StatusState.ERROR,
    ResultCategory.OTHER: StatusState.ERROR,
}


class BuildContextFactory:
    """Classify a host build and attach the default URL, state and ignore-error flag."""

    def __init__(
        self,
        *,
        result_classifier: ResultClassifier | None = None,
        head_classifier: HeadClassifier | None = None,
    ) -> None:
        self._result_classifier = result_classifier or ResultClassifier()
        self._head_classifier = head_classifier or HeadClassifier()

    def create(
        self,
        build: BuildInfo,
        *,
        default_message: str | None = None,
        ignore_error: bool | None = None,
    ) -> BuildContext:
        """Build the per-invocation view of build.

        Args:
            build: Host build handle.
            default_message: Host's static message for legacy single-message mode.
            ignore_error: Whether the host should swallow delivery errors.
                Defaults to True while the build is queued or running.
        """
        category = self._result_classifier.classify(build.result, has_run=build.has_run)
        if ignore_error is None:
            ignore_error = not category.is_terminal
        return BuildContext(
            head_kind=self._head_classifier.classify(build.source),
            result_category=category,
            default_target_url=build.url,
            default_state=default_state_for(category),
            default_ignore_error=ignore_error,
            default_message=default_message,
            build=build,
        )


def default_state_for(category: ResultCategory) -> StatusState:
    """Commit status state the host reports for a result category."""
    return _STATE_BY_RESULT[category]
