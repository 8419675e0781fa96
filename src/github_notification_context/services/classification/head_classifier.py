"""HeadClassifier: maps a source reference onto a HeadKind (pure, no I/O)."""

from __future__ import annotations

from github_notification_context.models.head import HeadKind, SourceReference


class HeadClassifier:
    """Branch builds, pull-request heads and pull-request merges."""

    def classify(self, source: SourceReference) -> HeadKind:
        if not source.is_pull_request:
            return HeadKind.BRANCH
        if source.merge:
            return HeadKind.PR_MERGE
        return HeadKind.PR_HEAD
