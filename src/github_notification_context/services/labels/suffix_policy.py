"""SuffixPolicy: optionally tags a context with the kind of head being built."""

from __future__ import annotations

from github_notification_context.models.head import HeadKind

SUFFIX_BY_HEAD_KIND: dict[HeadKind, str] = {
    HeadKind.BRANCH: "/branch",
    HeadKind.PR_HEAD: "/pr-head",
    HeadKind.PR_MERGE: "/pr-merge",
}


class SuffixPolicy:
    """Append /branch, /pr-head or /pr-merge when enabled, chosen by head kind only."""

    def __init__(self, enabled: bool) -> None:
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    def apply(self, label: str, head_kind: HeadKind) -> str:
        if not self._enabled:
            return label
        return label + SUFFIX_BY_HEAD_KIND[head_kind]
