"""MultiLabelSplitter: turns one configured label into one or more labels."""

from __future__ import annotations

from github_notification_context.utils.text import is_blank


class MultiLabelSplitter:
    """Pure splitter.

    Disabled (or blank delimiter): the label is returned as-is, untrimmed.
    Enabled: split on the delimiter, strip every piece and drop blank ones,
    keeping the original order. All-blank input yields an empty list.
    """

    def split(self, label: str, *, enabled: bool, delimiter: str) -> list[str]:
        if not enabled or is_blank(delimiter):
            return [label]
        pieces = (piece.strip() for piece in label.split(delimiter))
        return [piece for piece in pieces if piece]
