"""Label pipeline: split, expand, suffix."""

from github_notification_context.services.labels.expander import LabelExpander
from github_notification_context.services.labels.splitter import MultiLabelSplitter
from github_notification_context.services.labels.suffix_policy import (
    SUFFIX_BY_HEAD_KIND,
    SuffixPolicy,
)

__all__ = [
    "LabelExpander",
    "MultiLabelSplitter",
    "SUFFIX_BY_HEAD_KIND",
    "SuffixPolicy",
]
