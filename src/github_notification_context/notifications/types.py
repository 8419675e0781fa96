"""Collaborator protocols injected by the host."""

from __future__ import annotations

from typing import Any, Protocol


class MacroExpander(Protocol):
    """Expand macro tokens in a label template for a given build."""

    def __call__(self, template: str, build: Any) -> str:
        """Return the expanded template.

        Args:
            template: Raw label, possibly containing macro tokens.
            build: Opaque build handle (BuildContext.build).

        Raises:
            Exception: Any error; callers fall back to the raw template.
        """
        ...


class DiagnosticSink(Protocol):
    """Receives informational and error records produced while resolving contexts."""

    def info(self, message: str, **fields: Any) -> None:
        ...

    def error(self, message: str, *, exc: BaseException | None = None, **fields: Any) -> None:
        ...
