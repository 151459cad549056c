"""Exception types for pycompatlint."""

from __future__ import annotations


class CompatLintError(Exception):
    """Base exception for expected application errors."""


class NotATreeError(CompatLintError):
    """Raised when a document root cannot be traversed as a feature tree."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Expected a JSON object at the document root, got {type_name}")


class DocumentLoadError(CompatLintError):
    """Raised when a data file cannot be read or decoded."""

    def __init__(self, path: str, *, cause: str | None = None) -> None:
        self.path = path
        detail = f"Unable to load {path}"
        if cause:
            detail = f"{detail} ({cause})"
        super().__init__(detail)
