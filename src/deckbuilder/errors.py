"""
Exceptions raised while building decks.
"""

from typing import Iterable, Optional


class DeckBuilderError(Exception):
    """Base class for all deck generation errors."""


class ConfigurationError(DeckBuilderError, ValueError):
    """Raised when design constants or a config file describe an invalid layout."""

    def __init__(self, issues: Iterable[str]):
        if isinstance(issues, str):
            issues = [issues]
        self.issues = [str(i).strip() for i in issues if str(i).strip()]
        if not self.issues:
            self.issues = ["Invalid configuration"]
        super().__init__(self._format())

    def _format(self) -> str:
        if len(self.issues) == 1:
            return f"Configuration error: {self.issues[0]}"
        lines = ["Configuration validation failed:"]
        for issue in self.issues:
            lines.append(f"- {issue}")
        return "\n".join(lines)


class ContentSchemaError(DeckBuilderError, ValueError):
    """Raised when slide content does not match the expected structure."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid slide content at '{field}': {message}")


class ArchiveIOError(DeckBuilderError, OSError):
    """Raised when the generated archive cannot be read, patched or written."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"{message} ({path})"
        super().__init__(message)
