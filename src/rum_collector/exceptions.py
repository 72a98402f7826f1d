"""
Custom exceptions for the RUM collector classification core.

Classification functions never raise on request data. These exceptions
cover configuration problems that surface while loading settings or static
signature tables at process start.
"""

from pathlib import Path
from typing import Optional


class ClassificationError(Exception):
    """
    Base exception for all classification-core errors.

    All other exceptions in this package inherit from this class,
    allowing for broad exception catching when needed.
    """

    pass


class SignatureTableError(ClassificationError):
    """
    Raised when a bot or spider signature table cannot be loaded.

    Attributes:
        path: The table file that failed to load (optional)
        reason: Detailed explanation of what is wrong (optional)
        message: Detailed error message
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        reason: Optional[str] = None,
    ):
        self.path = path
        self.reason = reason
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with table context."""
        parts = [self.message]
        if self.path is not None:
            parts.append(f"path='{self.path}'")
        if self.reason:
            parts.append(f"reason: {self.reason}")
        return " - ".join(parts)


class ConfigurationError(ClassificationError):
    """Raised when a settings file exists but cannot be read or parsed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        self.message = message
        super().__init__(
            f"{message} (path='{path}')" if path is not None else message
        )
