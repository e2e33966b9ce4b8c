"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class DocumentParseError(PackageError):
    """Raised when the input text does not decode as JSON."""

    message: str = "Invalid JSON data"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class AnnotationError(PackageError):
    """Raised when an annotation write is rejected."""

    path: str
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Invalid annotation for '{self.path}': {self.message}"
