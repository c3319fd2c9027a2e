"""Custom exception hierarchy for shuffledns.

All exceptions that cross layer boundaries must inherit from
:class:`ShufflednsError`.  Raw OS errors (``OSError``,
``UnicodeDecodeError``) must never propagate beyond the layer that
triggered them — they are caught and re-raised as a typed subclass
defined here.

Hierarchy
---------
ShufflednsError
├── ConfigurationError
│   ├── InsufficientInputError
│   ├── AmbiguousInputError
│   ├── InputFileError
│   ├── ParameterRangeError
│   └── ConflictingFlagsError
└── EnvironmentError
    └── MassdnsNotFoundError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shuffledns.core.models import ModeCheck


class ShufflednsError(Exception):
    """Base exception for all shuffledns errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration -----------------------------------------------------------

class ConfigurationError(ShufflednsError):
    """Raised when the resolved configuration cannot drive a run.

    Configuration errors are terminal: they are never retried or
    auto-corrected.
    """


class InsufficientInputError(ConfigurationError):
    """Raised when no mode has all of its required inputs."""

    def __init__(
        self,
        message: str,
        *,
        checks: tuple[ModeCheck, ...] = (),
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.checks: tuple[ModeCheck, ...] = checks


class AmbiguousInputError(ConfigurationError):
    """Raised when more than one mode has all of its required inputs."""

    def __init__(
        self,
        message: str,
        *,
        checks: tuple[ModeCheck, ...] = (),
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.checks: tuple[ModeCheck, ...] = checks


class InputFileError(ConfigurationError):
    """Raised when a referenced path is missing or unreadable."""

    def __init__(
        self,
        message: str,
        *,
        field: str,
        path: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.field: str = field
        self.path: str = path


class ParameterRangeError(ConfigurationError):
    """Raised when a numeric option falls outside its accepted bounds."""

    def __init__(
        self,
        message: str,
        *,
        field: str,
        value: int,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.field: str = field
        self.value: int = value


class ConflictingFlagsError(ConfigurationError):
    """Raised when two flags that cannot be combined are both set."""


# --- Environment / tooling ---------------------------------------------------

class EnvironmentError(ShufflednsError):
    """Raised when a required runtime dependency is not available."""


class MassdnsNotFoundError(EnvironmentError):
    """Raised when the massdns binary cannot be located."""
