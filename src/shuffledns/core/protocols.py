"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so tests can swap in deterministic fakes for the
process stdin and the filesystem.
"""

from __future__ import annotations

from typing import Protocol

from shuffledns.core.models import ResolvedRun


class InputAvailabilityProbe(Protocol):
    """Contract for the one-shot "was stdin piped in?" check."""

    def has_input(self) -> bool:
        """Return ``True`` when standard input is a pipe, file or socket.

        Implementations must not read from or block on the stream.
        """
        ...  # pragma: no cover


class PathChecker(Protocol):
    """Contract for filesystem checks performed by the validator."""

    def require_readable_file(self, field: str, path: str) -> None:
        """Ensure *path* is an existing, readable regular file.

        Raises
        ------
        InputFileError
            When the path is missing, not a file, or unreadable.
        """
        ...  # pragma: no cover

    def require_directory(self, field: str, path: str) -> None:
        """Ensure *path* is an existing directory.

        Raises
        ------
        InputFileError
            When the path is missing or not a directory.
        """
        ...  # pragma: no cover


class EnumerationEngine(Protocol):
    """Contract for the component that performs the actual enumeration.

    The engine receives a fully validated run and returns a process exit
    code.  It is the only component allowed to read stdin after the
    resolver, and only for list resolution without ``--list``.
    """

    def run(self, resolved: ResolvedRun) -> int:
        ...  # pragma: no cover


class MassdnsLocator(Protocol):
    """Contract for finding the massdns binary when ``--massdns`` is absent."""

    def locate(self) -> str:
        """Return the path of a usable massdns binary.

        Raises
        ------
        MassdnsNotFoundError
            When no binary can be found.
        """
        ...  # pragma: no cover
