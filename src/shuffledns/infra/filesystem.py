"""Infrastructure: filesystem checks used during validation."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from shuffledns.exceptions import InputFileError


class LocalPathChecker:
    """Concrete :class:`~shuffledns.core.protocols.PathChecker` for the local disk."""

    def require_readable_file(self, field: str, path: str) -> None:
        target = Path(path)
        if not target.exists():
            raise InputFileError(
                f"File given with {field} does not exist: {path}",
                field=field,
                path=path,
            )
        if not target.is_file():
            raise InputFileError(
                f"Path given with {field} is not a file: {path}",
                field=field,
                path=path,
            )
        if not os.access(target, os.R_OK):
            raise InputFileError(
                f"File given with {field} is not readable: {path}",
                field=field,
                path=path,
                hint="Check the file permissions.",
            )

    def require_directory(self, field: str, path: str) -> None:
        if not Path(path).is_dir():
            raise InputFileError(
                f"Directory given with {field} does not exist: {path}",
                field=field,
                path=path,
            )


def default_scratch_directory() -> str:
    """Return the directory used for temporary data when none is given."""
    return tempfile.gettempdir()
