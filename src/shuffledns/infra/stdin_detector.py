"""Infrastructure: detect whether standard input was piped in.

Rules
-----
* Detection via :func:`os.fstat` only — the stream is never read.
* Never blocks.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import os
import stat
import sys
from typing import IO, Any


def detect_stdin(stream: IO[Any] | None = None) -> bool:
    """Return ``True`` when *stream* is backed by a pipe, file or socket.

    *stream* defaults to :data:`sys.stdin`.  Terminals and other
    character devices (including ``/dev/null``) report ``False``, as do
    closed streams and streams without a real file descriptor.
    """
    if stream is None:
        stream = sys.stdin
    if stream is None or getattr(stream, "closed", False):
        return False

    try:
        mode = os.fstat(stream.fileno()).st_mode
    except (OSError, ValueError, AttributeError):
        # io.UnsupportedOperation subclasses both OSError and ValueError.
        return False

    return stat.S_ISFIFO(mode) or stat.S_ISREG(mode) or stat.S_ISSOCK(mode)


class StdinProbe:
    """Concrete :class:`~shuffledns.core.protocols.InputAvailabilityProbe`.

    The first answer is cached; later calls never touch the descriptor
    again.
    """

    def __init__(self, stream: IO[Any] | None = None) -> None:
        self._stream: IO[Any] | None = stream
        self._result: bool | None = None

    def has_input(self) -> bool:
        if self._result is None:
            self._result = detect_stdin(self._stream)
        return self._result
