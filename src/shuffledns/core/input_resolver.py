"""Reconcile command-line flags with piped standard input.

The resolver is the only component that reads stdin during
configuration.  It runs exactly one of three branches:

1. **Drain** — stdin was piped but ``--domain``, ``--resolver`` and
   ``--wordlist`` were all given.  The pipe is read to end-of-stream and
   discarded so the producer never blocks on a full pipe, and the flags
   win.
2. **Domain from stdin** — stdin was piped, ``--wordlist`` was given and
   ``--domain`` was not (``echo example.com | shuffledns -w words.txt``).
   The whole stream becomes the domain.
3. **Untouched** — every other combination.  List resolution may stream
   candidates from stdin later; that is the engine's job.

Reading is a single linear pass.  The stream is never seeked or re-read.

The drain has no timeout: it relies on the producer closing its end of
the pipe.  A long-lived producer would make the run hang here.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from shuffledns.core.models import Options
from shuffledns.core.protocols import InputAvailabilityProbe
from shuffledns.exceptions import InsufficientInputError

logger = logging.getLogger(__name__)

_CHUNK_SIZE: int = 64 * 1024
_LINE_TERMINATORS: str = "\r\n"


class InputResolver:
    """Decide where each input of a run comes from.

    Parameters
    ----------
    probe:
        Answers whether stdin was piped.  Queried once per
        :meth:`resolve` call.
    stream:
        Binary stream to read piped input from (``sys.stdin.buffer`` in
        production).
    """

    def __init__(self, probe: InputAvailabilityProbe, stream: BinaryIO) -> None:
        self._probe: InputAvailabilityProbe = probe
        self._stream: BinaryIO = stream

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self, options: Options) -> Options:
        """Apply stdin negotiation to *options* in place and return it.

        Raises
        ------
        InsufficientInputError
            If the piped domain is not valid UTF-8 text.
        """
        options.stdin_available = self._probe.has_input()
        if not options.stdin_available:
            return options

        if _all_flag_inputs_given(options):
            discarded = self._drain()
            options.stdin_available = False
            logger.debug(
                "All inputs supplied via flags; discarded %d byte(s) of stdin",
                discarded,
            )
            return options

        if options.wordlist and not options.domain:
            options.domain = self._read_domain()
            options.stdin_consumed = True
            logger.debug("Read domain from stdin: %r", options.domain)

        return options

    # ------------------------------------------------------------------
    # Stream handling
    # ------------------------------------------------------------------

    def _drain(self) -> int:
        """Read and discard the stream until end-of-stream."""
        total = 0
        while True:
            chunk = self._stream.read(_CHUNK_SIZE)
            if not chunk:
                return total
            total += len(chunk)

    def _read_domain(self) -> str | None:
        """Read the entire stream and turn it into a domain value.

        Only trailing CR/LF characters are stripped.  A value that is
        empty or blank afterwards counts as absent.
        """
        raw = self._stream.read()
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InsufficientInputError(
                "Piped input is not valid UTF-8 text; cannot read a domain from it.",
                hint="Pipe a plain-text domain, e.g. echo example.com | shuffledns -w words.txt",
            ) from exc

        domain = text.rstrip(_LINE_TERMINATORS)
        if not domain.strip():
            return None
        return domain


def _all_flag_inputs_given(options: Options) -> bool:
    return bool(options.domain and options.resolvers_file and options.wordlist)
