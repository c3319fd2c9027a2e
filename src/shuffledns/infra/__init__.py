"""Infrastructure layer — operating system integration.

This layer wraps every interaction with the process stdin, the local
filesystem and the massdns binary on PATH.  Raw OS errors must be
caught here and re-raised as a
:class:`~shuffledns.exceptions.ShufflednsError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from shuffledns.infra.filesystem import LocalPathChecker, default_scratch_directory
from shuffledns.infra.massdns_detector import PathMassdnsLocator
from shuffledns.infra.stdin_detector import StdinProbe, detect_stdin

__all__: list[str] = [
    "LocalPathChecker",
    "PathMassdnsLocator",
    "StdinProbe",
    "default_scratch_directory",
    "detect_stdin",
]
