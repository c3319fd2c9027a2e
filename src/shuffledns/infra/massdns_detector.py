"""Infrastructure: locate the massdns binary when ``--massdns`` is absent.

Rules
-----
* Lookup via :func:`shutil.which` only — massdns is never executed here.
* No automatic installation.
* No ``print()`` — a missing binary is reported through the raised error.
"""

from __future__ import annotations

import platform
import shutil
from pathlib import Path

from shuffledns.exceptions import MassdnsNotFoundError

MASSDNS_BINARY: str = "massdns"


class PathMassdnsLocator:
    """Concrete :class:`~shuffledns.core.protocols.MassdnsLocator` backed by PATH."""

    def locate(self) -> str:
        """Return the resolved path of ``massdns`` on PATH.

        Raises
        ------
        MassdnsNotFoundError
            When PATH holds no massdns binary.  The hint lists install
            commands for the current platform.
        """
        found = shutil.which(MASSDNS_BINARY)
        if found is None:
            hint_lines = ["Pass the binary with -m/--massdns, or install it using one of:"]
            hint_lines.extend(f"  {cmd}" for cmd in _install_commands(platform.system()))
            raise MassdnsNotFoundError(
                "massdns is not installed or not on PATH.",
                hint="\n".join(hint_lines),
            )
        return str(Path(found).resolve())


def _install_commands(system: str) -> tuple[str, ...]:
    if system == "Linux":
        return (
            "sudo apt install massdns",
            "git clone https://github.com/blechschmidt/massdns && cd massdns && make",
        )
    if system == "Darwin":
        return ("brew install massdns",)
    return ("Build massdns from https://github.com/blechschmidt/massdns",)
