"""CLI application entry point for shuffledns.

This module is the **sole error boundary** for the entire application.
It catches :class:`~shuffledns.exceptions.ShufflednsError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Pipeline
--------
1. Parse flags into :class:`~shuffledns.core.models.Options`
   (``--version`` and ``--help`` exit here).
2. Configure logging from ``--silent``/``-v``/``--no-color``.
3. Probe stdin once and reconcile it with the flags.
4. Fill in the scratch directory, validate, and freeze the run.
5. Hand the run to the enumeration engine, when one is attached.
"""

from __future__ import annotations

import io
import logging
import sys
from typing import BinaryIO

from shuffledns.cli import exit_codes
from shuffledns.cli.console import console
from shuffledns.cli.output import configure_output
from shuffledns.cli.schema import build_parser, options_from_args
from shuffledns.core.input_resolver import InputResolver
from shuffledns.core.models import BruteForceRun, ListResolutionRun, ResolvedRun
from shuffledns.core.protocols import (
    EnumerationEngine,
    InputAvailabilityProbe,
    MassdnsLocator,
    PathChecker,
)
from shuffledns.core.validator import validate
from shuffledns.exceptions import ShufflednsError
from shuffledns.infra.filesystem import LocalPathChecker, default_scratch_directory
from shuffledns.infra.massdns_detector import PathMassdnsLocator
from shuffledns.infra.stdin_detector import StdinProbe

logger = logging.getLogger(__name__)


def _process_stdin() -> BinaryIO:
    """Return the binary stream behind ``sys.stdin``.

    An empty stream stands in when stdin is missing or has no binary
    buffer.
    """
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return io.BytesIO()
    return buffer


def _describe(resolved: ResolvedRun) -> str:
    if isinstance(resolved, BruteForceRun):
        return f"Bruteforcing {resolved.domain} with wordlist {resolved.wordlist}"
    if isinstance(resolved, ListResolutionRun):
        source = "stdin" if resolved.reads_stdin else resolved.subdomains_list
        return f"Resolving subdomains from {source}"
    return f"Validating raw massdns output {resolved.raw_mass_input}"


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    probe: InputAvailabilityProbe | None = None,
    stdin: BinaryIO | None = None,
    path_checker: PathChecker | None = None,
    massdns_locator: MassdnsLocator | None = None,
    engine: EnumerationEngine | None = None,
) -> int:
    """Run the shuffledns CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    probe, stdin:
        Replacements for the process stdin probe and stream.  A stream
        given without a probe is probed itself.
    path_checker, massdns_locator:
        Replacements for the filesystem and PATH lookups.
    engine:
        Receives the validated run.  Without one, the run stops after
        validation.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    options = options_from_args(args)

    configure_output(
        silent=options.silent,
        verbose=options.verbose,
        no_color=options.no_color,
    )

    if stdin is None:
        stdin = _process_stdin()
        if probe is None:
            probe = StdinProbe()
    elif probe is None:
        probe = StdinProbe(stdin)
    resolver = InputResolver(probe, stdin)
    resolver.resolve(options)

    if options.directory is None:
        options.directory = default_scratch_directory()

    resolved = validate(
        options,
        path_checker if path_checker is not None else LocalPathChecker(),
        massdns_locator=massdns_locator if massdns_locator is not None else PathMassdnsLocator(),
    )
    logger.info(_describe(resolved))

    if engine is None:
        logger.debug("No enumeration engine attached; stopping after validation")
        return exit_codes.SUCCESS
    return engine.run(resolved)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ShufflednsError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
