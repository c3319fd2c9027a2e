"""Command-line schema: every flag, its aliases, default and help group.

Pure declaration.  :func:`build_parser` describes the flags and
:func:`options_from_args` copies a parsed namespace into
:class:`~shuffledns.core.models.Options`.
"""

from __future__ import annotations

import argparse

from shuffledns.core.models import (
    DEFAULT_RETRIES,
    DEFAULT_THREADS,
    DEFAULT_WILDCARD_THREADS,
    Options,
)
from shuffledns.version import __version__

DESCRIPTION: str = (
    "shuffledns is a wrapper around massdns that enumerates valid subdomains "
    "using active bruteforce, and resolves subdomains with wildcard handling "
    "and easy input-output support."
)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser with the help groups of the tool."""
    parser = argparse.ArgumentParser(
        prog="shuffledns",
        description=DESCRIPTION,
        allow_abbrev=False,
    )

    group = parser.add_argument_group("Input")
    group.add_argument("-d", "--domain", dest="domain",
                       help="Domain to find or resolve subdomains for")
    group.add_argument("-l", "--list", dest="subdomains_list",
                       help="File containing list of subdomains to resolve")
    group.add_argument("-w", "--wordlist", dest="wordlist",
                       help="File containing words to bruteforce for domain")
    group.add_argument("-r", "--resolver", dest="resolvers_file",
                       help="File containing list of resolvers for enumeration")
    group.add_argument("-ri", "--raw-input", dest="raw_mass_input",
                       help="Validate raw full massdns output")

    group = parser.add_argument_group("Rate-Limit")
    group.add_argument("-t", dest="threads", type=int, default=DEFAULT_THREADS,
                       help="Number of concurrent massdns resolves (default: %(default)s)")

    group = parser.add_argument_group("Output")
    group.add_argument("-o", "--output", dest="output",
                       help="File to write output to (optional)")
    group.add_argument("-j", "--json", dest="json", action="store_true",
                       help="Make output format as ndjson")
    group.add_argument("-wo", "--wildcard-output", dest="wildcard_output_file",
                       help="Dump wildcard ips to output file")

    group = parser.add_argument_group("Configurations")
    group.add_argument("-m", "--massdns", dest="massdns_path",
                       help="Path to the massdns binary")
    group.add_argument("-mcmd", "--massdns-cmd", dest="massdns_cmd",
                       help="Optional massdns commands to run (example -mcmd='-i 10')")
    group.add_argument("--directory", dest="directory",
                       help="Temporary directory for enumeration")

    group = parser.add_argument_group("Optimizations")
    group.add_argument("--retries", dest="retries", type=int, default=DEFAULT_RETRIES,
                       help="Number of retries for dns enumeration (default: %(default)s)")
    group.add_argument("-sw", "--strict-wildcard", dest="strict_wildcard", action="store_true",
                       help="Perform wildcard check on all found subdomains")
    group.add_argument("-wt", dest="wildcard_threads", type=int,
                       default=DEFAULT_WILDCARD_THREADS,
                       help="Number of concurrent wildcard checks (default: %(default)s)")

    group = parser.add_argument_group("Debug")
    group.add_argument("--silent", dest="silent", action="store_true",
                       help="Show only subdomains in output")
    group.add_argument("--version", action="version", version=f"%(prog)s {__version__}",
                       help="Show version of shuffledns")
    group.add_argument("-v", dest="verbose", action="store_true",
                       help="Show verbose output")
    group.add_argument("-nc", "--no-color", dest="no_color", action="store_true",
                       help="Don't use colors in output")

    return parser


# ---------------------------------------------------------------------------
# Namespace -> Options
# ---------------------------------------------------------------------------

def _clean(value: str | None) -> str | None:
    """Treat empty and blank flag values as not supplied."""
    if value is None or not value.strip():
        return None
    return value


def options_from_args(args: argparse.Namespace) -> Options:
    """Build the flag pass of :class:`Options` from a parsed namespace."""
    return Options(
        domain=_clean(args.domain),
        subdomains_list=_clean(args.subdomains_list),
        wordlist=_clean(args.wordlist),
        resolvers_file=_clean(args.resolvers_file),
        raw_mass_input=_clean(args.raw_mass_input),
        threads=args.threads,
        output=_clean(args.output),
        json=args.json,
        wildcard_output_file=_clean(args.wildcard_output_file),
        massdns_path=_clean(args.massdns_path),
        massdns_cmd=_clean(args.massdns_cmd),
        directory=_clean(args.directory),
        retries=args.retries,
        strict_wildcard=args.strict_wildcard,
        wildcard_threads=args.wildcard_threads,
        silent=args.silent,
        verbose=args.verbose,
        no_color=args.no_color,
    )
