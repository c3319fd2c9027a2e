"""Domain models for shuffledns.

:class:`Options` is the single mutable record of one run.  It is filled
in three passes (defaults, flag overrides, stdin resolution) and then
frozen by the validator into one of the run variants below.  The run
variants are **frozen** dataclasses carrying only the fields their mode
requires, so a configuration with two active modes cannot be built.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_THREADS: int = 10000
DEFAULT_RETRIES: int = 5
DEFAULT_WILDCARD_THREADS: int = 25


# ---------------------------------------------------------------------------
# Mutable configuration object
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Options:
    """Every option of a run after flag parsing.

    String fields use ``None`` for "not supplied"; the CLI layer
    normalises empty flag values before building this object.
    """

    domain: str | None = None
    subdomains_list: str | None = None
    wordlist: str | None = None
    resolvers_file: str | None = None
    raw_mass_input: str | None = None

    threads: int = DEFAULT_THREADS
    output: str | None = None
    json: bool = False
    wildcard_output_file: str | None = None

    massdns_path: str | None = None
    massdns_cmd: str | None = None
    directory: str | None = None

    retries: int = DEFAULT_RETRIES
    strict_wildcard: bool = False
    wildcard_threads: int = DEFAULT_WILDCARD_THREADS

    silent: bool = False
    verbose: bool = False
    no_color: bool = False

    stdin_available: bool = False
    """Whether piped stdin was detected.  Written only by the resolver."""

    stdin_consumed: bool = False
    """Whether the resolver already read stdin to obtain the domain."""


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------

class Mode(enum.Enum):
    """The three mutually exclusive ways a run can operate."""

    BRUTE_FORCE = "brute-force"
    LIST_RESOLUTION = "list-resolution"
    RAW_VALIDATION = "raw-validation"


@dataclass(frozen=True, slots=True)
class ModeCheck:
    """Satisfiability report for a single mode."""

    mode: Mode

    missing: tuple[str, ...]
    """Flags the mode requires that were not supplied."""

    @property
    def satisfied(self) -> bool:
        return not self.missing

    def describe(self) -> str:
        if self.satisfied:
            return f"{self.mode.value}: ok"
        return f"{self.mode.value}: missing {', '.join(self.missing)}"


# ---------------------------------------------------------------------------
# Resolved run variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Tuning:
    """Options that apply to every mode and never affect mode selection."""

    threads: int
    retries: int
    wildcard_threads: int
    strict_wildcard: bool
    output: str | None
    json: bool
    wildcard_output_file: str | None
    massdns_path: str | None
    massdns_cmd: str | None
    directory: str | None
    silent: bool
    verbose: bool
    no_color: bool

    @classmethod
    def from_options(cls, options: Options) -> Tuning:
        return cls(
            threads=options.threads,
            retries=options.retries,
            wildcard_threads=options.wildcard_threads,
            strict_wildcard=options.strict_wildcard,
            output=options.output,
            json=options.json,
            wildcard_output_file=options.wildcard_output_file,
            massdns_path=options.massdns_path,
            massdns_cmd=options.massdns_cmd,
            directory=options.directory,
            silent=options.silent,
            verbose=options.verbose,
            no_color=options.no_color,
        )


@dataclass(frozen=True, slots=True)
class BruteForceRun:
    """Enumerate ``<word>.<domain>`` for every word in the wordlist."""

    domain: str
    wordlist: str
    resolvers_file: str
    tuning: Tuning

    @property
    def mode(self) -> Mode:
        return Mode.BRUTE_FORCE


@dataclass(frozen=True, slots=True)
class ListResolutionRun:
    """Resolve a list of candidate subdomains.

    ``subdomains_list`` is ``None`` when the candidates are streamed from
    standard input by the engine.
    """

    resolvers_file: str
    subdomains_list: str | None
    tuning: Tuning

    @property
    def mode(self) -> Mode:
        return Mode.LIST_RESOLUTION

    @property
    def reads_stdin(self) -> bool:
        return self.subdomains_list is None


@dataclass(frozen=True, slots=True)
class RawValidationRun:
    """Filter wildcards out of an existing raw massdns output file."""

    raw_mass_input: str
    tuning: Tuning

    @property
    def mode(self) -> Mode:
        return Mode.RAW_VALIDATION


ResolvedRun = BruteForceRun | ListResolutionRun | RawValidationRun
