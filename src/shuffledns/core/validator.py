"""Validation of a resolved :class:`~shuffledns.core.models.Options`.

Checks run in a fixed precedence and the first failure wins:

1. **Mode** — exactly one of brute-force, list resolution and raw
   validation must have all of its required inputs.
2. **Paths** — every referenced file exists and is readable.
3. **Ranges** — numeric tuning options are within bounds.
4. **Conflicts** — flags that cannot be combined.

On success the mutable options are frozen into the run variant of the
active mode.  Filesystem access goes through an injected
:class:`~shuffledns.core.protocols.PathChecker`.
"""

from __future__ import annotations

import logging

from shuffledns.core.models import (
    BruteForceRun,
    ListResolutionRun,
    Mode,
    ModeCheck,
    Options,
    RawValidationRun,
    ResolvedRun,
    Tuning,
)
from shuffledns.core.protocols import MassdnsLocator, PathChecker
from shuffledns.exceptions import (
    AmbiguousInputError,
    ConflictingFlagsError,
    InsufficientInputError,
    ParameterRangeError,
)

logger = logging.getLogger(__name__)

# Modes that hand work to the massdns binary.
_ENGINE_MODES: frozenset[Mode] = frozenset({Mode.BRUTE_FORCE, Mode.LIST_RESOLUTION})


# ---------------------------------------------------------------------------
# Mode evaluation
# ---------------------------------------------------------------------------

def evaluate_modes(options: Options) -> tuple[ModeCheck, ...]:
    """Report, for every mode, which required flags are missing.

    List resolution accepts piped stdin in place of ``--list`` only when
    the resolver has not consumed stdin for the domain and no other mode
    is satisfied by flags alone.  Flag-backed modes always win over
    piped input.
    """
    brute_missing: list[str] = []
    if not options.domain:
        brute_missing.append("--domain")
    if not options.wordlist:
        brute_missing.append("--wordlist")
    if not options.resolvers_file:
        brute_missing.append("--resolver")

    raw_missing: list[str] = []
    if not options.raw_mass_input:
        raw_missing.append("--raw-input")

    flag_mode_satisfied = not brute_missing or not raw_missing
    stdin_list = (
        options.stdin_available
        and not options.stdin_consumed
        and not flag_mode_satisfied
    )
    list_missing: list[str] = []
    if not options.subdomains_list and not stdin_list:
        list_missing.append("--list")
    if not options.resolvers_file:
        list_missing.append("--resolver")

    return (
        ModeCheck(Mode.BRUTE_FORCE, tuple(brute_missing)),
        ModeCheck(Mode.LIST_RESOLUTION, tuple(list_missing)),
        ModeCheck(Mode.RAW_VALIDATION, tuple(raw_missing)),
    )


def select_mode(options: Options) -> Mode:
    """Return the single satisfied mode.

    Raises
    ------
    InsufficientInputError
        If no mode is satisfied.
    AmbiguousInputError
        If more than one mode is satisfied.
    """
    checks = evaluate_modes(options)
    satisfied = [check for check in checks if check.satisfied]

    if not satisfied:
        details = "; ".join(check.describe() for check in checks)
        hint = "Use -d/-w/-r to bruteforce, -l/-r to resolve a list, or -ri to validate raw output."
        if options.stdin_consumed and not options.domain:
            hint = "Piped stdin was empty; pass the domain with -d or pipe it in."
        raise InsufficientInputError(
            f"No input mode is fully specified ({details})",
            checks=checks,
            hint=hint,
        )

    if len(satisfied) > 1:
        names = ", ".join(check.mode.value for check in satisfied)
        raise AmbiguousInputError(
            f"Ambiguous input: more than one mode is fully specified ({names})",
            checks=checks,
            hint="Pass the inputs of a single mode only.",
        )

    for check in checks:
        if not check.satisfied:
            logger.debug("Mode not selected: %s", check.describe())
    return satisfied[0].mode


# ---------------------------------------------------------------------------
# Field checks
# ---------------------------------------------------------------------------

def _check_paths(options: Options, path_checker: PathChecker) -> None:
    files = (
        ("--resolver", options.resolvers_file),
        ("--wordlist", options.wordlist),
        ("--list", options.subdomains_list),
        ("--raw-input", options.raw_mass_input),
        ("--massdns", options.massdns_path),
    )
    for field, path in files:
        if path:
            path_checker.require_readable_file(field, path)
    if options.directory:
        path_checker.require_directory("--directory", options.directory)


def _check_ranges(options: Options) -> None:
    minimums = (
        ("-t", options.threads, 1),
        ("-wt", options.wildcard_threads, 1),
        ("--retries", options.retries, 0),
    )
    for field, value, minimum in minimums:
        if value < minimum:
            raise ParameterRangeError(
                f"Invalid value for {field}: {value} (must be >= {minimum})",
                field=field,
                value=value,
            )


def _check_flag_conflicts(options: Options) -> None:
    if options.silent and options.verbose:
        raise ConflictingFlagsError(
            "Both verbose (-v) and silent (--silent) mode specified",
            hint="Pick one of -v and --silent.",
        )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def validate(
    options: Options,
    path_checker: PathChecker,
    *,
    massdns_locator: MassdnsLocator | None = None,
) -> ResolvedRun:
    """Validate *options* and freeze them into the active run variant.

    When *massdns_locator* is given and the active mode runs massdns
    without ``--massdns``, the located binary is recorded in *options*
    before the path checks.

    Raises
    ------
    ConfigurationError
        For any invalid configuration (see module docstring for order).
    MassdnsNotFoundError
        When massdns is needed and cannot be located.
    """
    mode = select_mode(options)

    if mode in _ENGINE_MODES and not options.massdns_path and massdns_locator is not None:
        options.massdns_path = massdns_locator.locate()

    _check_paths(options, path_checker)
    _check_ranges(options)
    _check_flag_conflicts(options)

    return _build_run(mode, options)


def _build_run(mode: Mode, options: Options) -> ResolvedRun:
    tuning = Tuning.from_options(options)
    # select_mode guarantees the required fields below are set.
    if mode is Mode.BRUTE_FORCE:
        return BruteForceRun(
            domain=options.domain or "",
            wordlist=options.wordlist or "",
            resolvers_file=options.resolvers_file or "",
            tuning=tuning,
        )
    if mode is Mode.LIST_RESOLUTION:
        return ListResolutionRun(
            resolvers_file=options.resolvers_file or "",
            subdomains_list=options.subdomains_list,
            tuning=tuning,
        )
    return RawValidationRun(raw_mass_input=options.raw_mass_input or "", tuning=tuning)
