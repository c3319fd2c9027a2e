"""Core layer — input negotiation, mode selection and validation.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or stdin access; both arrive through protocols.
* No imports from ``cli`` or ``infra``.
"""

from shuffledns.core.input_resolver import InputResolver
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
from shuffledns.core.protocols import (
    EnumerationEngine,
    InputAvailabilityProbe,
    MassdnsLocator,
    PathChecker,
)
from shuffledns.core.validator import evaluate_modes, select_mode, validate

__all__: list[str] = [
    "BruteForceRun",
    "EnumerationEngine",
    "InputAvailabilityProbe",
    "InputResolver",
    "ListResolutionRun",
    "MassdnsLocator",
    "Mode",
    "ModeCheck",
    "Options",
    "PathChecker",
    "RawValidationRun",
    "ResolvedRun",
    "Tuning",
    "evaluate_modes",
    "select_mode",
    "validate",
]
