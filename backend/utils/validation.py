"""
Request Validation
Error taxonomy and query parameter parsing shared by every formula endpoint
"""

import math
from typing import Dict, List, Optional, Sequence, Tuple

MISSING_PARAMETER = "MissingParameter"
INVALID_NUMBER = "InvalidNumber"
WRONG_PARAMETER_COUNT = "WrongParameterCount"
DOMAIN_VIOLATION = "DomainViolation"
UNDEFINED_RESULT = "UndefinedResult"

# Branch tags for the "two of voltage/current/resistance" formulas,
# listed in the order they win when all three are supplied.
BRANCH_ORDER = (
    ("VI", ("voltage", "current")),
    ("VR", ("voltage", "resistance")),
    ("IR", ("current", "resistance")),
)


class CalculationError(ValueError):
    """Bad input for a formula. Always reported to the caller, never retried."""

    def __init__(self, kind: str, message: str, status: int = 400):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status = status

    def to_dict(self) -> Dict[str, str]:
        return {"status": "error", "message": self.message, "errorKind": self.kind}


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def _join_names(names: Sequence[str]) -> str:
    """Join parameter names for messages: rise or run / a, b, or c"""
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} or {names[1]}"
    return ", ".join(names[:-1]) + f", or {names[-1]}"


def parse_number(raw: str, message: str = "Invalid numeric values") -> float:
    """
    Parse a query string value as a finite float.
    Raises CalculationError(InvalidNumber) for anything else, including nan and inf.
    """
    try:
        value = float(raw.strip())
    except (ValueError, AttributeError):
        raise CalculationError(INVALID_NUMBER, message)
    if not math.isfinite(value):
        raise CalculationError(INVALID_NUMBER, message)
    return value


def require_params(args, names: Sequence[str], message: Optional[str] = None) -> Dict[str, str]:
    """
    Return the raw values of the named parameters, failing if any is absent or empty.
    message replaces the generic "Missing rise or run parameters" text.
    """
    missing = [name for name in names if _is_blank(args.get(name))]
    if missing:
        if message is None:
            noun = "parameter" if len(names) == 1 else "parameters"
            message = f"Missing {_join_names(names)} {noun}"
        raise CalculationError(MISSING_PARAMETER, message)
    return {name: args.get(name) for name in names}


def require_numbers(args, names: Sequence[str],
                    missing_message: Optional[str] = None) -> Dict[str, float]:
    """
    Validate that every named parameter is present and numeric.

    Missing parameters are reported before malformed ones, so a request
    with one absent and one garbled value gets MissingParameter.
    """
    raw = require_params(args, names, missing_message)
    return {name: parse_number(value) for name, value in raw.items()}


def select_pair(args, exact: bool = True) -> Tuple[str, Dict[str, Optional[float]]]:
    """
    Resolve which two of voltage, current and resistance were given.

    Args:
        args: query parameters
        exact: require exactly two non-empty values (Ohm's law); when False,
            at least two are required and the branch priority decides (power)

    Returns:
        (branch tag, {"voltage": V or None, "current": I or None, "resistance": R or None})
    """
    names = ("voltage", "current", "resistance")
    present = [name for name in names if not _is_blank(args.get(name))]

    if exact and len(present) != 2:
        raise CalculationError(
            WRONG_PARAMETER_COUNT,
            "Provide exactly 2 of the 3 parameters: voltage, current, resistance",
        )

    values = {
        name: parse_number(args.get(name)) if name in present else None
        for name in names
    }

    for tag, pair in BRANCH_ORDER:
        if all(values[name] is not None for name in pair):
            return tag, values

    raise CalculationError(
        WRONG_PARAMETER_COUNT,
        "Provide at least voltage and current, or voltage and resistance, "
        "or current and resistance",
    )


def split_list(raw: str) -> List[str]:
    """Split a comma separated parameter into stripped items (empty items are kept)."""
    return [item.strip() for item in raw.split(",")]


def check_finite(outcome):
    """
    Reject a computed outcome that overflowed to inf or nan.

    Inputs are already finite, so this only trips when the arithmetic
    itself leaves the range of a double (1e308 / 0.001, 1e200²).
    """
    values = outcome.values() if isinstance(outcome, dict) else [outcome]
    for value in values:
        if isinstance(value, float) and not math.isfinite(value):
            raise CalculationError(DOMAIN_VIOLATION, "Result is out of range")
