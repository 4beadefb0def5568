"""
Result Formatting
Fixed-decimal rendering and work-shown assembly for calculator responses
"""

from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Iterable

BULLET = "•"

# Wide enough to quantize any finite double without InvalidOperation.
_FIXED_CONTEXT = Context(prec=400)


def to_fixed(value: float, decimals: int = 2) -> str:
    """
    Format value with a fixed number of decimals.

    Rounds the exact binary value half away from zero, so 1.005 -> "1.00"
    (it is stored as 1.00499...) while 0.125 -> "0.13". Negative zero and
    values that round to zero from below print like JavaScript toFixed:
    -0.0 -> "0.00", -0.001 -> "-0.00".
    """
    value = float(value)
    if value == 0:
        value = 0.0
    quantum = Decimal(1).scaleb(-decimals)
    fixed = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_FIXED_CONTEXT)
    return format(fixed, "f")


def format_number(value: float) -> str:
    """Plain form for echoing inputs: 5.0 -> "5", 2.5 -> "2.5" """
    value = float(value)
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def with_unit(value: float, unit: str, decimals: int = 2) -> str:
    return f"{to_fixed(value, decimals)} {unit}"


def bullets(lines: Iterable[str]) -> list:
    return [f"{BULLET} {line}" for line in lines]


def work_shown(*sections) -> str:
    """
    Join derivation sections into the work-shown text.

    Each section is a list of lines; sections are separated by a blank line
    and empty sections are dropped.
    """
    blocks = ["\n".join(section) for section in sections if section]
    return "\n\n".join(blocks).strip()
