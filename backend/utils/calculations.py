"""
Calculation Utilities
Closed-form engineering formulas used by the calculator endpoints
"""

import math
from typing import Dict, Optional, Sequence

import numpy as np

from utils.validation import (
    CalculationError,
    DOMAIN_VIOLATION,
    UNDEFINED_RESULT,
)

TRIG_FUNCTIONS = {
    'sin': (math.sin, 'Sine'),
    'cos': (math.cos, 'Cosine'),
    'tan': (math.tan, 'Tangent'),
}

# Beyond this magnitude tan() is treated as an asymptote; float input can
# never hit an exact multiple of 90 degrees.
TAN_LIMIT = 1e15


def _nonzero(value: float, message: str):
    if value == 0:
        raise CalculationError(DOMAIN_VIOLATION, message)


# ─── Slope and grade ────────────────────────────────────────────────────


def grade_percent(rise: float, run: float) -> float:
    """Grade as a percentage of run."""
    _nonzero(run, "Run cannot be zero (division by zero)")
    return (rise / run) * 100


def slope_angle(rise: float, run: float) -> Dict[str, float]:
    """Incline angle for a rise over a run, in radians and degrees."""
    _nonzero(run, "Run cannot be zero (division by zero)")
    radians = math.atan(rise / run)
    return {'radians': radians, 'degrees': radians * (180 / math.pi), 'ratio': rise / run}


def horizontal_distance(rise: float, slope: float) -> float:
    _nonzero(slope, "Slope cannot be zero (division by zero)")
    return rise / slope


def vertical_rise(slope: float, run: float) -> float:
    return slope * run


def slope_and_angle(rise: float, run: float) -> Dict[str, float]:
    """Slope percentage and angle in degrees in one call."""
    _nonzero(run, "Run cannot be zero (division by zero)")
    return {
        'slope': (rise / run) * 100,
        'angle': math.atan(rise / run) * (180 / math.pi),
    }


# ─── Algebra and trigonometry ───────────────────────────────────────────


def quadratic_roots(a: float, b: float, c: float) -> Dict[str, Optional[float]]:
    """
    Solve ax² + bx + c = 0.

    The branch is picked by exact comparison of the discriminant with zero:
    two real roots, one repeated root, or a complex conjugate pair given as
    real and imaginary parts.

    Returns:
        dict with 'discriminant', 'kind' ('two_real', 'one_real', 'complex')
        and either x1/x2, x, or real/imaginary
    """
    if a == 0:
        raise CalculationError(
            DOMAIN_VIOLATION,
            'Coefficient "a" cannot be zero (not a quadratic equation)',
        )

    discriminant = (b * b) - (4 * a * c)

    if discriminant > 0:
        root = math.sqrt(discriminant)
        return {
            'discriminant': discriminant,
            'kind': 'two_real',
            'x1': (-b + root) / (2 * a),
            'x2': (-b - root) / (2 * a),
        }
    if discriminant == 0:
        return {'discriminant': discriminant, 'kind': 'one_real', 'x': -b / (2 * a)}
    return {
        'discriminant': discriminant,
        'kind': 'complex',
        'real': -b / (2 * a),
        'imaginary': math.sqrt(-discriminant) / (2 * a),
    }


def trig_value(angle: float, unit: str, function: str) -> float:
    """
    Evaluate sin, cos or tan of an angle.
    Degrees are converted to radians; any other unit is taken as radians.
    """
    if function not in TRIG_FUNCTIONS:
        raise CalculationError(DOMAIN_VIOLATION, "Function must be sin, cos, or tan")

    radians = angle * (math.pi / 180) if unit == 'degrees' else angle
    func, _ = TRIG_FUNCTIONS[function]
    result = func(radians)

    if function == 'tan' and (not math.isfinite(result) or abs(result) > TAN_LIMIT):
        raise CalculationError(
            UNDEFINED_RESULT,
            "Tangent is undefined for this angle (90°, 270°, etc.)",
        )
    return result


def percent_error(experimental: float, theoretical: float) -> Dict[str, float]:
    _nonzero(theoretical, "Theoretical value cannot be zero (division by zero)")
    difference = experimental - theoretical
    return {
        'difference': difference,
        'absolute': abs(difference),
        'percent': abs(difference / theoretical) * 100,
    }


# ─── Electrical ─────────────────────────────────────────────────────────


def ohms_law(branch: str, voltage=None, current=None, resistance=None) -> float:
    """
    Solve V = I × R for the quantity that was not given.

    Args:
        branch: 'VI' solves R, 'VR' solves I, 'IR' solves V
    """
    if branch == 'VI':
        _nonzero(current, "Current cannot be zero")
        return voltage / current
    if branch == 'VR':
        _nonzero(resistance, "Resistance cannot be zero")
        return voltage / resistance
    if branch == 'IR':
        return current * resistance
    raise ValueError(f"Unknown Ohm's law branch: {branch}")


def electrical_power(branch: str, voltage=None, current=None, resistance=None) -> Dict[str, float]:
    """
    Power from any two of voltage, current and resistance.

    The quantity derived on the way (I for V²/R, V for I²R) is returned
    alongside the power so it can be reported.
    """
    if branch == 'VI':
        return {'power': voltage * current, 'voltage': voltage, 'current': current}
    if branch == 'VR':
        _nonzero(resistance, "Resistance cannot be zero")
        return {
            'power': (voltage * voltage) / resistance,
            'voltage': voltage,
            'current': voltage / resistance,
        }
    if branch == 'IR':
        return {
            'power': (current * current) * resistance,
            'voltage': current * resistance,
            'current': current,
        }
    raise ValueError(f"Unknown power branch: {branch}")


def series_resistance(values: Sequence[float]) -> float:
    """
    Total resistance of resistors in series.

    Values arrive parsed and finite. Negative values are rejected before
    the count check.
    """
    resistances = np.asarray(values, dtype=float)

    if (resistances < 0).any():
        raise CalculationError(DOMAIN_VIOLATION, "Resistance values cannot be negative")
    if len(resistances) < 2:
        raise CalculationError(
            DOMAIN_VIOLATION,
            "At least 2 resistances required for series calculation",
        )

    return float(np.sum(resistances))
