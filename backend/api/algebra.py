"""
Algebra & Trigonometry Calculator API
Quadratic roots, trigonometric functions, percent error
"""

from flask import Blueprint

from utils import calculations
from utils.endpoint import formula_route, keyword_call, numbers
from utils.formatting import bullets, format_number, to_fixed, work_shown
from utils.validation import parse_number, require_params

algebra_bp = Blueprint('algebra', __name__)


def _solutions(roots) -> str:
    if roots['kind'] == 'two_real':
        return (f"Two real solutions: x₁ = {to_fixed(roots['x1'], 4)}, "
                f"x₂ = {to_fixed(roots['x2'], 4)}")
    if roots['kind'] == 'one_real':
        return f"One real solution: x = {to_fixed(roots['x'], 4)}"
    real, imaginary = to_fixed(roots['real'], 4), to_fixed(roots['imaginary'], 4)
    return (f"Two complex solutions: x₁ = {real} + {imaginary}i, "
            f"x₂ = {real} - {imaginary}i")


@formula_route(algebra_bp, 'quadratic-equation', 'Quadratic equation',
               parse=numbers('a', 'b', 'c'),
               compute=keyword_call(calculations.quadratic_roots),
               usage='a=<value>&b=<value>&c=<value>')
def quadratic_equation(inputs, roots):
    """
    GET /api/quadratic-equation?a=1&b=-3&c=2

    Response JSON:
    {
        "status": "success",
        "result": {
            "primaryResult": "Two real solutions: x₁ = 2.0000, x₂ = 1.0000",
            "discriminant": 1.0,
            "hasRealSolutions": true,
            "x1": "2.0000",
            "x2": "1.0000"
        },
        "workShown": "Given quadratic equation: 1x² + -3x + 2 = 0 ..."
    }
    """
    a, b, c = inputs['a'], inputs['b'], inputs['c']
    delta = roots['discriminant']
    solutions = _solutions(roots)

    shown = work_shown(
        [f"Given quadratic equation: {format_number(a)}x² + {format_number(b)}x + "
         f"{format_number(c)} = 0"],
        ["Step 1: Calculate discriminant"] + bullets([
            "Δ = b² - 4ac",
            f"Δ = ({format_number(b)})² - 4({format_number(a)})({format_number(c)})",
            f"Δ = {format_number(b * b)} - {format_number(4 * a * c)}",
            f"Δ = {format_number(delta)}",
        ]),
        ["Step 2: Apply quadratic formula"] + bullets([
            "x = (-b ± √Δ) / 2a",
            f"x = ({format_number(-b)} ± √{format_number(delta)}) / {format_number(2 * a)}",
        ]),
        [f"Result: {solutions}"],
    )

    result = {
        "primaryResult": solutions,
        "discriminant": delta,
        "hasRealSolutions": delta >= 0,
    }
    if roots['kind'] == 'two_real':
        result["x1"] = to_fixed(roots['x1'], 4)
        result["x2"] = to_fixed(roots['x2'], 4)
    elif roots['kind'] == 'one_real':
        result["x"] = to_fixed(roots['x'], 4)
    else:
        result["realPart"] = to_fixed(roots['real'], 4)
        result["imaginaryPart"] = to_fixed(roots['imaginary'], 4)
    return result, shown


def _parse_trig(args):
    raw = require_params(args, ('angle', 'function'))
    return {
        'angle': parse_number(raw['angle'], "Invalid angle value"),
        'unit': (args.get('unit') or '').strip() or 'degrees',
        'function': raw['function'].strip(),
    }


@formula_route(algebra_bp, 'trigonometric', 'Trigonometric',
               parse=_parse_trig,
               compute=keyword_call(calculations.trig_value),
               usage='angle=<value>&function=<sin|cos|tan>&unit=<degrees|radians>')
def trigonometric(inputs, value):
    """
    GET /api/trigonometric?angle=30&function=sin[&unit=degrees]

    Any unit other than "degrees" is read as radians. tan near an
    asymptote answers 400 UndefinedResult.
    """
    angle, unit, function = inputs['angle'], inputs['unit'], inputs['function']
    display = f"{format_number(angle)}°" if unit == 'degrees' else f"{format_number(angle)} rad"
    _, function_name = calculations.TRIG_FUNCTIONS[function]

    shown = work_shown(
        ["Given:"] + bullets([f"Angle = {display}", f"Function = {function_name}"]),
        ["Calculation:"] + bullets([f"{function}({display}) = {to_fixed(value, 6)}"]),
    )
    return {
        "primaryResult": to_fixed(value, 6),
        "function": function,
        "angle": angle,
        "unit": unit,
        "result": to_fixed(value, 6),
    }, shown


@formula_route(algebra_bp, 'percent-error', 'Percent error',
               parse=numbers('experimental', 'theoretical',
                             missing="Missing experimental or theoretical values"),
               compute=keyword_call(calculations.percent_error),
               usage='experimental=<value>&theoretical=<value>')
def percent_error(inputs, error):
    experimental = format_number(inputs['experimental'])
    theoretical = format_number(inputs['theoretical'])
    percent = to_fixed(error['percent'])

    shown = work_shown(
        ["Given:"] + bullets([
            f"Experimental Value = {experimental}",
            f"Theoretical Value = {theoretical}",
        ]),
        ["Calculation:"] + bullets([
            "Percent Error = |Experimental - Theoretical| / Theoretical × 100%",
            f"Percent Error = |{experimental} - {theoretical}| / {theoretical} × 100%",
            f"Percent Error = |{to_fixed(error['difference'], 4)}| / {theoretical} × 100%",
            f"Percent Error = {to_fixed(error['absolute'], 4)} / {theoretical} × 100%",
            f"Percent Error = {percent}%",
        ]),
    )
    return {
        "primaryResult": f"{percent}%",
        "percentError": percent,
        "absoluteError": to_fixed(error['absolute'], 4),
    }, shown
