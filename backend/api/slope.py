"""
Slope & Grade Calculator API
Grade percent, incline angle, run from rise, rise from run
"""

from flask import Blueprint

from utils import calculations
from utils.endpoint import formula_route, keyword_call, numbers
from utils.formatting import bullets, format_number, to_fixed, work_shown

slope_bp = Blueprint('slope', __name__)


def _given_rise_run(inputs):
    return ["Given:"] + bullets([
        f"Rise = {format_number(inputs['rise'])} ft",
        f"Run = {format_number(inputs['run'])} ft",
    ])


@formula_route(slope_bp, 'grade-percent', 'Grade percent',
               parse=numbers('rise', 'run'),
               compute=keyword_call(calculations.grade_percent),
               usage='rise=<value>&run=<value>')
def grade_percent(inputs, grade):
    """
    GET /api/grade-percent?rise=5&run=100

    Response JSON:
    {
        "status": "success",
        "result": {"primaryResult": "5.00%", "gradePercent": "5.00"},
        "workShown": "Given: ..."
    }
    """
    rise, run = format_number(inputs['rise']), format_number(inputs['run'])
    shown = work_shown(
        _given_rise_run(inputs),
        ["Calculation:"] + bullets([
            "Grade (%) = (Rise ÷ Run) × 100",
            f"Grade (%) = ({rise} ÷ {run}) × 100",
            f"Grade (%) = {to_fixed(grade)}%",
        ]),
    )
    return {
        "primaryResult": f"{to_fixed(grade)}%",
        "gradePercent": to_fixed(grade),
    }, shown


@formula_route(slope_bp, 'slope-angle', 'Slope angle',
               parse=numbers('rise', 'run'),
               compute=keyword_call(calculations.slope_angle),
               usage='rise=<value>&run=<value>')
def slope_angle(inputs, angle):
    """GET /api/slope-angle?rise=1&run=2 -> angle in degrees (2 dp) and radians (4 dp)"""
    rise, run = format_number(inputs['rise']), format_number(inputs['run'])
    shown = work_shown(
        _given_rise_run(inputs),
        ["Calculation:"] + bullets([
            "θ = arctan(Rise ÷ Run)",
            f"θ = arctan({rise} ÷ {run})",
            f"θ = arctan({to_fixed(angle['ratio'], 4)})",
            f"θ = {to_fixed(angle['degrees'])}°",
        ]),
    )
    return {
        "primaryResult": f"{to_fixed(angle['degrees'])}°",
        "angleDegrees": to_fixed(angle['degrees']),
        "angleRadians": to_fixed(angle['radians'], 4),
    }, shown


@formula_route(slope_bp, 'horizontal-distance', 'Horizontal distance',
               parse=numbers('rise', 'slope'),
               compute=keyword_call(calculations.horizontal_distance),
               usage='rise=<value>&slope=<value>')
def horizontal_distance(inputs, run):
    rise, slope = format_number(inputs['rise']), format_number(inputs['slope'])
    shown = work_shown(
        ["Given:"] + bullets([f"Rise = {rise} ft", f"Slope = {slope}"]),
        ["Calculation:"] + bullets([
            "Run = Rise ÷ Slope",
            f"Run = {rise} ÷ {slope}",
            f"Run = {to_fixed(run)} ft",
        ]),
    )
    return {
        "primaryResult": f"{to_fixed(run)} ft",
        "horizontalDistance": to_fixed(run),
    }, shown


@formula_route(slope_bp, 'vertical-rise', 'Vertical rise',
               parse=numbers('slope', 'run'),
               compute=keyword_call(calculations.vertical_rise),
               usage='slope=<value>&run=<value>')
def vertical_rise(inputs, rise):
    slope, run = format_number(inputs['slope']), format_number(inputs['run'])
    shown = work_shown(
        ["Given:"] + bullets([f"Slope = {slope}", f"Run = {run} ft"]),
        ["Calculation:"] + bullets([
            "Rise = Slope × Run",
            f"Rise = {slope} × {run}",
            f"Rise = {to_fixed(rise)} ft",
        ]),
    )
    return {
        "primaryResult": f"{to_fixed(rise)} ft",
        "verticalRise": to_fixed(rise),
    }, shown


@formula_route(slope_bp, 'slope', 'Slope',
               parse=numbers('rise', 'run', missing="Missing rise or run"),
               compute=keyword_call(calculations.slope_and_angle),
               usage='rise=<value>&run=<value>')
def slope(inputs, values):
    """Slope percentage and angle together."""
    percent, angle = to_fixed(values['slope']), to_fixed(values['angle'])
    shown = work_shown(
        _given_rise_run(inputs),
        ["Calculations:"] + bullets([
            f"Slope (%) = (Rise ÷ Run) × 100 = {percent}%",
            f"Angle = arctan(Rise ÷ Run) = {angle}°",
        ]),
    )
    return {
        "primaryResult": f"{percent}%",
        "slope": percent,
        "angle": angle,
    }, shown
