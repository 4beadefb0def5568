"""
Electrical Calculator API
Ohm's law, power from any two of V/I/R, series resistance
"""

from flask import Blueprint

from utils import calculations
from utils.endpoint import formula_route, keyword_call
from utils.formatting import bullets, format_number, to_fixed, with_unit, work_shown
from utils.validation import parse_number, require_params, select_pair, split_list

electrical_bp = Blueprint('electrical', __name__)

OHM = "Ω"


def _parse_exact_pair(args):
    branch, values = select_pair(args, exact=True)
    return dict(values, branch=branch)


def _parse_any_pair(args):
    branch, values = select_pair(args, exact=False)
    return dict(values, branch=branch)


def _given(inputs):
    labels = (
        ('voltage', "Voltage (V)", "V"),
        ('current', "Current (I)", "A"),
        ('resistance', "Resistance (R)", OHM),
    )
    lines = [
        f"{label} = {format_number(inputs[key])} {unit}"
        for key, label, unit in labels
        if inputs[key] is not None
    ]
    return ["Given:"] + bullets(lines)


@formula_route(electrical_bp, 'ohms-law', "Ohm's law",
               parse=_parse_exact_pair,
               compute=keyword_call(calculations.ohms_law),
               usage='any two of voltage=<V>&current=<A>&resistance=<Ω>')
def ohms_law(inputs, solved):
    """
    GET /api/ohms-law?voltage=12&current=2

    Exactly two of voltage, current and resistance; the third is solved.

    Response JSON:
    {
        "status": "success",
        "result": {
            "primaryResult": "6.00 Ω",
            "voltage": "12 V",
            "current": "2 A",
            "resistance": "6.00 Ω"
        },
        "workShown": "Given: ..."
    }
    """
    branch = inputs['branch']
    V, I, R = inputs['voltage'], inputs['current'], inputs['resistance']

    if branch == 'VI':
        primary = with_unit(solved, OHM)
        fields = {"voltage": f"{format_number(V)} V", "current": f"{format_number(I)} A",
                  "resistance": primary}
        steps = ["Solving for Resistance: R = V ÷ I"] + bullets([
            f"R = {format_number(V)} ÷ {format_number(I)}",
            f"R = {primary}",
        ])
    elif branch == 'VR':
        primary = with_unit(solved, "A")
        fields = {"voltage": f"{format_number(V)} V", "current": primary,
                  "resistance": f"{format_number(R)} {OHM}"}
        steps = ["Solving for Current: I = V ÷ R"] + bullets([
            f"I = {format_number(V)} ÷ {format_number(R)}",
            f"I = {primary}",
        ])
    else:
        primary = with_unit(solved, "V")
        fields = {"voltage": primary, "current": f"{format_number(I)} A",
                  "resistance": f"{format_number(R)} {OHM}"}
        steps = bullets([
            f"V = {format_number(I)} × {format_number(R)}",
            f"V = {primary}",
        ])

    shown = work_shown(_given(inputs), ["Using Ohm's Law: V = I × R"] + steps)
    return dict(primaryResult=primary, **fields), shown


@formula_route(electrical_bp, 'power-vi', 'Power',
               parse=_parse_any_pair,
               compute=keyword_call(calculations.electrical_power),
               usage='any two of voltage=<V>&current=<A>&resistance=<Ω>')
def power_vi(inputs, values):
    """
    GET /api/power-vi?voltage=12&current=2

    P = V × I, P = V² ÷ R or P = I² × R depending on which inputs are given.
    With all three, voltage and current win, then voltage and resistance.
    """
    branch = inputs['branch']
    V, I, R = inputs['voltage'], inputs['current'], inputs['resistance']
    power = with_unit(values['power'], "W")

    if branch == 'VI':
        steps = bullets(["Power (P) = V × I", f"P = {format_number(V)} × {format_number(I)}",
                         f"P = {power}"])
        extra = []
    elif branch == 'VR':
        steps = bullets([
            "Power (P) = V² ÷ R",
            f"P = {format_number(V)}² ÷ {format_number(R)}",
            f"P = {format_number(V * V)} ÷ {format_number(R)}",
            f"P = {power}",
        ])
        extra = [f"Additional: Current (I) = V ÷ R = {with_unit(values['current'], 'A')}"]
    else:
        steps = bullets([
            "Power (P) = I² × R",
            f"P = {format_number(I)}² × {format_number(R)}",
            f"P = {format_number(I * I)} × {format_number(R)}",
            f"P = {power}",
        ])
        extra = [f"Additional: Voltage (V) = I × R = {with_unit(values['voltage'], 'V')}"]

    shown = work_shown(_given(inputs), ["Calculation:"] + steps, extra)

    def reported(value, unit):
        return "Not provided" if value is None else with_unit(value, unit)

    return {
        "primaryResult": power,
        "power": power,
        "voltage": reported(values['voltage'], "V"),
        "current": reported(values['current'], "A"),
        "resistance": reported(R, OHM),
    }, shown


def _parse_resistances(args):
    raw = require_params(args, ('resistances',))['resistances']
    message = "All resistance values must be valid numbers"
    return {'values': [parse_number(item, message) for item in split_list(raw)]}


@formula_route(electrical_bp, 'resistance-series', 'Series resistance',
               parse=_parse_resistances,
               compute=keyword_call(calculations.series_resistance),
               usage='resistances=<R1>,<R2>,...')
def resistance_series(inputs, total):
    """GET /api/resistance-series?resistances=10,20,30 -> "60.00 Ω" """
    values = inputs['values']
    labels = [f"R{i}" for i in range(1, len(values) + 1)]
    total_text = with_unit(total, OHM)

    shown = work_shown(
        ["Given Resistances in Series:"] + bullets(
            f"{label} = {format_number(r)} {OHM}" for label, r in zip(labels, values)
        ),
        ["Series Resistance Formula:"] + bullets([
            f"Rtotal = {' + '.join(labels)}",
            f"Rtotal = {' + '.join(format_number(r) for r in values)}",
            f"Rtotal = {total_text}",
        ]),
        ["Note: In series circuits, total resistance equals the sum of all "
         "individual resistances."],
    )
    return {
        "primaryResult": total_text,
        "totalResistance": total_text,
        "individualResistances": [f"{format_number(r)} {OHM}" for r in values],
        "resistanceCount": len(values),
    }, shown
