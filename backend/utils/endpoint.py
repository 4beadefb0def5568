"""
Formula Endpoint
The shared validate -> compute -> format pipeline behind every calculator route
"""

from typing import Callable, Dict, Optional, Tuple

from flask import current_app, jsonify, request

from utils.validation import CalculationError, check_finite, require_numbers


class Formula:
    """
    Describes one calculator endpoint.

    Attributes:
        name: endpoint name, also the URL path segment ("grade-percent")
        title: human name used in log messages
        parse: request args -> dict of validated inputs
        compute: inputs -> raw outcome (raises CalculationError on domain violations)
        render: (inputs, outcome) -> (result fields, work-shown text)
        usage: query string template listed by the service banner
    """

    def __init__(self, name: str, title: str, parse: Callable, compute: Callable,
                 render: Callable, usage: str = ""):
        self.name = name
        self.title = title
        self.parse = parse
        self.compute = compute
        self.render = render
        self.usage = usage

    def __repr__(self):
        return f"Formula({self.name!r})"


def numbers(*names: str, missing: Optional[str] = None) -> Callable:
    """Parser requiring every named parameter to be a finite number."""
    def parse(args):
        return require_numbers(args, names, missing)
    return parse


def keyword_call(func: Callable) -> Callable:
    """Compute step that passes the parsed inputs to func as keyword arguments."""
    def compute(inputs):
        return func(**inputs)
    return compute


def evaluate(formula: Formula, args) -> Tuple[Dict, int]:
    """
    Run one request through a formula.

    Returns:
        (response body, HTTP status)
    """
    try:
        inputs = formula.parse(args)
        outcome = formula.compute(inputs)
        check_finite(outcome)
        result, shown = formula.render(inputs, outcome)
        return {"status": "success", "result": result, "workShown": shown}, 200

    except CalculationError as e:
        current_app.logger.debug("%s rejected (%s): %s", formula.title, e.kind, e.message)
        return e.to_dict(), e.status

    except Exception as e:
        current_app.logger.exception("%s calculation error", formula.title)
        return {
            "status": "error",
            "message": "Internal Server Error",
            "error": str(e),
        }, 500


def formula_route(blueprint, name: str, title: str, parse: Callable, compute: Callable,
                  usage: str = ""):
    """
    Register the decorated render function as a GET endpoint on blueprint.

    OPTIONS requests get an empty 200 so CORS preflights pass; flask-cors
    adds the headers on the way out.
    """
    def decorator(render):
        formula = Formula(name, title, parse, compute, render, usage)

        def view():
            if request.method == 'OPTIONS':
                return '', 200
            body, status = evaluate(formula, request.args)
            return jsonify(body), status

        view.formula = formula
        blueprint.add_url_rule(f'/{name}', endpoint=name, view_func=view,
                               methods=['GET', 'OPTIONS'])
        return formula

    return decorator
