"""
Unit tests for the formula functions, called directly without HTTP.
"""

import itertools
import math

import pytest

from utils import calculations
from utils.validation import CalculationError, DOMAIN_VIOLATION, UNDEFINED_RESULT


def _kind(func, *args, **kwargs):
    with pytest.raises(CalculationError) as exc:
        func(*args, **kwargs)
    return exc.value.kind


# ---------------------------------------------------------------------------
# Slope and grade
# ---------------------------------------------------------------------------

class TestSlope:

    @pytest.mark.parametrize("rise, run", [(5, 100), (-3, 7), (1.5, 0.25), (0, 4)])
    def test_grade_percent(self, rise, run):
        assert calculations.grade_percent(rise, run) == pytest.approx(rise / run * 100)

    def test_grade_percent_zero_run(self):
        assert _kind(calculations.grade_percent, 5, 0) == DOMAIN_VIOLATION

    def test_slope_angle_45(self):
        angle = calculations.slope_angle(1, 1)
        assert angle['degrees'] == pytest.approx(45.0)
        assert angle['radians'] == pytest.approx(math.pi / 4)

    def test_slope_angle_zero_run(self):
        assert _kind(calculations.slope_angle, 1, 0) == DOMAIN_VIOLATION

    def test_horizontal_distance(self):
        assert calculations.horizontal_distance(10, 0.5) == 20

    def test_horizontal_distance_zero_slope(self):
        assert _kind(calculations.horizontal_distance, 10, 0) == DOMAIN_VIOLATION

    def test_vertical_rise(self):
        assert calculations.vertical_rise(0.25, 40) == 10

    def test_vertical_rise_allows_zero(self):
        assert calculations.vertical_rise(0, 40) == 0

    def test_slope_and_angle(self):
        values = calculations.slope_and_angle(10, 100)
        assert values['slope'] == pytest.approx(10.0)
        assert values['angle'] == pytest.approx(5.710593, abs=1e-6)


# ---------------------------------------------------------------------------
# Quadratic
# ---------------------------------------------------------------------------

class TestQuadratic:

    def test_two_real_roots(self):
        roots = calculations.quadratic_roots(1, -3, 2)
        assert roots['kind'] == 'two_real'
        assert roots['discriminant'] == 1
        assert (roots['x1'], roots['x2']) == (2.0, 1.0)

    def test_repeated_root(self):
        roots = calculations.quadratic_roots(1, 2, 1)
        assert roots['kind'] == 'one_real'
        assert roots['discriminant'] == 0
        assert roots['x'] == -1.0

    def test_complex_roots(self):
        roots = calculations.quadratic_roots(1, 2, 5)
        assert roots['kind'] == 'complex'
        assert roots['discriminant'] == -16
        assert roots['real'] == -1.0
        assert roots['imaginary'] == 2.0

    def test_tiny_positive_discriminant_is_two_roots(self):
        # b² - 4ac is a hair above zero in floating point; no tolerance applies
        roots = calculations.quadratic_roots(1, 0, -1e-300)
        assert roots['kind'] == 'two_real'

    def test_zero_leading_coefficient(self):
        assert _kind(calculations.quadratic_roots, 0, 2, 1) == DOMAIN_VIOLATION

    @pytest.mark.parametrize("x1, x2", [(2, 1), (-4, 7), (0.5, -1.5), (3, 3)])
    def test_round_trip_from_roots(self, x1, x2):
        a, b, c = 1.0, -(x1 + x2), x1 * x2
        roots = calculations.quadratic_roots(a, b, c)
        found = [roots['x']] * 2 if roots['kind'] == 'one_real' else [roots['x1'], roots['x2']]
        assert sorted(found) == pytest.approx(sorted([x1, x2]), abs=1e-4)


# ---------------------------------------------------------------------------
# Trigonometry
# ---------------------------------------------------------------------------

class TestTrig:

    def test_sin_degrees(self):
        assert calculations.trig_value(30, 'degrees', 'sin') == pytest.approx(0.5)

    def test_cos_radians(self):
        assert calculations.trig_value(math.pi, 'radians', 'cos') == pytest.approx(-1.0)

    def test_unknown_unit_is_radians(self):
        assert calculations.trig_value(0.5, 'rad', 'sin') == math.sin(0.5)

    @pytest.mark.parametrize("angle", [90, 270, -90])
    def test_tan_asymptote(self, angle):
        assert _kind(calculations.trig_value, angle, 'degrees', 'tan') == UNDEFINED_RESULT

    def test_tan_regular(self):
        assert calculations.trig_value(45, 'degrees', 'tan') == pytest.approx(1.0)

    def test_unknown_function(self):
        assert _kind(calculations.trig_value, 45, 'degrees', 'sec') == DOMAIN_VIOLATION


# ---------------------------------------------------------------------------
# Percent error
# ---------------------------------------------------------------------------

class TestPercentError:

    def test_basic(self):
        error = calculations.percent_error(9.5, 10)
        assert error['percent'] == pytest.approx(5.0)
        assert error['absolute'] == pytest.approx(0.5)
        assert error['difference'] == pytest.approx(-0.5)

    def test_negative_theoretical_is_still_positive(self):
        error = calculations.percent_error(-9, -10)
        assert error['percent'] == pytest.approx(10.0)

    def test_zero_theoretical(self):
        assert _kind(calculations.percent_error, 1, 0) == DOMAIN_VIOLATION


# ---------------------------------------------------------------------------
# Electrical
# ---------------------------------------------------------------------------

class TestOhmsLaw:

    def test_solve_resistance(self):
        assert calculations.ohms_law('VI', voltage=12, current=2) == 6

    def test_solve_current(self):
        assert calculations.ohms_law('VR', voltage=12, resistance=6) == 2

    def test_solve_voltage(self):
        assert calculations.ohms_law('IR', current=2, resistance=6) == 12

    def test_zero_current(self):
        assert _kind(calculations.ohms_law, 'VI', voltage=12, current=0) == DOMAIN_VIOLATION

    def test_zero_resistance(self):
        assert _kind(calculations.ohms_law, 'VR', voltage=12, resistance=0) == DOMAIN_VIOLATION

    @pytest.mark.parametrize("voltage, current", [(12, 2), (5, 0.3), (230, 13), (1.5, 0.02)])
    def test_self_consistent(self, voltage, current):
        resistance = calculations.ohms_law('VI', voltage=voltage, current=current)
        back = calculations.ohms_law('VR', voltage=voltage, resistance=resistance)
        assert round(back, 2) == round(current, 2)

    def test_unknown_branch(self):
        with pytest.raises(ValueError):
            calculations.ohms_law('XY', voltage=1, current=1)


class TestPower:

    def test_vi(self):
        assert calculations.electrical_power('VI', voltage=12, current=2)['power'] == 24

    def test_vr_derives_current(self):
        values = calculations.electrical_power('VR', voltage=12, resistance=6)
        assert values['power'] == 24
        assert values['current'] == 2

    def test_ir_derives_voltage(self):
        values = calculations.electrical_power('IR', current=2, resistance=6)
        assert values['power'] == 24
        assert values['voltage'] == 12

    def test_vr_zero_resistance(self):
        assert _kind(calculations.electrical_power, 'VR', voltage=1, resistance=0) == DOMAIN_VIOLATION


class TestSeriesResistance:

    def test_sum(self):
        assert calculations.series_resistance([10, 20, 30]) == 60

    def test_commutative(self):
        values = [4.7, 100, 2.2, 33]
        totals = {
            f"{calculations.series_resistance(list(p)):.2f}"
            for p in itertools.permutations(values)
        }
        assert totals == {"139.90"}

    def test_zero_is_allowed(self):
        assert calculations.series_resistance([0, 5]) == 5

    def test_negative(self):
        assert _kind(calculations.series_resistance, [10, -5]) == DOMAIN_VIOLATION

    def test_single_value(self):
        assert _kind(calculations.series_resistance, [10]) == DOMAIN_VIOLATION

    def test_negative_checked_before_count(self):
        with pytest.raises(CalculationError, match="negative"):
            calculations.series_resistance([-1])
