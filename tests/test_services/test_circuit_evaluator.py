"""Tests for the series-loop evaluator."""

import pytest

from circuitsim.models.component import Battery, Led, Resistor, Switch
from circuitsim.services.circuit_evaluator import (
    LED_FULL_BRIGHTNESS_MA,
    Measurements,
    evaluate,
    glow_brightness,
)

ZERO = Measurements(0.0, 0.0, 0.0)


class TestEvaluate:
    def test_unpowered_is_zero(self):
        assert evaluate([Battery(), Resistor()], is_powered=False) == ZERO

    def test_empty_is_zero(self):
        assert evaluate([], is_powered=True) == ZERO

    @pytest.mark.parametrize(
        "components",
        [
            [Resistor()],
            [Resistor(), Led(), Switch()],
            [Led(resistance=1.0)],
        ],
    )
    def test_no_battery_is_zero(self, components):
        assert evaluate(components, is_powered=True) == ZERO

    def test_open_switch_is_zero_regardless_of_loads(self):
        components = [Battery(), Resistor(), Led(), Switch(is_closed=False)]
        assert evaluate(components, is_powered=True) == ZERO

    def test_any_open_switch_breaks_loop(self):
        components = [Battery(), Resistor(), Switch(), Switch(is_closed=False)]
        assert evaluate(components, is_powered=True) == ZERO

    def test_no_load_is_zero(self):
        assert evaluate([Battery(), Switch()], is_powered=True) == ZERO

    def test_battery_and_resistor(self):
        result = evaluate([Battery(voltage=9.0), Resistor(resistance=100.0)], True)
        assert result.rounded() == Measurements(9.0, 90.0, 0.81)

    def test_series_resistances_sum(self):
        components = [Battery(voltage=9.0), Resistor(resistance=100.0), Resistor(resistance=200.0)]
        result = evaluate(components, True).rounded()
        assert result.current_ma == 30.0
        assert result.power == 0.27

    def test_led_counts_as_load(self):
        result = evaluate([Battery(voltage=5.0), Led(resistance=10.0)], True)
        assert result.current_ma == pytest.approx(500.0)
        assert result.power == pytest.approx(2.5)

    def test_closed_switch_does_not_affect_result(self):
        with_switch = evaluate([Battery(), Resistor(), Switch()], True)
        without = evaluate([Battery(), Resistor()], True)
        assert with_switch == without

    def test_only_first_battery_is_used(self):
        components = [Resistor(resistance=100.0), Battery(voltage=9.0), Battery(voltage=24.0)]
        assert evaluate(components, True).voltage == 9.0

    @pytest.mark.parametrize(
        "voltage, resistances",
        [(9.0, [100.0]), (12.0, [47.0, 330.0]), (1.5, [1.0, 2.0, 3.0]), (24.0, [10000.0])],
    )
    def test_ohms_law(self, voltage, resistances):
        loads = [Resistor(resistance=r) for r in resistances]
        total = sum(resistances)

        result = evaluate([Battery(voltage=voltage), *loads], True)

        assert round(result.current_ma, 2) == round(voltage / total * 1000, 2)
        assert round(result.power, 2) == round(voltage * (voltage / total), 2)

    def test_full_precision_is_retained(self):
        result = evaluate([Battery(voltage=10.0), Resistor(resistance=3.0)], True)
        assert result.current_ma == pytest.approx(10.0 / 3.0 * 1000)
        assert result.current_ma != result.rounded().current_ma

    def test_zero_total_resistance_is_zero(self):
        components = [Battery(), Resistor(resistance=5.0), Led(resistance=-5.0)]
        assert evaluate(components, True) == ZERO

    @pytest.mark.parametrize("bad", [float("nan"), float("inf")])
    def test_non_finite_values_are_zero(self, bad):
        assert evaluate([Battery(voltage=bad), Resistor()], True) == ZERO
        assert evaluate([Battery(), Resistor(resistance=bad)], True) == ZERO

    def test_idempotent(self):
        components = [Battery(voltage=12.0), Resistor(resistance=220.0), Led()]
        assert evaluate(components, True) == evaluate(components, True)


class TestMeasurements:
    def test_zero(self):
        zero = Measurements.zero()
        assert zero == ZERO
        assert not zero.is_flowing

    def test_current_in_amperes(self):
        assert Measurements(9.0, 90.0, 0.81).current == pytest.approx(0.09)

    def test_formatting(self):
        m = Measurements(9.0, 90.0, 0.81)
        assert m.format_voltage() == "9.00 V"
        assert m.format_current() == "90.00 mA"
        assert m.format_power() == "0.81 W"

    def test_rounded(self):
        m = Measurements(1.23456, 7.891, 0.005001).rounded()
        assert m == Measurements(1.23, 7.89, 0.01)


class TestGlowBrightness:
    def test_proportional_to_current(self):
        assert glow_brightness(Measurements(9.0, 25.0, 0.2)) == pytest.approx(0.5)

    def test_clamped_to_one(self):
        assert glow_brightness(Measurements(9.0, 900.0, 8.1)) == 1.0
        assert glow_brightness(Measurements(9.0, LED_FULL_BRIGHTNESS_MA, 0.45)) == 1.0

    def test_zero_without_current(self):
        assert glow_brightness(Measurements.zero()) == 0.0
