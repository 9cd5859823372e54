"""Tests for Circuit model."""

from uuid import uuid4

from circuitsim.models.circuit import Circuit
from circuitsim.models.component import Battery, ComponentType, Resistor, Switch


class TestCircuit:
    def test_create_circuit(self):
        circuit = Circuit(name="test")
        assert circuit.name == "test"
        assert len(circuit) == 0

    def test_add_uses_catalog_defaults(self, circuit):
        battery = circuit.add(ComponentType.BATTERY)
        led = circuit.add("led")

        assert isinstance(battery, Battery)
        assert battery.voltage == 9.0
        assert led.resistance == 10.0
        assert circuit.components == [battery, led]

    def test_add_staggers_positions(self, circuit):
        first = circuit.add(ComponentType.BATTERY)
        second = circuit.add(ComponentType.RESISTOR)
        third = circuit.add(ComponentType.SWITCH)

        assert (first.x, first.y) == (150, 200)
        assert (second.x, second.y) == (230, 200)
        assert (third.x, third.y) == (310, 200)

    def test_auto_name_generation(self, circuit):
        assert circuit.add(ComponentType.RESISTOR).name == "R1"
        assert circuit.add(ComponentType.RESISTOR).name == "R2"
        assert circuit.add(ComponentType.BATTERY).name == "B1"
        assert circuit.add(ComponentType.LED).name == "D1"
        assert circuit.add(ComponentType.SWITCH).name == "S1"

    def test_add_component_keeps_given_name(self, circuit):
        comp = Resistor(name="Rload")
        circuit.add_component(comp)
        assert comp.name == "Rload"
        assert circuit.get_component(comp.id) is comp

    def test_remove_component(self, circuit):
        battery = circuit.add(ComponentType.BATTERY)
        resistor = circuit.add(ComponentType.RESISTOR)

        removed = circuit.remove(battery.id)
        assert removed is battery
        assert circuit.components == [resistor]

    def test_remove_unknown_id_is_noop(self, circuit):
        circuit.add(ComponentType.BATTERY)
        assert circuit.remove(uuid4()) is None
        assert len(circuit) == 1

    def test_index_and_iteration_follow_insertion(self, circuit):
        a = circuit.add(ComponentType.BATTERY)
        b = circuit.add(ComponentType.RESISTOR)
        assert circuit.index_of(b.id) == 1
        assert circuit.index_of(uuid4()) is None
        assert list(circuit.iter_components()) == [a, b]

    def test_move_component(self, circuit):
        comp = circuit.add(ComponentType.RESISTOR)
        assert circuit.move_component(comp.id, 12, 34)
        assert (comp.x, comp.y) == (12, 34)
        assert not circuit.move_component(uuid4(), 0, 0)

    def test_clear_resets_names(self, circuit):
        circuit.add(ComponentType.RESISTOR)
        circuit.clear()
        assert len(circuit) == 0
        assert circuit.add(ComponentType.RESISTOR).name == "R1"


class TestSetAttribute:
    def test_numeric_string_is_stored_as_float(self, circuit):
        resistor = circuit.add(ComponentType.RESISTOR)
        result = circuit.set_attribute(resistor.id, "resistance", "220")
        assert result.ok
        assert resistor.resistance == 220.0

    def test_si_prefix_accepted(self, circuit):
        resistor = circuit.add(ComponentType.RESISTOR)
        assert circuit.set_attribute(resistor.id, "resistance", "4.7k").ok
        assert resistor.resistance == 4700.0

    def test_out_of_range_values_are_accepted(self, circuit):
        battery = circuit.add(ComponentType.BATTERY)
        assert circuit.set_attribute(battery.id, "voltage", 100).ok
        assert battery.voltage == 100.0

    def test_non_numeric_rejected_keeps_previous(self, circuit):
        resistor = circuit.add(ComponentType.RESISTOR)
        result = circuit.set_attribute(resistor.id, "resistance", "abc")
        assert not result.ok
        assert result.error
        assert resistor.resistance == 100.0

    def test_non_finite_rejected(self, circuit):
        battery = circuit.add(ComponentType.BATTERY)
        assert not circuit.set_attribute(battery.id, "voltage", float("nan")).ok
        assert not circuit.set_attribute(battery.id, "voltage", "inf").ok
        assert battery.voltage == 9.0

    def test_attribute_of_other_kind_rejected(self, circuit):
        battery = circuit.add(ComponentType.BATTERY)
        assert not circuit.set_attribute(battery.id, "resistance", 10).ok
        assert not hasattr(battery, "resistance")

    def test_unknown_id_is_noop(self, circuit):
        battery = circuit.add(ComponentType.BATTERY)
        before = list(circuit.components)

        result = circuit.set_attribute(uuid4(), "voltage", 12)

        assert not result.ok
        assert circuit.components == before
        assert battery.voltage == 9.0

    def test_switch_state(self, circuit):
        switch = circuit.add(ComponentType.SWITCH)
        assert isinstance(switch, Switch)
        assert circuit.set_attribute(switch.id, "is_closed", "open").ok
        assert switch.is_closed is False
        assert circuit.set_attribute(switch.id, "is_closed", True).ok
        assert switch.is_closed is True
        assert not circuit.set_attribute(switch.id, "is_closed", "maybe").ok
        assert switch.is_closed is True
