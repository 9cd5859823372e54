"""Series-loop evaluation using Ohm's and Watt's laws.

The sandbox models exactly one series loop: the first battery drives the
summed resistance of every resistor and LED, and any open switch breaks
the loop. Internal battery resistance, LED forward voltage and parallel
paths are not modelled.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from circuitsim.models.component import Battery, Component, Led, Resistor, Switch

# Current (mA) at which an LED reaches full brightness
LED_FULL_BRIGHTNESS_MA = 50.0


@dataclass(frozen=True)
class Measurements:
    """Voltage (V), current (mA) and power (W) of the loop, at full precision."""

    voltage: float = 0.0
    current_ma: float = 0.0
    power: float = 0.0

    @classmethod
    def zero(cls) -> "Measurements":
        return cls()

    @property
    def current(self) -> float:
        """Loop current in amperes."""
        return self.current_ma / 1000.0

    @property
    def is_flowing(self) -> bool:
        """True when current flows through the loop."""
        return self.current_ma > 0

    def rounded(self, digits: int = 2) -> "Measurements":
        """Copy with every field rounded for display."""
        return Measurements(
            round(self.voltage, digits),
            round(self.current_ma, digits),
            round(self.power, digits),
        )

    def format_voltage(self) -> str:
        return f"{self.voltage:.2f} V"

    def format_current(self) -> str:
        return f"{self.current_ma:.2f} mA"

    def format_power(self) -> str:
        return f"{self.power:.2f} W"


def evaluate(components: Iterable[Component], is_powered: bool) -> Measurements:
    """Compute loop measurements for an ordered component sequence."""
    components = list(components)
    if not is_powered or not components:
        return Measurements.zero()

    battery = next((c for c in components if isinstance(c, Battery)), None)
    if battery is None:
        return Measurements.zero()

    loads = [c for c in components if isinstance(c, (Resistor, Led))]
    switches = [c for c in components if isinstance(c, Switch)]

    # Open circuit or nothing to drive
    if any(not s.is_closed for s in switches) or not loads:
        return Measurements.zero()

    total_resistance = sum(load.resistance for load in loads)
    voltage = battery.voltage
    if total_resistance == 0 or not math.isfinite(total_resistance) or not math.isfinite(voltage):
        return Measurements.zero()

    current = voltage / total_resistance
    power = voltage * current
    if not (math.isfinite(current) and math.isfinite(power)):
        return Measurements.zero()

    return Measurements(voltage=voltage, current_ma=current * 1000.0, power=power)


def glow_brightness(measurements: Measurements) -> float:
    """LED glow intensity in [0, 1], proportional to loop current."""
    return max(0.0, min(measurements.current_ma / LED_FULL_BRIGHTNESS_MA, 1.0))
