"""Component model for the series circuit sandbox."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar
from uuid import UUID, uuid4


# Every component occupies a fixed square box on the canvas
COMPONENT_SIZE = 60.0


class ComponentType(Enum):
    """Kinds of components that can be placed in the sandbox."""

    BATTERY = auto()
    RESISTOR = auto()
    LED = auto()
    SWITCH = auto()

    @classmethod
    def from_value(cls, value: "ComponentType | str") -> "ComponentType":
        """Resolve a component type from an enum member or its name."""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown component type: {value!r}") from None


@dataclass(frozen=True)
class AttributeSpec:
    """Describes one editable electrical attribute of a component kind."""

    name: str
    label: str
    unit: str = ""
    kind: str = "float"  # "float" or "bool"
    hint_min: float | None = None
    hint_max: float | None = None

    @property
    def hint(self) -> str:
        """Suggested input range shown next to editors."""
        if self.hint_min is None or self.hint_max is None:
            return ""
        return f"{self.hint_min:g} - {self.hint_max:g} {self.unit}".rstrip()


@dataclass
class Component:
    """Base class for placed components.

    Subclasses carry only the electrical fields relevant to their kind.
    """

    type: ClassVar[ComponentType]
    attributes: ClassVar[tuple[AttributeSpec, ...]] = ()

    id: UUID = field(default_factory=uuid4)
    name: str = ""
    x: float = 0.0
    y: float = 0.0

    @property
    def center(self) -> tuple[float, float]:
        """Center of the component box in canvas coordinates."""
        half = COMPONENT_SIZE / 2
        return self.x + half, self.y + half

    def contains(self, px: float, py: float) -> bool:
        """Check whether a point lies inside the component box (edges included)."""
        return (
            self.x <= px <= self.x + COMPONENT_SIZE
            and self.y <= py <= self.y + COMPONENT_SIZE
        )

    def get_attribute_spec(self, name: str) -> AttributeSpec | None:
        """Return the spec for an editable attribute, or None if this kind lacks it."""
        for spec in self.attributes:
            if spec.name == name:
                return spec
        return None

    def get_attribute(self, name: str) -> Any:
        """Read an editable attribute by name."""
        if self.get_attribute_spec(name) is None:
            raise AttributeError(f"{self.type.name.lower()} has no attribute '{name}'")
        return getattr(self, name)

    def electrical_values(self) -> dict[str, Any]:
        """Return the kind-specific electrical fields."""
        return {spec.name: getattr(self, spec.name) for spec in self.attributes}


@dataclass
class Battery(Component):
    """DC voltage source; only the first battery in a circuit is used."""

    type: ClassVar[ComponentType] = ComponentType.BATTERY
    attributes: ClassVar[tuple[AttributeSpec, ...]] = (
        AttributeSpec("voltage", "Voltage", "V", hint_min=1, hint_max=24),
    )

    voltage: float = 9.0


@dataclass
class Resistor(Component):
    """Ohmic load."""

    type: ClassVar[ComponentType] = ComponentType.RESISTOR
    attributes: ClassVar[tuple[AttributeSpec, ...]] = (
        AttributeSpec("resistance", "Resistance", "Ω", hint_min=1, hint_max=10000),
    )

    resistance: float = 100.0


@dataclass
class Led(Component):
    """Light emitting diode, modelled as a plain resistive load."""

    type: ClassVar[ComponentType] = ComponentType.LED
    attributes: ClassVar[tuple[AttributeSpec, ...]] = (
        AttributeSpec("resistance", "Resistance", "Ω", hint_min=1, hint_max=10000),
    )

    resistance: float = 10.0


@dataclass
class Switch(Component):
    """Series switch; an open switch breaks the loop."""

    type: ClassVar[ComponentType] = ComponentType.SWITCH
    attributes: ClassVar[tuple[AttributeSpec, ...]] = (
        AttributeSpec("is_closed", "State", kind="bool"),
    )

    is_closed: bool = True


COMPONENT_CLASSES: dict[ComponentType, type[Component]] = {
    ComponentType.BATTERY: Battery,
    ComponentType.RESISTOR: Resistor,
    ComponentType.LED: Led,
    ComponentType.SWITCH: Switch,
}

# Designator prefixes used when naming new components (B1, R1, D1, S1)
NAME_PREFIXES: dict[ComponentType, str] = {
    ComponentType.BATTERY: "B",
    ComponentType.RESISTOR: "R",
    ComponentType.LED: "D",
    ComponentType.SWITCH: "S",
}


def create_component(comp_type: ComponentType, **kwargs: Any) -> Component:
    """Instantiate the component class for a given type."""
    return COMPONENT_CLASSES[comp_type](**kwargs)
