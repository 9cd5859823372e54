"""Circuit model: an ordered series loop of components."""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator
from uuid import UUID

from circuitsim.models.component import (
    NAME_PREFIXES,
    Component,
    ComponentType,
    create_component,
)
from circuitsim.models.component_catalog import get_catalog_entry
from circuitsim.utils.parsing import ParseResult, parse_bool, parse_number

logger = logging.getLogger(__name__)

# Default placement of newly added components
DEFAULT_ORIGIN_X = 150.0
DEFAULT_ORIGIN_Y = 200.0
DEFAULT_SPACING_X = 80.0


@dataclass
class Circuit:
    """A single series loop; list order is the wiring order."""

    name: str = "untitled"
    components: list[Component] = field(default_factory=list)
    _component_counter: dict[str, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.components)

    def add(self, kind: ComponentType | str) -> Component:
        """Create a component with catalog defaults and append it to the loop."""
        comp_type = ComponentType.from_value(kind)
        entry = get_catalog_entry(comp_type)
        component = create_component(
            comp_type,
            x=DEFAULT_ORIGIN_X + len(self.components) * DEFAULT_SPACING_X,
            y=DEFAULT_ORIGIN_Y,
            **entry.defaults,
        )
        self.add_component(component)
        return component

    def add_component(self, component: Component) -> None:
        """Append an existing component to the loop."""
        if not component.name:
            component.name = self._generate_name(component.type)
        self.components.append(component)

    def remove(self, component_id: UUID) -> Component | None:
        """Remove a component by id; unknown ids are ignored."""
        index = self.index_of(component_id)
        if index is None:
            return None
        return self.components.pop(index)

    def get_component(self, component_id: UUID | None) -> Component | None:
        """Get a component by ID."""
        if component_id is None:
            return None
        for comp in self.components:
            if comp.id == component_id:
                return comp
        return None

    def index_of(self, component_id: UUID) -> int | None:
        """Position of a component in the loop, or None."""
        for index, comp in enumerate(self.components):
            if comp.id == component_id:
                return index
        return None

    def iter_components(self) -> Iterator[Component]:
        """Iterate over components in wiring order."""
        yield from self.components

    def move_component(self, component_id: UUID, x: float, y: float) -> bool:
        """Move a component's top-left corner."""
        component = self.get_component(component_id)
        if component is None:
            return False
        component.x = x
        component.y = y
        return True

    def set_attribute(self, component_id: UUID, name: str, raw: Any) -> ParseResult:
        """Parse and store an electrical attribute.

        The model is left untouched when the id is unknown, the attribute
        does not belong to the component kind, or the value does not parse.
        """
        component = self.get_component(component_id)
        if component is None:
            return ParseResult.failure(f"No component with id {component_id}")

        spec = component.get_attribute_spec(name)
        if spec is None:
            return ParseResult.failure(
                f"{component.type.name.title()} has no attribute '{name}'"
            )

        result = parse_bool(raw) if spec.kind == "bool" else parse_number(raw)
        if not result.ok:
            logger.info("Rejected %s.%s = %r: %s", component.name, name, raw, result.error)
            return result

        setattr(component, name, result.value)
        logger.debug("Set %s.%s = %r", component.name, name, result.value)
        return result

    def _generate_name(self, comp_type: ComponentType) -> str:
        """Generate a unique designator like R1, R2, B1, etc."""
        prefix = NAME_PREFIXES[comp_type]
        if prefix not in self._component_counter:
            self._component_counter[prefix] = 0
        self._component_counter[prefix] += 1
        return f"{prefix}{self._component_counter[prefix]}"

    def clear(self) -> None:
        """Remove all components."""
        self.components.clear()
        self._component_counter.clear()
