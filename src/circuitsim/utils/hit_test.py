"""Pointer hit-testing against placed components."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:  # pragma: no cover
    from circuitsim.models.component import Component


def hit_test(x: float, y: float, components: Iterable[Component]) -> Component | None:
    """Return the earliest-added component whose box contains the point.

    Overlapping boxes resolve to the lowest index, so a component added
    first wins even though later ones are painted on top of it.
    """
    for component in components:
        if component.contains(x, y):
            return component
    return None
