"""Derived measurements of a trampoline dig project."""
from __future__ import annotations

from dataclasses import dataclass, fields
from trampolinedig.model.polygon import Real


@dataclass(frozen=True)
class DigResults:
    """
    Outputs of the calculator.

    The first six fields are the reported measurements. The remaining ones
    are the intermediate polygon dimensions they were derived from.
    """
    trampoline_plus_wall_surface_area: Real
    ring_surface_area: Real
    hole_depth: Real
    wall_height: Real
    wall_area: Real
    volume_to_excavate: Real

    trampoline_apothem: Real
    wall_apothem: Real
    wall_side_length: Real
    ring_apothem: Real
    ring_side_length: Real

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}
