"""
Regular Polygon Primitive.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

Real = Union[float, "npt.NDArray[np.float64]"]


def half_angle_tangent(sides: Real) -> Real:
    """Tangent of pi / n, the ratio of half a side to the apothem."""
    return np.tan(np.pi / sides)


@dataclass(frozen=True)
class RegularPolygon:
    """
    A regular polygon described by its side count and apothem.

    The apothem is the distance from the centre to the midpoint of a side.
    Values are evaluated with numpy, so `sides` and `apothem` may be arrays
    of matching shape. Nothing is validated: fewer than 3 sides, or a zero
    side count, propagate as inf/NaN.
    """
    sides: Real
    apothem: Real

    @classmethod
    def from_side_length(cls, sides: Real, side_length: Real) -> RegularPolygon:
        """Builds the polygon from the length of one side."""
        return cls(sides=sides, apothem=side_length / (2 * half_angle_tangent(sides)))

    def offset(self, distance: Real) -> RegularPolygon:
        """Polygon grown outwards by `distance`, keeping the same side count."""
        return RegularPolygon(sides=self.sides, apothem=self.apothem + distance)

    @property
    def side_length(self) -> Real:
        return self.apothem * 2 * half_angle_tangent(self.sides)

    @property
    def perimeter(self) -> Real:
        return self.side_length * self.sides

    @property
    def area(self) -> Real:
        # 1/2 * apothem * perimeter
        return (self.apothem * self.side_length * self.sides) / 2
