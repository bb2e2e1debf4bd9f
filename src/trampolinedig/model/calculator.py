"""
Geometry Calculator
===================
Closed-form derivation of the dig measurements.

Layout (plan view, from the centre outwards):
    trampoline polygon -> retaining wall (same side count) -> ring polygon.

The excavated soil is piled into the ring, so the trampoline height is split
into a hole depth and a wall height in inverse proportion to the footprint
areas of the wall-inclusive trampoline and of the ring.
"""
from __future__ import annotations

import logging
from typing import Union, TYPE_CHECKING

import numpy as np

from trampolinedig.model.parameters import DigParameters
from trampolinedig.model.polygon import RegularPolygon
from trampolinedig.model.results import DigResults

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _as_real(value: Union[float, npt.ArrayLike]) -> Union[np.float64, npt.NDArray[np.float64]]:
    """Promotes a scalar or array to float64 (0-d arrays come back as scalars)."""
    return np.asarray(value, dtype=np.float64)[()]


def calculate(parameters: DigParameters) -> DigResults:
    """
    Derives the six dig measurements from the project parameters.

    No geometric plausibility is checked. Degenerate inputs (fewer than 3
    sides, a ring smaller than the wall footprint, ...) produce inf, NaN or
    negative values instead of raising; they are only logged as warnings.

    Args:
        parameters: Project inputs, scalars or broadcastable numpy arrays.

    Returns:
        The measurements together with the intermediate polygon dimensions.
    """
    height = _as_real(parameters.trampoline_height)
    trampoline_sides = _as_real(parameters.trampoline_sides)
    side_length = _as_real(parameters.trampoline_side_length)
    wall_thickness = _as_real(parameters.retaining_wall_thickness)
    ring_sides = _as_real(parameters.ring_sides)
    apothem_difference = _as_real(parameters.apothem_difference)
    channel_count = _as_real(parameters.air_channel_count)
    channel_width = _as_real(parameters.air_channel_width)

    if np.any(trampoline_sides < 3) or np.any(ring_sides < 3):
        logger.warning(
            f"Side counts below 3 do not form a polygon "
            f"(trampoline: {parameters.trampoline_sides}, ring: {parameters.ring_sides})."
        )

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        trampoline = RegularPolygon.from_side_length(trampoline_sides, side_length)
        wall = trampoline.offset(wall_thickness)
        wall_side_length = wall.side_length
        wall_surface_area = wall.area

        ring = RegularPolygon(sides=ring_sides, apothem=wall.apothem + apothem_difference)
        ring_side_length = ring.side_length
        # Each air channel cuts a (width + both wall faces) x apothem difference strip out of the ring
        channel_footprint = ((channel_width + (2 * wall_thickness)) * apothem_difference) * channel_count
        ring_surface_area = ring.area - (wall_surface_area + channel_footprint)

        hole_depth = height / ((wall_surface_area / ring_surface_area) + 1)
        wall_height = height - hole_depth

        channel_opening = channel_count * channel_width
        wall_area = (
            (wall.perimeter - channel_opening) * height
            + (ring.perimeter - channel_opening + (2 * channel_count * apothem_difference)) * wall_height
            + (channel_opening * hole_depth)
        )

        volume_to_excavate = wall_surface_area * hole_depth

    if np.any(ring_surface_area <= 0):
        logger.warning(
            f"Ring surface area is not positive ({ring_surface_area}); "
            f"hole depth and wall height are not physically meaningful."
        )

    logger.debug(
        f"Apothems: trampoline={trampoline.apothem}, wall={wall.apothem}, ring={ring.apothem}; "
        f"side lengths: wall={wall_side_length}, ring={ring_side_length}"
    )

    return DigResults(
        trampoline_plus_wall_surface_area=wall_surface_area,
        ring_surface_area=ring_surface_area,
        hole_depth=hole_depth,
        wall_height=wall_height,
        wall_area=wall_area,
        volume_to_excavate=volume_to_excavate,
        trampoline_apothem=trampoline.apothem,
        wall_apothem=wall.apothem,
        wall_side_length=wall_side_length,
        ring_apothem=ring.apothem,
        ring_side_length=ring_side_length,
    )
