"""
Configuration & Global Constants
================================
This module serves as the central registry for defaults and labels.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (36, 74, ...) scattered through
   the parser, the parameter record and the tests.
2. Presentation: It keeps the output labels and their units in one place so
   the printed report always has the same fixed order.

Exports:
    PROGRAM_NAME (str): Name shown by --help and --version.
    DEFAULT_* : Default value of every input.
    REPORT_LINES (tuple): (result field, label, unit) in printing order.
"""
from typing import Tuple

PROGRAM_NAME: str = "trampoline-dig"
PROGRAM_DESCRIPTION: str = "Trampoline Dig Project Calculator"

# Default project: an octagonal trampoline in an octagonal ring
DEFAULT_TRAMPOLINE_HEIGHT: float = 36.0
DEFAULT_TRAMPOLINE_SIDES: int = 8
DEFAULT_TRAMPOLINE_SIDE_LENGTH: float = 74.0
DEFAULT_RETAINING_WALL_THICKNESS: float = 8.0
DEFAULT_RING_SIDES: int = 8
DEFAULT_APOTHEM_DIFFERENCE: float = 36.0
DEFAULT_AIR_CHANNEL_COUNT: int = 4
DEFAULT_AIR_CHANNEL_WIDTH: float = 12.0

# Units
UNITS_LINEAR: str = "units"
UNITS_SQUARED: str = "units squared"
UNITS_CUBED: str = "units cubed"

REPORT_LINES: Tuple[Tuple[str, str, str], ...] = (
    ("trampoline_plus_wall_surface_area", "trampoline plus wall surface area", UNITS_SQUARED),
    ("ring_surface_area", "ring surface area", UNITS_SQUARED),
    ("hole_depth", "hole depth", UNITS_LINEAR),
    ("wall_height", "wall height", UNITS_LINEAR),
    ("wall_area", "wall area", UNITS_SQUARED),
    ("volume_to_excavate", "volume to excavate", UNITS_CUBED),
)
