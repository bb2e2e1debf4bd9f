"""Input parameters of a trampoline dig project and their parsing."""
from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Mapping, Union, TYPE_CHECKING

import numpy as np

from trampolinedig import config
from trampolinedig.errors import InvalidInputError
from trampolinedig.model.polygon import Real

if TYPE_CHECKING:
    import numpy.typing as npt

Count = Union[int, "npt.NDArray[np.int64]"]

# Unsigned whole number, as typed on a command line ("8", "+8", "008")
_COUNT_PATTERN = re.compile(r"\+?[0-9]+")

# Largest count a 32-bit unsigned field holds
MAX_COUNT = 2**32 - 1

# Fields parsed as whole numbers; every other field is a real
COUNT_FIELDS = frozenset({"trampoline_sides", "ring_sides", "air_channel_count"})


def parse_real(raw: str, name: str = "value") -> float:
    """
    Parses a finite real number.

    Raises:
        InvalidInputError: `raw` is not a number, is inf/NaN, or carries
            digit separators or surrounding whitespace.
    """
    if not isinstance(raw, str) or "_" in raw or raw.strip() != raw:
        raise InvalidInputError(name, raw, "a finite real number")
    try:
        value = float(raw)
    except ValueError as e:
        raise InvalidInputError(name, raw, "a finite real number") from e
    if not np.isfinite(value):
        raise InvalidInputError(name, raw, "a finite real number")
    return value


def parse_count(raw: str, name: str = "value") -> int:
    """
    Parses a non-negative whole number.

    Raises:
        InvalidInputError: `raw` is not made of digits only (an optional
            leading '+' is accepted), or exceeds MAX_COUNT.
    """
    if not isinstance(raw, str) or _COUNT_PATTERN.fullmatch(raw) is None:
        raise InvalidInputError(name, raw, "a non-negative whole number")
    value = int(raw)
    if value > MAX_COUNT:
        raise InvalidInputError(name, raw, f"a whole number no greater than {MAX_COUNT}")
    return value


@dataclass(frozen=True)
class DigParameters:
    """
    The eight inputs of the calculator.

    Lengths share one arbitrary unit. Side and channel counts are whole
    numbers and are promoted to reals by the calculator. Any field may hold
    a numpy array to evaluate a sweep of projects at once.
    """
    trampoline_height: Real = config.DEFAULT_TRAMPOLINE_HEIGHT
    trampoline_sides: Count = config.DEFAULT_TRAMPOLINE_SIDES
    trampoline_side_length: Real = config.DEFAULT_TRAMPOLINE_SIDE_LENGTH
    retaining_wall_thickness: Real = config.DEFAULT_RETAINING_WALL_THICKNESS
    ring_sides: Count = config.DEFAULT_RING_SIDES
    apothem_difference: Real = config.DEFAULT_APOTHEM_DIFFERENCE
    air_channel_count: Count = config.DEFAULT_AIR_CHANNEL_COUNT
    air_channel_width: Real = config.DEFAULT_AIR_CHANNEL_WIDTH

    @classmethod
    def from_strings(cls, raw_values: Mapping[str, str]) -> DigParameters:
        """
        Builds parameters from raw text values keyed by field name.

        Missing keys keep their default. Unknown keys are rejected.

        Raises:
            InvalidInputError: A value does not parse as its numeric type.
            KeyError: A key is not a parameter name.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(raw_values) - known
        if unknown:
            raise KeyError(f"Unknown parameter(s): {', '.join(sorted(unknown))}")

        values = {}
        for name, raw in raw_values.items():
            if name in COUNT_FIELDS:
                values[name] = parse_count(raw, name)
            else:
                values[name] = parse_real(raw, name)
        return cls(**values)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}
