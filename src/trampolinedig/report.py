"""Plain-text report of the dig measurements."""
from __future__ import annotations

from typing import List

import numpy as np

from trampolinedig.config import REPORT_LINES
from trampolinedig.model.results import DigResults


def format_quantity(value: float) -> str:
    """
    Shortest round-trip decimal text of a value, without exponent.

    Whole numbers lose their trailing '.0' (36.0 -> '36'); non-finite values
    read 'inf', '-inf' and 'NaN'.
    """
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(value, trim='-')


def report_lines(results: DigResults) -> List[str]:
    """One 'label: value unit' line per measurement, in the fixed report order."""
    return [
        f"{label}: {format_quantity(getattr(results, field))} {unit}"
        for field, label, unit in REPORT_LINES
    ]


def format_report(results: DigResults) -> str:
    return "\n".join(report_lines(results))
