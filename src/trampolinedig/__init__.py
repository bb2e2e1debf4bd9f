"""
Trampoline Dig Project Calculator.

Derives the excavation and construction measurements for an in-ground,
regular-polygon trampoline surrounded by a retaining wall and an outer ring.
"""
from trampolinedig.errors import InvalidInputError, TrampolineDigError
from trampolinedig.model.calculator import calculate
from trampolinedig.model.parameters import DigParameters
from trampolinedig.model.results import DigResults

__version__ = "0.1.0"

__all__ = [
    "DigParameters",
    "DigResults",
    "InvalidInputError",
    "TrampolineDigError",
    "calculate",
    "__version__",
]
