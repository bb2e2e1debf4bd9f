import pytest

from trampolinedig.model.calculator import calculate
from trampolinedig.report import format_quantity, format_report, report_lines


class TestFormatQuantity:

    @pytest.mark.parametrize("value, expected", [
        (36.0, "36"),
        (0.5, "0.5"),
        (-2.25, "-2.25"),
        (1e20, "100000000000000000000"),
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
        (float("nan"), "NaN"),
    ])
    def test_format(self, value, expected):
        assert format_quantity(value) == expected

    def test_round_trips(self):
        value = 31388.54427904516
        assert float(format_quantity(value)) == value


class TestReport:

    def test_lines_in_fixed_order(self, default_parameters):
        lines = report_lines(calculate(default_parameters))
        labels = [line.split(":")[0] for line in lines]
        assert labels == [
            "trampoline plus wall surface area",
            "ring surface area",
            "hole depth",
            "wall height",
            "wall area",
            "volume to excavate",
        ]

    def test_units(self, default_parameters):
        lines = report_lines(calculate(default_parameters))
        assert lines[0].endswith(" units squared")
        assert lines[1].endswith(" units squared")
        assert lines[2].endswith(" units")
        assert lines[3].endswith(" units")
        assert lines[4].endswith(" units squared")
        assert lines[5].endswith(" units cubed")

    def test_values(self, default_parameters):
        results = calculate(default_parameters)
        text = format_report(results)
        hole_depth_line = text.splitlines()[2]
        value = float(hole_depth_line.split(": ")[1].split(" ")[0])
        assert value == results.hole_depth
