"""
Unit tests for utils.table module.
"""

import unittest
from decimal import Decimal
from fractions import Fraction

from string_utils.utils.table import (
    NO_DATA_MESSAGE,
    TableRenderer,
    describe_row,
    render_table,
)

EXPECTED_TABLE = "\n".join(
    [
        "┌──────────┬─────┬─────────┐",
        "│ Name     │ Age │ Country │",
        "├──────────┼─────┼─────────┤",
        "│ Zaka     │ 50  │ Spain   │",
        "│ Someone  │ 25  │ Poland  │",
        "└──────────┴─────┴─────────┘",
    ]
)


class TestRenderTable(unittest.TestCase):
    """Test cases for render_table()."""

    def setUp(self):
        """Set up test fixtures."""
        self.records = [
            {"Name": "Zaka", "Age": 50, "Country": "Spain"},
            {"Name": "Someone", "Age": 25, "Country": "Poland"},
        ]

    def test_render(self):
        """Test a consistent table renders with box-drawing borders."""
        self.assertEqual(render_table(self.records), EXPECTED_TABLE)

    def test_no_trailing_newline(self):
        """Test output ends with the bottom border."""
        self.assertTrue(render_table(self.records).endswith("┘"))

    def test_empty_input(self):
        """Test empty input returns the no-data message."""
        self.assertEqual(render_table([]), "No data to display.")
        self.assertEqual(render_table([]), NO_DATA_MESSAGE)

    def test_single_row(self):
        """Test a single record."""
        self.assertEqual(
            render_table([{"Name": "Zaka", "Age": 55}]),
            "\n".join(
                [
                    "┌───────┬─────┐",
                    "│ Name  │ Age │",
                    "├───────┼─────┤",
                    "│ Zaka  │ 55  │",
                    "└───────┴─────┘",
                ]
            ),
        )

    def test_key_order_may_differ(self):
        """Test later rows may list the same keys in another order."""
        records = [
            {"Name": "Zaka", "Age": 50, "Country": "Spain"},
            {"Country": "Poland", "Name": "Someone", "Age": 25},
        ]
        self.assertEqual(render_table(records), EXPECTED_TABLE)

    def test_inconsistent_keys(self):
        """Test a row with a different key set returns an error string."""
        result = render_table(
            [
                {"Key": "Value", "Key2": "Value 2"},
                {"Key": "Value3", "Key2": "Value4"},
                {"Key": "Value5", "Key3": "Value6"},
            ]
        )
        self.assertEqual(
            result,
            "Error: Unable to represent data. Row Key,Value5,Key3,Value6 "
            "is not consistent with the rest of the table.",
        )

    def test_extra_key_is_inconsistent(self):
        """Test a row with an additional key is rejected."""
        result = render_table([{"A": "x"}, {"A": "y", "B": "z"}])
        self.assertEqual(
            result,
            "Error: Unable to represent data. Row A,y,B,z "
            "is not consistent with the rest of the table.",
        )

    def test_blank_value_is_inconsistent(self):
        """Test blank and falsy values abort the render."""
        for bad in ["", "   ", None, 0]:
            with self.subTest(value=bad):
                result = render_table([{"A": "x"}, {"A": bad}])
                self.assertTrue(result.startswith("Error: Unable to represent data."))

    def test_composite_value_is_inconsistent(self):
        """Test nested values are reported rather than raised."""
        result = render_table([{"A": "x", "B": ["one", "two"]}])
        self.assertEqual(
            result,
            "Error: Unable to represent data. Row A,x,B,one,two "
            "is not consistent with the rest of the table.",
        )

    def test_first_row_is_validated(self):
        """Test the value check applies to the schema row as well."""
        self.assertTrue(render_table([{"A": ""}]).startswith("Error: "))

    def test_values_are_trimmed(self):
        """Test surrounding whitespace does not affect layout."""
        records = [{"Name": "  Zaka  "}]
        self.assertEqual(render_table(records).splitlines()[3], "│ Zaka  │")

    def test_accents_are_not_normalized(self):
        """Test raw values are shown as given."""
        output = render_table([{"City": "M\u00e1laga"}])
        self.assertIn("│ M\u00e1laga  │", output)

    def test_floats(self):
        """Test non-integer numbers render with str()."""
        output = render_table([{"Price": 9.5}])
        self.assertIn("│ 9.5   │", output)

    def test_other_real_numbers(self):
        """Test Decimal and Fraction values render like floats."""
        output = render_table([{"Price": Decimal("9.5"), "Share": Fraction(1, 2)}])
        self.assertIn("│ 9.5   │ 1/2   │", output)

    def test_booleans_are_inconsistent(self):
        """Test True and False are rejected rather than shown as numbers."""
        for flag in [True, False]:
            with self.subTest(value=flag):
                self.assertEqual(
                    render_table([{"Done": flag}]),
                    f"Error: Unable to represent data. Row Done,{flag} "
                    "is not consistent with the rest of the table.",
                )

    def test_row_that_is_not_a_mapping(self):
        """Test a non-mapping row comes back as an error string."""
        cases = [(None, ""), (["Name"], "Name"), ("Name", "Name")]
        for bad, described in cases:
            with self.subTest(row=bad):
                self.assertEqual(
                    render_table([{"Name": "Zaka"}, bad]),
                    f"Error: Unable to represent data. Row {described} "
                    "is not consistent with the rest of the table.",
                )

    def test_first_row_that_is_not_a_mapping(self):
        """Test the schema row is checked before headers are read."""
        self.assertEqual(
            render_table([["Name", "Zaka"], {"Name": "Zaka"}]),
            "Error: Unable to represent data. Row Name,Zaka "
            "is not consistent with the rest of the table.",
        )


class TestColoredCells(unittest.TestCase):
    """Test cases for cells carrying terminal escape codes."""

    def test_colored_cells_align(self):
        """Test escape codes do not count toward column width."""
        records = [
            {"Status": "\x1b[32mok\x1b[0m", "Task": "build"},
            {"Status": "\x1b[31mfailed\x1b[0m", "Task": "test"},
        ]
        lines = render_table(records).splitlines()
        self.assertEqual(lines[0], "┌─────────┬────────┐")
        self.assertEqual(lines[3], "│ \x1b[32mok\x1b[0m      │ build  │")
        self.assertEqual(lines[4], "│ \x1b[31mfailed\x1b[0m  │ test   │")

    def test_visible_widths_match(self):
        """Test every rendered line has the same visible width."""
        from string_utils.utils.escapes import visual_length

        records = [
            {"Status": "\x1b[32mok\x1b[0m", "Task": "build"},
            {"Status": "\x1b[31mfailed\x1b[0m", "Task": "test"},
        ]
        widths = {visual_length(line) for line in render_table(records).splitlines()}
        self.assertEqual(len(widths), 1)

    def test_colored_header_width(self):
        """Test escape codes in a header do not widen its column."""
        lines = render_table([{"\x1b[1mName\x1b[0m": "Zaka"}]).splitlines()
        self.assertEqual(lines[0], "┌───────┐")
        self.assertEqual(lines[1], "│ \x1b[1mName\x1b[0m  │")
        self.assertEqual(lines[3], "│ Zaka  │")


class TestDescribeRow(unittest.TestCase):
    """Test cases for describe_row()."""

    def test_describe_row(self):
        """Test entries are flattened into one comma-separated string."""
        self.assertEqual(describe_row({"Key": "Value5", "Key3": "Value6"}), "Key,Value5,Key3,Value6")

    def test_describe_row_nested(self):
        """Test nested lists and missing values flatten too."""
        self.assertEqual(describe_row({"A": [1, [2, 3]], "B": None}), "A,1,2,3,B,")


def test_renderer_class(sample_records):
    """Test the renderer class matches the convenience function."""
    assert TableRenderer().render(sample_records) == render_table(sample_records)


def test_colored_fixture_renders(colored_records):
    """Test the colored fixture renders without error."""
    assert not render_table(colored_records).startswith("Error: ")
