from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from kinetic_chart import DEFAULT_STYLE, ChartStyleError, load_chart_style, validate_chart_style
from kinetic_chart.style import parse_hex_color


class ChartStyleTests(unittest.TestCase):
    def test_validate_style_defaults(self) -> None:
        style = validate_chart_style()
        self.assertEqual(style, DEFAULT_STYLE)
        self.assertEqual(style.line_thickness, 0.0)
        self.assertEqual(style.line_rgba, (0, 0, 0, 255))
        self.assertEqual(style.axis_rgba, (0x44, 0x44, 0x44, 255))
        self.assertEqual(style.axis_thickness, 1)

    def test_validate_style_accepts_partial_override(self) -> None:
        style = validate_chart_style({"line_color": "#112233", "line_thickness": 3})
        self.assertEqual(style.line_color, "#112233")
        self.assertEqual(style.line_thickness, 3.0)
        self.assertEqual(style.axis_color, DEFAULT_STYLE.axis_color)

    def test_validate_style_rejects_unknown_key(self) -> None:
        with self.assertRaisesRegex(ChartStyleError, "Unknown chart style key"):
            validate_chart_style({"grid_color": "#112233"})

    def test_validate_style_rejects_invalid_hex_color(self) -> None:
        with self.assertRaisesRegex(ChartStyleError, "hex color"):
            validate_chart_style({"axis_color": "gray"})

    def test_validate_style_rejects_negative_line_thickness(self) -> None:
        with self.assertRaisesRegex(ChartStyleError, "non-negative"):
            validate_chart_style({"line_thickness": -0.5})

    def test_validate_style_rejects_non_integer_axis_thickness(self) -> None:
        for bad in (0, 1.5, True):
            with self.assertRaisesRegex(ChartStyleError, "positive integer"):
                validate_chart_style({"axis_thickness": bad})

    def test_parse_hex_color_with_alpha(self) -> None:
        self.assertEqual(parse_hex_color("#0A0B0C80"), (10, 11, 12, 128))
        with self.assertRaises(ChartStyleError):
            parse_hex_color("#12345")


class LoadChartStyleTests(unittest.TestCase):
    def test_load_style_from_chart_table(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "style.toml"
            path.write_text(
                '[chart]\nline_thickness = 1.5\nline_color = "#3E95FF"\naxis_thickness = 2\n',
                encoding="utf-8",
            )
            style = load_chart_style(path)
        self.assertEqual(style.line_thickness, 1.5)
        self.assertEqual(style.line_rgba, (0x3E, 0x95, 0xFF, 255))
        self.assertEqual(style.axis_thickness, 2)
        self.assertEqual(style.axis_color, DEFAULT_STYLE.axis_color)

    def test_load_style_without_chart_table_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "style.toml"
            path.write_text('title = "unused"\n', encoding="utf-8")
            self.assertEqual(load_chart_style(path), DEFAULT_STYLE)

    def test_load_style_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(FileNotFoundError):
                load_chart_style(Path(td) / "missing.toml")

    def test_load_style_rejects_invalid_values(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "style.toml"
            path.write_text('[chart]\naxis_color = "dark"\n', encoding="utf-8")
            with self.assertRaises(ChartStyleError):
                load_chart_style(path)


if __name__ == "__main__":
    unittest.main()
