from __future__ import annotations

from contextlib import redirect_stderr, redirect_stdout
import io
from pathlib import Path
import tempfile
import unittest

from PIL import Image

from kinetic_chart.cli import main, read_samples
from kinetic_chart.errors import ChartDataError


class ReadSamplesTests(unittest.TestCase):
    def test_reads_rows_and_skips_header(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "samples.csv"
            path.write_text("time_ns,value\n0,1.5\n1000,-2\n\n2000,0.25\n", encoding="utf-8")
            times, values = read_samples(path)
        self.assertEqual(times, [0, 1000, 2000])
        self.assertEqual(values, [1.5, -2.0, 0.25])

    def test_rejects_bad_row_after_header(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "samples.csv"
            path.write_text("0,1.0\nabc,2.0\n", encoding="utf-8")
            with self.assertRaisesRegex(ChartDataError, ":2:"):
                read_samples(path)


class CliTests(unittest.TestCase):
    def test_render_writes_png(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            samples = Path(td) / "samples.csv"
            samples.write_text("time_ns,value\n0,0\n500,0.8\n1000,-0.4\n", encoding="utf-8")
            style = Path(td) / "style.toml"
            style.write_text('[chart]\nline_color = "#3E95FF"\nline_thickness = 2\n', encoding="utf-8")
            out = Path(td) / "chart.png"
            stdout = io.StringIO()
            with redirect_stdout(stdout):
                code = main(
                    [
                        "render",
                        str(samples),
                        str(out),
                        "--min",
                        "-1",
                        "--max",
                        "1",
                        "--width",
                        "120",
                        "--height",
                        "40",
                        "--style",
                        str(style),
                    ]
                )
            self.assertEqual(code, 0)
            self.assertIn("chart.png", stdout.getvalue())
            with Image.open(out) as img:
                self.assertEqual(img.size, (120, 40))

    def test_render_reports_missing_samples(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as ctx:
                    main(["render", str(Path(td) / "none.csv"), str(Path(td) / "o.png"), "--min", "0", "--max", "1"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
