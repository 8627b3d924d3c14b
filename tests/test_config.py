from __future__ import annotations

from pathlib import Path
import tempfile
import textwrap
import unittest

from axis_plot import (
    InvalidGeometryError,
    PlotConfigError,
    PlotTick,
    TickOutOfRangeError,
    build_plotter,
    load_plot_config,
    load_plotter,
)
from axis_plot.config import parse_plot_config


class PlotConfigTests(unittest.TestCase):
    def _write(self, body: str) -> Path:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        path = Path(tmp.name) / "plot.toml"
        path.write_text(textwrap.dedent(body), encoding="utf-8")
        return path

    def test_load_explicit_ticks(self) -> None:
        path = self._write(
            """
            [plot]
            pos_x = 2
            pos_y = 3
            width = 100
            height = 50
            x_range = [0, 10.0]
            y_range = [0.0, 5.0]

            [[x_ticks]]
            value = 5.0
            label = "mid"

            [[y_ticks]]
            value = 1
            """
        )
        config = load_plot_config(path)
        self.assertEqual((config.pos_x, config.pos_y), (2, 3))
        self.assertEqual(config.x_range, (0.0, 10.0))
        self.assertEqual(config.x_ticks, (PlotTick(5.0, "mid"),))
        self.assertEqual(config.y_ticks, (PlotTick(1.0, "1"),))

        plotter = build_plotter(config)
        self.assertEqual(plotter.pixel_x_for_value(5.0), 52)
        self.assertEqual(plotter.x_ticks, (PlotTick(5.0, "mid"),))

    def test_auto_ticks_used_when_no_explicit_list(self) -> None:
        path = self._write(
            """
            [plot]
            width = 64
            height = 32
            x_range = [0.0, 10.0]
            y_range = [-2.0, 2.0]

            [[x_ticks]]
            value = 10.0
            label = "end"

            [auto_ticks]
            x = 5
            y = 5
            """
        )
        plotter = load_plotter(path)
        self.assertEqual([t.label for t in plotter.x_ticks], ["end"])
        self.assertEqual([t.label for t in plotter.y_ticks], ["-2", "-1", "0", "1", "2"])

    def test_missing_fields(self) -> None:
        with self.assertRaises(PlotConfigError):
            parse_plot_config({})
        with self.assertRaises(PlotConfigError):
            parse_plot_config({"plot": {"width": 10, "height": 10, "x_range": [0, 1]}})
        with self.assertRaises(PlotConfigError):
            parse_plot_config({"plot": {"width": 10, "height": 10, "x_range": [0, 1], "y_range": [0, 1]}, "x_ticks": [{"label": "a"}]})

    def test_ill_typed_fields(self) -> None:
        base = {"width": 10, "height": 10, "x_range": [0, 1], "y_range": [0, 1]}
        with self.assertRaises(PlotConfigError):
            parse_plot_config({"plot": {**base, "width": "10"}})
        with self.assertRaises(PlotConfigError):
            parse_plot_config({"plot": {**base, "x_range": [0, 1, 2]}})
        with self.assertRaises(PlotConfigError):
            parse_plot_config({"plot": {**base, "pos_x": True}})
        with self.assertRaises(PlotConfigError):
            parse_plot_config({"plot": base, "y_ticks": [{"value": 0.5, "label": 3}]})
        for count in (0, -3):
            with self.subTest(count=count):
                with self.assertRaises(PlotConfigError):
                    parse_plot_config({"plot": base, "auto_ticks": {"x": count}})

    def test_invalid_toml(self) -> None:
        path = self._write("[plot\nwidth = 1\n")
        with self.assertRaises(PlotConfigError):
            load_plot_config(path)

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_plot_config(Path(tempfile.gettempdir()) / "does-not-exist-axis-plot.toml")

    def test_contract_errors_surface_from_build(self) -> None:
        base = {"width": 10, "height": 10, "x_range": [0, 1], "y_range": [0, 1]}
        with self.assertRaises(InvalidGeometryError):
            build_plotter(parse_plot_config({"plot": {**base, "x_range": [1, 0]}}))
        with self.assertRaises(TickOutOfRangeError):
            build_plotter(parse_plot_config({"plot": base, "x_ticks": [{"value": 2.0}]}))


if __name__ == "__main__":
    unittest.main()
