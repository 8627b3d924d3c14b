from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import tomllib
from typing import Any

from axis_plot.errors import PlotConfigError
from axis_plot.plotter import AxisPlotter
from axis_plot.ticks import nice_ticks
from axis_plot.types import PlotTick

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlotConfig:
    pos_x: int
    pos_y: int
    width: int
    height: int
    x_range: tuple[float, float]
    y_range: tuple[float, float]
    x_ticks: tuple[PlotTick, ...] = ()
    y_ticks: tuple[PlotTick, ...] = ()
    auto_x_ticks: int | None = None
    auto_y_ticks: int | None = None


def load_plot_config(path: str | Path) -> PlotConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"plot config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise PlotConfigError(f"invalid TOML in {config_path}: {exc}") from exc
    config = parse_plot_config(raw)
    LOGGER.debug("loaded plot config from %s", config_path)
    return config


def parse_plot_config(raw: dict[str, Any]) -> PlotConfig:
    plot = raw.get("plot")
    if not isinstance(plot, dict):
        raise PlotConfigError("config missing required table: [plot]")
    try:
        width = _coerce_int(plot["width"], "plot.width")
        height = _coerce_int(plot["height"], "plot.height")
        x_range = _coerce_range(plot["x_range"], "plot.x_range")
        y_range = _coerce_range(plot["y_range"], "plot.y_range")
    except KeyError as exc:
        raise PlotConfigError(f"config missing required field: plot.{exc.args[0]}") from exc

    auto = raw.get("auto_ticks", {})
    if not isinstance(auto, dict):
        raise PlotConfigError("auto_ticks must be a table")
    return PlotConfig(
        pos_x=_coerce_int(plot.get("pos_x", 0), "plot.pos_x"),
        pos_y=_coerce_int(plot.get("pos_y", 0), "plot.pos_y"),
        width=width,
        height=height,
        x_range=x_range,
        y_range=y_range,
        x_ticks=_coerce_ticks(raw.get("x_ticks", []), "x_ticks"),
        y_ticks=_coerce_ticks(raw.get("y_ticks", []), "y_ticks"),
        auto_x_ticks=_coerce_tick_count(auto.get("x"), "auto_ticks.x"),
        auto_y_ticks=_coerce_tick_count(auto.get("y"), "auto_ticks.y"),
    )


def build_plotter(config: PlotConfig) -> AxisPlotter:
    plotter = AxisPlotter(
        config.pos_x,
        config.pos_y,
        config.width,
        config.height,
        config.x_range[0],
        config.x_range[1],
        config.y_range[0],
        config.y_range[1],
    )
    if config.x_ticks:
        plotter.set_x_ticks(config.x_ticks)
    elif config.auto_x_ticks is not None:
        plotter.set_x_ticks(nice_ticks(config.x_range[0], config.x_range[1], config.auto_x_ticks))
    if config.y_ticks:
        plotter.set_y_ticks(config.y_ticks)
    elif config.auto_y_ticks is not None:
        plotter.set_y_ticks(nice_ticks(config.y_range[0], config.y_range[1], config.auto_y_ticks))
    return plotter


def load_plotter(path: str | Path) -> AxisPlotter:
    return build_plotter(load_plot_config(path))


def _coerce_int(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise PlotConfigError(f"{field} must be an integer")
    return value


def _coerce_tick_count(value: Any, field: str) -> int | None:
    if value is None:
        return None
    count = _coerce_int(value, field)
    if count <= 0:
        raise PlotConfigError(f"{field} must be > 0")
    return count


def _coerce_float(value: Any, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PlotConfigError(f"{field} must be a number")
    return float(value)


def _coerce_range(value: Any, field: str) -> tuple[float, float]:
    if not isinstance(value, list) or len(value) != 2:
        raise PlotConfigError(f"{field} must be a [min, max] array")
    return (_coerce_float(value[0], f"{field}[0]"), _coerce_float(value[1], f"{field}[1]"))


def _coerce_ticks(value: Any, field: str) -> tuple[PlotTick, ...]:
    if not isinstance(value, list):
        raise PlotConfigError(f"{field} must be an array of tables")
    out: list[PlotTick] = []
    for i, item in enumerate(value):
        if not isinstance(item, dict):
            raise PlotConfigError(f"{field}[{i}] must be a table")
        if "value" not in item:
            raise PlotConfigError(f"{field}[{i}] missing required field: value")
        label = item.get("label")
        if label is None:
            label = str(item["value"])
        elif not isinstance(label, str):
            raise PlotConfigError(f"{field}[{i}].label must be a string")
        out.append(PlotTick(value=_coerce_float(item["value"], f"{field}[{i}].value"), label=label))
    return tuple(out)
