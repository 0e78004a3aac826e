"""Line charts of value series saved to a file."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from pathlib import Path

from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter, MaxNLocator

from tds.util import round_places

_COLORS = [
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 0, 255),
    (0, 255, 255),
    (192, 0, 0),
    (0, 192, 0),
    (0, 0, 192),
    (0, 192, 192),
    (192, 192, 0),
    (192, 0, 192),
    (128, 128, 0),
    (0, 0, 0),
]

_INCH_PER_MM = 1 / 25.4
_X_LABEL_ROTATION = 0.7  # radians


def _log(value: float) -> float:
    if value > 0:
        return math.log(value)
    if value == 0:
        return -math.inf
    return math.nan


def _color(index: int) -> tuple[float, float, float]:
    red, green, blue = _COLORS[index % len(_COLORS)]
    return red / 255, green / 255, blue / 255


def plot(
    title: str,
    titles: Sequence[str],
    x_ticks: Sequence[str] | None,
    plot_data: Mapping[str, Sequence[float]],
    pdf_file: str | Path,
    use_log_scale: bool = False,
) -> None:
    """Draw one line per title on an A4 landscape page and save it.

    With use_log_scale the natural log of each value is drawn while the
    axis labels still show the original values.
    """
    if len(titles) != len(plot_data):
        raise ValueError("titles and plot data differ in length")

    series = []
    for name in titles:
        values = list(plot_data.get(name, ()))
        if x_ticks is not None and len(values) != len(x_ticks):
            raise ValueError(f"series {name!r} does not match the x ticks")
        series.append((name, values))

    fig = Figure(figsize=(297 * _INCH_PER_MM, 210 * _INCH_PER_MM))
    ax = fig.add_subplot()
    ax.set_title(title)
    ax.set_xlabel("")
    ax.set_ylabel("")

    def y_label(value: float, _pos: int) -> str:
        shown = math.exp(value) if use_log_scale else value
        return f"{shown:.2f}"

    ax.yaxis.set_major_formatter(FuncFormatter(y_label))

    if x_ticks is not None:
        labels = list(x_ticks)

        def x_label(value: float, _pos: int) -> str:
            index = int(round_places(value, 0))
            return labels[index] if 0 <= index < len(labels) else ""

        ax.xaxis.set_major_locator(MaxNLocator(integer=True))
        ax.xaxis.set_major_formatter(FuncFormatter(x_label))
        ax.tick_params(axis="x", labelrotation=math.degrees(_X_LABEL_ROTATION))
        for label in ax.get_xticklabels():
            label.set_horizontalalignment("right")
            label.set_verticalalignment("center")

    for index, (name, values) in enumerate(series):
        ys = [_log(v) for v in values] if use_log_scale else values
        ax.plot(range(len(ys)), ys, color=_color(index), linewidth=1, label=name)

    if series:
        ax.legend()
    fig.savefig(pdf_file)