"""Line and area chart layout for Chart Forge."""

from __future__ import annotations

import altair as alt
import numpy as np
import pandas as pd
import typing as t

from dataclasses import dataclass

from .. import maths
from ..constants import DEFAULT_GRID_LINES
from ..logging import get_logger
from ..types import ContainerSize, LineChartSeries, MinMaxValues
from ..utils import get_series_data, verify_if_float_or_integer

logger = get_logger(__name__)


def series_from_frame(frame: pd.DataFrame) -> t.List[LineChartSeries]:
    """Converts a wide `pd.DataFrame` into one series per column.

    Parameters
    ----------
    frame : pd.DataFrame
        One column per series, one row per category.

    Returns
    -------
    t.List[LineChartSeries]
        The series labelled by column name. Missing values become `None`.
    """
    return [
        LineChartSeries(
            data=[None if pd.isna(v) else v for v in frame[col].tolist()],
            label=str(col),
        )
        for col in frame.columns
    ]


@dataclass(frozen=True)
class LineChartLayout:
    container: ContainerSize
    min_max_values: MinMaxValues
    series_length: int
    side_spacing: int
    axis_values: t.Tuple[float, ...]


class LineChartLayoutBuilder:

    def __init__(
        self,
        series: t.Sequence[t.Any] | pd.DataFrame,
        width: float = 600,
        height: float = 400,
        grid_lines: int = DEFAULT_GRID_LINES,
        accept_negative_values: bool = True,
    ) -> None:
        if isinstance(series, pd.DataFrame):
            series = series_from_frame(series)

        self.series = list(series)
        self.width = width
        self.height = height
        self.grid_lines = grid_lines
        self.accept_negative_values = accept_negative_values

        self.container_ = ContainerSize(svg_width=width, svg_height=height)
        self.min_max_values_ = maths.calculate_min_and_max_values(
            self.series, accept_negative_values
        )
        self.series_length_ = maths.series_greater_length(self.series)
        self.side_spacing_ = maths.calculate_side_spacing(width, self.series_length_)
        self.axis_values_ = maths.range(self.min_max_values_, grid_lines)

        logger.debug(
            "laid out %d series: domain=%s, categories=%d, side_spacing=%d",
            len(self.series),
            self.min_max_values_,
            self.series_length_,
            self.side_spacing_,
        )

    def _label(self, i: int) -> str:
        label = getattr(self.series[i], "label", None)
        if label is None and isinstance(self.series[i], t.Mapping):
            label = self.series[i].get("label")
        return f"series {i}" if label is None else str(label)

    def point_ratios(self) -> t.List[t.List[float | None]]:
        """Position of every point within the domain, `None` for gaps."""
        ratios = []
        for serie in self.series:
            data = get_series_data(serie)
            if data is None:
                ratios.append([])
                continue
            ratios.append(
                [
                    maths.get_serie_percentage(self.min_max_values_, v)
                    if verify_if_float_or_integer(v)
                    else None
                    for v in data
                ]
            )
        return ratios

    def to_frame(self) -> pd.DataFrame:
        """Long-format frame with one row per point."""
        rows = []
        for i, ratios in enumerate(self.point_ratios()):
            if not ratios:
                continue
            data = get_series_data(self.series[i])
            for category, (value, ratio) in enumerate(zip(data, ratios)):
                rows.append(
                    {
                        "series": self._label(i),
                        "category": category,
                        "value": value if ratio is not None else np.nan,
                        "ratio": np.nan if ratio is None else ratio,
                    }
                )
        return pd.DataFrame(rows, columns=["series", "category", "value", "ratio"])

    def x_scale(self) -> alt.Scale:
        """Category scale, padded by the side spacing on both ends."""
        return alt.Scale(
            domain=(0, max(self.series_length_ - 1, 0)),
            padding=self.side_spacing_,
            nice=False,
            zero=False,
        )

    def y_scale(self) -> alt.Scale:
        domain = (self.min_max_values_.min_value, self.min_max_values_.max_value)
        return alt.Scale(domain=domain, nice=False, zero=False)

    def y_axis(self) -> alt.Axis:
        """Value axis with one label and one gridline per tick."""
        return alt.Axis(values=list(self.axis_values_), grid=True)

    def layout(self) -> LineChartLayout:
        return LineChartLayout(
            container=self.container_,
            min_max_values=self.min_max_values_,
            series_length=self.series_length_,
            side_spacing=self.side_spacing_,
            axis_values=tuple(self.axis_values_),
        )


def line_chart_layout(
    series: t.Sequence[t.Any] | pd.DataFrame,
    width: float = 600,
    height: float = 400,
    grid_lines: int = DEFAULT_GRID_LINES,
    accept_negative_values: bool = True,
) -> LineChartLayout:
    """Computes every layout value of a line or area chart at once."""
    builder = LineChartLayoutBuilder(
        series=series,
        width=width,
        height=height,
        grid_lines=grid_lines,
        accept_negative_values=accept_negative_values,
    )

    return builder.layout()
