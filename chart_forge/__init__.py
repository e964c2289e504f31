from .maths import (
    calculate_min_and_max_values,
    calculate_side_spacing,
    get_serie_percentage,
    series_greater_length,
    verify_if_float_or_integer,
)
from .plotters import (
    LineChartLayout,
    LineChartLayoutBuilder,
    line_chart_layout,
    series_from_frame,
)
from .types import ContainerSize, LineChartSeries, MinMaxValues

__all__ = [
    "ContainerSize",
    "LineChartLayout",
    "LineChartLayoutBuilder",
    "LineChartSeries",
    "MinMaxValues",
    "calculate_min_and_max_values",
    "calculate_side_spacing",
    "get_serie_percentage",
    "line_chart_layout",
    "series_from_frame",
    "series_greater_length",
    "verify_if_float_or_integer",
]
