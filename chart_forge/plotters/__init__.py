from .line import (
    LineChartLayout,
    LineChartLayoutBuilder,
    line_chart_layout,
    series_from_frame,
)

__all__ = [
    "LineChartLayout",
    "LineChartLayoutBuilder",
    "line_chart_layout",
    "series_from_frame",
]
