"""Scalar statistics used to lay out the plotting area of line and area charts.

Every function is pure: inputs are never mutated and arithmetic edge cases
(empty series, zero ranges, non-numeric points) resolve to 0 or to a safe
default instead of raising.
"""

from __future__ import annotations

import math
import numbers
import typing as t

from fractions import Fraction

from .constants import AXIS_X_LABEL_AREA, CHART_PADDING, DEFAULT_GRID_LINES
from .logging import get_logger
from .types import MinMaxValues
from .utils import get_domain, iter_series_data, verify_if_float_or_integer

logger = get_logger(__name__)

__all__ = [
    "calculate_min_and_max_values",
    "calculate_side_spacing",
    "series_greater_length",
    "get_serie_percentage",
    "get_grid_line_area",
    "range",
    "verify_if_float_or_integer",
]


def calculate_min_and_max_values(
    series: t.Iterable[t.Any], accept_negative_values: bool = True
) -> MinMaxValues:
    """Computes the domain spanned by all the series.

    Parameters
    ----------
    series : t.Iterable[t.Any]
        The chart series.
    accept_negative_values : bool, optional
        If False, a negative minimum is clamped to 0, by default True.

    Returns
    -------
    MinMaxValues
        The global minimum and maximum, 0 for an end with no numeric point.
    """
    series = list(series)
    min_value = get_domain(series, "min")
    max_value = get_domain(series, "max")

    if not accept_negative_values and min_value < 0:
        logger.debug("clamping negative minimum %s to 0", min_value)
        min_value = 0

    return MinMaxValues(min_value=min_value, max_value=max_value)


def calculate_side_spacing(container_width: float, series_length: int) -> int:
    """Computes the space between the axis labels and the first plotted category.

    Half the width of one category, never wider than `CHART_PADDING`.

    Parameters
    ----------
    container_width : float
        Width of the SVG container.
    series_length : int
        Number of categories, i.e. the length of the longest series.

    Returns
    -------
    int
        The side spacing in pixels.
    """
    if not series_length or not verify_if_float_or_integer(container_width):
        return CHART_PADDING

    half_category_width = math.trunc(
        (container_width - AXIS_X_LABEL_AREA) / series_length / 2
    )
    return min(half_category_width, CHART_PADDING)


def series_greater_length(series: t.Iterable[t.Any]) -> int:
    """Returns the length of the longest series, 0 if there is none."""
    return max((len(data) for data in iter_series_data(series)), default=0)


def get_serie_percentage(min_max_values: MinMaxValues, value: float) -> float:
    """Returns the position of `value` within the domain as a fraction.

    The minimum maps to 0 and the maximum to 1, so for a domain of
    (-10, 0) the value -8 maps to 0.2. A zero-width domain or a non-numeric
    value maps to 0.
    """
    min_value = min_max_values.min_value
    max_value = min_max_values.max_value

    if not all(verify_if_float_or_integer(v) for v in (value, min_value, max_value)):
        return 0
    span = min_max_values.span
    if span == 0:
        return 0

    return (value - min_value) / span


def _to_fraction(value: float) -> Fraction:
    if isinstance(value, numbers.Integral):
        return Fraction(int(value))
    if isinstance(value, numbers.Rational):
        return Fraction(value.numerator, value.denominator)
    # Parse the shortest repr so 0.1 becomes 1/10, not its binary expansion.
    return Fraction(str(float(value)))


def _grid_line_step(min_max_values: MinMaxValues, grid_lines: float) -> Fraction:
    percentage_value = Fraction(100) / (_to_fraction(grid_lines) - 1)
    span = _to_fraction(min_max_values.max_value) - _to_fraction(min_max_values.min_value)
    result = percentage_value * span / 100

    # A zero step would never reach the maximum.
    return result if result != 0 else Fraction(1)


def get_grid_line_area(
    min_max_values: MinMaxValues, grid_lines: float = DEFAULT_GRID_LINES
) -> float:
    """Returns the value step between two consecutive gridlines.

    At most one gridline leaves no interval to divide, and a domain with an
    infinite end has no finite step: the step is then infinite.
    """
    if not verify_if_float_or_integer(grid_lines) or grid_lines <= 1:
        return math.inf
    if not (
        verify_if_float_or_integer(min_max_values.min_value)
        and verify_if_float_or_integer(min_max_values.max_value)
    ):
        return math.inf
    return float(_grid_line_step(min_max_values, grid_lines))


def range(
    min_max_values: MinMaxValues, grid_lines: float = DEFAULT_GRID_LINES
) -> t.List[float]:
    """Computes the value axis labels, one per gridline.

    Ticks run from the minimum up to the maximum inclusive. They are
    accumulated as exact fractions and only converted to float on output, so
    a domain of (0, 0.3) with 4 gridlines yields ``[0.0, 0.1, 0.2, 0.3]``.

    Parameters
    ----------
    min_max_values : MinMaxValues
        The chart domain.
    grid_lines : float, optional
        Number of horizontal gridlines, by default 5.

    Returns
    -------
    t.List[float]
        The tick values in ascending order; empty if the domain is not finite
        or is reversed.
    """
    min_value = min_max_values.min_value
    max_value = min_max_values.max_value

    if not (verify_if_float_or_integer(min_value) and verify_if_float_or_integer(max_value)):
        return []
    if min_value > max_value:
        return []
    if not verify_if_float_or_integer(grid_lines) or grid_lines <= 1:
        return [float(min_value)]

    step = _grid_line_step(min_max_values, grid_lines)
    stop = _to_fraction(max_value)

    result = []
    index = _to_fraction(min_value)
    while index <= stop:
        result.append(float(index))
        index += step

    return result
