"""General numeric utilities for Chart Forge."""

from __future__ import annotations

import math
import numbers
import typing as t

import numpy as np
import pandas as pd

from .logging import get_logger

logger = get_logger(__name__)

_EXTREMA: t.Dict[str, t.Callable[[np.ndarray], t.Any]] = {"min": np.min, "max": np.max}


def verify_if_float_or_integer(value: t.Any) -> bool:
    """Returns True if `value` is a finite real number that is not a boolean."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def get_series_data(serie: t.Any) -> t.Sequence[t.Any] | None:
    """Returns the `data` of a series, or None if it is missing or not a sequence.

    A series may be a mapping with a ``"data"`` key or any object exposing a
    ``data`` attribute.
    """
    if isinstance(serie, t.Mapping):
        data = serie.get("data")
    else:
        data = getattr(serie, "data", None)

    if isinstance(data, (list, tuple, np.ndarray, pd.Series)):
        return data
    return None


def iter_series_data(series: t.Iterable[t.Any]) -> t.Iterator[t.Sequence[t.Any]]:
    """Yields the data of every well-formed series, skipping the rest."""
    for i, serie in enumerate(series):
        data = get_series_data(serie)
        if data is None:
            logger.debug("skipping series %d: data is not a sequence", i)
            continue
        yield data


def numeric_values(series: t.Iterable[t.Any]) -> np.ndarray:
    """Flattens the finite numeric points of all series into one array.

    Parameters
    ----------
    series : t.Iterable[t.Any]
        The series to flatten.

    Returns
    -------
    np.ndarray
        A one dimensional array, empty if no series carries a numeric point.
    """
    values = [
        value
        for data in iter_series_data(series)
        for value in data
        if verify_if_float_or_integer(value)
    ]
    return np.asarray(values)


def get_domain(series: t.Iterable[t.Any], kind: str) -> float:
    """Computes one end of the domain spanned by a set of series.

    Parameters
    ----------
    series : t.Iterable[t.Any]
        The series to compute the domain for.
    kind : str
        Either "min" or "max".

    Returns
    -------
    float
        The smallest or largest numeric point, or 0 if there is none.
    """
    try:
        extremum = _EXTREMA[kind]
    except KeyError:
        raise ValueError(f"kind must be 'min' or 'max', got {kind!r}") from None

    values = numeric_values(series)
    if values.size == 0:
        return 0
    result = extremum(values)
    # Object arrays (ints beyond int64, Fractions) yield plain Python scalars.
    return result.item() if isinstance(result, np.generic) else result
