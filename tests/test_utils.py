"""Unit tests for series flattening and domain helpers."""

import logging

from fractions import Fraction

import numpy as np
import pandas as pd
import pytest

from chart_forge.types import LineChartSeries
from chart_forge.utils import (
    get_domain,
    get_series_data,
    numeric_values,
    verify_if_float_or_integer,
)


def test_get_series_data_from_mapping_and_object():
    assert get_series_data({"data": [1, 2]}) == [1, 2]
    assert get_series_data(LineChartSeries(data=(3,))) == (3,)


def test_get_series_data_accepts_arrays():
    data = np.array([1.0, 2.0])
    assert get_series_data({"data": data}) is data
    series = pd.Series([1, 2])
    assert get_series_data({"data": series}) is series


@pytest.mark.parametrize("serie", [{"data": "12"}, {"data": 5}, {}, object()])
def test_get_series_data_rejects_malformed(serie):
    assert get_series_data(serie) is None


def test_numeric_values_flattens_finite_points():
    series = [{"data": [1, None, 2.5]}, {"data": np.array([np.nan, -4.0])}, {"data": 7}]
    assert numeric_values(series).tolist() == [1, 2.5, -4.0]


def test_numeric_values_logs_skipped_series(caplog):
    with caplog.at_level(logging.DEBUG, logger="chart_forge"):
        numeric_values([{"data": [1]}, {"data": "oops"}])
    assert "skipping series 1" in caplog.text


def test_get_domain():
    series = [{"data": [4, 9]}, {"data": [-1]}]
    assert get_domain(series, "min") == -1
    assert get_domain(series, "max") == 9


def test_get_domain_returns_python_scalars():
    value = get_domain([{"data": np.array([1, 2, 3])}], "max")
    assert type(value) is int


def test_get_domain_empty():
    assert get_domain([], "min") == 0
    assert get_domain([{"data": []}], "max") == 0


def test_get_domain_unknown_kind():
    with pytest.raises(ValueError) as exc_info:
        get_domain([{"data": [1]}], "mean")
    assert "mean" in str(exc_info.value)


def test_get_domain_big_integers_and_fractions():
    assert get_domain([{"data": [-1, 2**70]}], "max") == 2**70
    assert get_domain([{"data": [Fraction(1, 3), Fraction(2, 3)]}], "min") == Fraction(1, 3)


def test_verify_if_float_or_integer_huge_integer():
    assert verify_if_float_or_integer(10**400) is True
