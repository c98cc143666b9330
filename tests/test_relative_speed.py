"""Tests for relative speed, unit resolution and row aggregation."""

import math

import pytest

from conftest import make_result
from cmdbench.errors import EmptySampleSetError, UndefinedRatioError
from cmdbench.eval.relative_speed import compute_relative_speed, fastest_index
from cmdbench.report.aggregate import build_report_rows, sort_rows
from cmdbench.report.formatting import format_absolute, format_ratio
from cmdbench.units import SortOrder, Unit, resolve_unit


def test_baseline_is_fastest_and_unique(results_auto_s):
    speeds = compute_relative_speed(results_auto_s)

    assert [s.is_baseline for s in speeds] == [False, True]
    assert speeds[1].ratio == 1.0
    assert speeds[1].ratio_stddev == 0.0


def test_ratio_uncertainty_propagation(results_auto_ms):
    speeds = compute_relative_speed(results_auto_ms)
    base = results_auto_ms[0].measurements.wall_clock
    other = results_auto_ms[1].measurements.wall_clock

    ratio = other.mean / base.mean
    expected = ratio * math.sqrt((other.stddev / other.mean) ** 2 + (base.stddev / base.mean) ** 2)

    assert speeds[1].ratio == pytest.approx(ratio)
    assert speeds[1].ratio_stddev == pytest.approx(expected)
    assert format_ratio(speeds[1].ratio) == "27.27"
    assert format_ratio(speeds[1].ratio_stddev) == "11.21"


def test_ties_go_to_first_result():
    results = [
        make_result("a", [0.25, 0.75]),
        make_result("b", [0.5, 0.5]),
        make_result("c", [0.125, 0.875]),
    ]

    assert fastest_index(results) == 0
    assert [s.is_baseline for s in compute_relative_speed(results)] == [True, False, False]


def test_zero_mean_is_undefined():
    results = [make_result("a", [0.0, 0.0]), make_result("b", [0.1])]

    with pytest.raises(UndefinedRatioError, match="'a'"):
        compute_relative_speed(results)


def test_resolve_unit():
    assert resolve_unit(None, 0.11) is Unit.MILLISECOND
    assert resolve_unit(None, 1.0) is Unit.SECOND
    assert resolve_unit(None, 2.2) is Unit.SECOND
    assert resolve_unit(Unit.MICROSECOND, 2.2) is Unit.MICROSECOND


def test_unit_and_sort_order_names():
    assert Unit.from_name("ms") is Unit.MILLISECOND
    assert Unit.from_name("Second") is Unit.SECOND
    assert Unit.from_name("us") is Unit.MICROSECOND
    assert SortOrder.from_name("mean_time") is SortOrder.MEAN_TIME
    with pytest.raises(ValueError):
        Unit.from_name("minutes")
    with pytest.raises(ValueError):
        SortOrder.from_name("name")


def test_rows_identical_across_sort_orders(results_auto_s):
    by_command, unit_a = build_report_rows(results_auto_s, None, SortOrder.COMMAND)
    by_mean, unit_b = build_report_rows(results_auto_s, None, SortOrder.MEAN_TIME)

    assert unit_a is unit_b is Unit.SECOND
    assert [r.command for r in by_mean] == ["sleep 0.1", "sleep 2"]
    assert sorted(by_command, key=lambda r: r.command) == sorted(by_mean, key=lambda r: r.command)
    assert sum(r.relative.is_baseline for r in by_mean) == 1


def test_sort_rows_is_stable():
    results = [
        make_result("first", [0.2]),
        make_result("fast", [0.1]),
        make_result("second", [0.2]),
    ]
    rows, _ = build_report_rows(results)

    assert [r.command for r in sort_rows(rows, SortOrder.MEAN_TIME)] == ["fast", "first", "second"]
    assert [r.command for r in sort_rows(rows, SortOrder.COMMAND)] == ["first", "fast", "second"]


def test_empty_inputs_raise():
    with pytest.raises(EmptySampleSetError):
        build_report_rows([])
    with pytest.raises(EmptySampleSetError, match="empty"):
        build_report_rows([make_result("ok", [0.1]), make_result("empty", [])])


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, "0.000"),
        (9.9994, "9.999"),
        (10.0, "10.0"),
        (110.00000000000001, "110.0"),
        (26.457513110645905, "26.5"),
        (12345.67, "12345.7"),
    ],
)
def test_format_absolute(value, expected):
    assert format_absolute(value) == expected


def test_format_ratio():
    assert format_ratio(1.0) == "1.00"
    assert format_ratio(1234.5678) == "1234.57"


def test_rows_use_quantity_unit_conversion(results_auto_ms):
    rows, unit = build_report_rows(results_auto_ms, Unit.MICROSECOND)

    assert unit is Unit.MICROSECOND
    assert rows[0].min == pytest.approx(90000.0)
    assert rows[1].max == pytest.approx(4000000.0)
