"""Tests for the type coercion rules.

Covers:
- null/absent handling
- same-kind strict comparison (numbers, strings, dates, identity for
  containers)
- number <-> string, boolean <-> string, date <-> string, number <-> boolean
- symmetry of every supported pair
- structural kinds are never bridged
- single-value predicates (can_coerce_to_*)
- to_instant normalisation
"""

from __future__ import annotations

import datetime
import decimal

import numpy as np
import pytest

from object_diff.algorithm.coercion import (
    can_coerce_to_boolean,
    can_coerce_to_date,
    can_coerce_to_number,
    coerce_values,
    to_instant,
)
from object_diff.tree.nodes import ABSENT

UTC = datetime.UTC

# ---------------------------------------------------------------------------
# Null and absent
# ---------------------------------------------------------------------------


class TestNullish:
    def test_both_none_equal(self) -> None:
        assert coerce_values(None, None).are_equal

    def test_none_and_absent_equal(self) -> None:
        assert coerce_values(None, ABSENT).are_equal

    def test_one_none_not_equal(self) -> None:
        assert not coerce_values(None, 0).are_equal
        assert not coerce_values("", None).are_equal

    def test_absent_and_false_not_equal(self) -> None:
        assert not coerce_values(ABSENT, False).are_equal


# ---------------------------------------------------------------------------
# Same kind
# ---------------------------------------------------------------------------


class TestSameKind:
    def test_equal_numbers(self) -> None:
        assert coerce_values(1, 1.0).are_equal

    def test_different_strings(self) -> None:
        assert not coerce_values("a", "A").are_equal

    def test_decimal_and_float(self) -> None:
        assert coerce_values(decimal.Decimal("0.5"), 0.5).are_equal

    def test_numpy_integer_and_int(self) -> None:
        assert coerce_values(np.int64(7), 7).are_equal

    def test_same_instant_dates(self) -> None:
        a = datetime.datetime(2023, 1, 1, tzinfo=UTC)
        b = datetime.datetime(2023, 1, 1, 2, tzinfo=datetime.timezone(datetime.timedelta(hours=2)))
        assert coerce_values(a, b).are_equal

    def test_distinct_equal_dicts_not_equal(self) -> None:
        assert not coerce_values({"a": 1}, {"a": 1}).are_equal

    def test_same_dict_object_equal(self) -> None:
        value = {"a": 1}
        assert coerce_values(value, value).are_equal


# ---------------------------------------------------------------------------
# Cross-kind rules
# ---------------------------------------------------------------------------


class TestNumberString:
    def test_integer_string(self) -> None:
        result = coerce_values(30, "30")
        assert result.are_equal
        assert result.coerced_b == 30.0

    def test_float_string(self) -> None:
        assert coerce_values(1.5, "1.50").are_equal

    def test_exponent_string(self) -> None:
        assert coerce_values(1000, "1e3").are_equal

    def test_padded_string(self) -> None:
        assert coerce_values(5, " 5 ").are_equal

    def test_different_value(self) -> None:
        assert not coerce_values(30, "31").are_equal

    def test_non_numeric_string(self) -> None:
        assert not coerce_values(30, "thirty").are_equal

    def test_blank_string_is_not_zero(self) -> None:
        assert not coerce_values(0, "").are_equal
        assert not coerce_values(0, "   ").are_equal

    def test_digit_separator_rejected(self) -> None:
        assert not coerce_values(1000, "1_000").are_equal

    def test_reversed_order_swaps_coerced_values(self) -> None:
        result = coerce_values("30", 30)
        assert result.are_equal
        assert result.coerced_a == 30.0
        assert result.coerced_b == 30


class TestBooleanString:
    @pytest.mark.parametrize("text", ["true", "TRUE", "True"])
    def test_true_strings(self, text: str) -> None:
        assert coerce_values(True, text).are_equal

    def test_false_string(self) -> None:
        assert coerce_values(False, "false").are_equal

    def test_mismatch(self) -> None:
        assert not coerce_values(True, "false").are_equal

    def test_other_strings_not_equal(self) -> None:
        assert not coerce_values(True, "yes").are_equal
        assert not coerce_values(True, "1").are_equal

    def test_numpy_bool(self) -> None:
        assert coerce_values(np.bool_(True), "true").are_equal


class TestDateString:
    def test_date_and_iso_timestamp(self) -> None:
        assert coerce_values(datetime.date(2023, 1, 1), "2023-01-01T00:00:00.000Z").are_equal

    def test_aware_datetime_and_offset_string(self) -> None:
        value = datetime.datetime(2023, 6, 1, 12, 0, tzinfo=UTC)
        assert coerce_values(value, "2023-06-01T14:00:00+02:00").are_equal

    def test_naive_datetime_is_utc(self) -> None:
        value = datetime.datetime(2023, 6, 1, 12, 0)
        assert coerce_values(value, "2023-06-01T12:00:00Z").are_equal

    def test_different_instant(self) -> None:
        value = datetime.datetime(2023, 6, 1, 12, 0, tzinfo=UTC)
        assert not coerce_values(value, "2023-06-01T12:00:01Z").are_equal

    def test_unparseable_string(self) -> None:
        assert not coerce_values(datetime.date(2023, 1, 1), "last tuesday").are_equal

    def test_numpy_datetime64(self) -> None:
        value = np.datetime64("2023-01-01T00:00:00")
        assert coerce_values(value, "2023-01-01").are_equal

    def test_numpy_nat_never_equal(self) -> None:
        assert not coerce_values(np.datetime64("NaT"), "2023-01-01").are_equal

    def test_offset_string_below_datetime_range(self) -> None:
        value = datetime.date(2024, 1, 1)
        assert not coerce_values(value, "0001-01-01T00:00:00+05:00").are_equal

    def test_numpy_beyond_datetime_range_against_string(self) -> None:
        assert not coerce_values(np.datetime64("20000-01-01"), "2023-01-01").are_equal


class TestNumberBoolean:
    def test_one_and_true(self) -> None:
        assert coerce_values(1, True).are_equal

    def test_zero_and_false(self) -> None:
        assert coerce_values(0.0, False).are_equal

    def test_two_and_true(self) -> None:
        assert not coerce_values(2, True).are_equal


class TestSymmetry:
    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (30, "30"),
            (30, "31"),
            (True, "true"),
            (False, "TRUE"),
            (datetime.date(2023, 1, 1), "2023-01-01"),
            (datetime.date(2023, 1, 1), "2023-01-02"),
            (1, True),
            (0, True),
        ],
    )
    def test_pair_is_symmetric(self, a: object, b: object) -> None:
        assert coerce_values(a, b).are_equal == coerce_values(b, a).are_equal


class TestStructuralNeverBridged:
    @pytest.mark.parametrize(
        ("a", "b"),
        [
            ({"a": 1}, "{'a': 1}"),
            ([1], "1"),
            ([1], 1),
            ({}, False),
            (datetime.date(2023, 1, 1), 1672531200),
        ],
    )
    def test_not_equal(self, a: object, b: object) -> None:
        assert not coerce_values(a, b).are_equal


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


class TestPredicates:
    def test_can_coerce_to_number(self) -> None:
        assert can_coerce_to_number(3)
        assert can_coerce_to_number("3.5")
        assert can_coerce_to_number(float("inf"))
        assert can_coerce_to_number(10**400)
        assert not can_coerce_to_number("inf")
        assert not can_coerce_to_number("abc")
        assert not can_coerce_to_number(True)

    def test_can_coerce_to_boolean(self) -> None:
        assert can_coerce_to_boolean(False)
        assert can_coerce_to_boolean("False")
        assert not can_coerce_to_boolean("no")
        assert not can_coerce_to_boolean(0)

    def test_can_coerce_to_date(self) -> None:
        assert can_coerce_to_date(datetime.datetime(2023, 1, 1))
        assert can_coerce_to_date("2023-01-01T10:00:00Z")
        assert not can_coerce_to_date("tomorrow")
        assert not can_coerce_to_date(1672531200)


class TestToInstant:
    def test_date_is_midnight_utc(self) -> None:
        assert to_instant(datetime.date(2023, 1, 1)) == datetime.datetime(
            2023, 1, 1, tzinfo=UTC
        )

    def test_result_is_aware(self) -> None:
        instant = to_instant("2023-01-01T10:00:00")
        assert instant is not None
        assert instant.tzinfo is not None

    def test_non_date_is_none(self) -> None:
        assert to_instant(42) is None

    def test_offset_overflow_is_none(self) -> None:
        assert to_instant("0001-01-01T00:00:00+05:00") is None
        assert to_instant("9999-12-31T23:59:59-05:00") is None

    def test_numpy_beyond_datetime_range_is_none(self) -> None:
        assert to_instant(np.datetime64("20000-01-01")) is None


class TestOutOfRangeNumpyDates:
    def test_equal_values_are_identical(self) -> None:
        assert coerce_values(
            np.datetime64("20000-01-01"), np.datetime64("20000-01-01")
        ).are_equal

    def test_different_values_are_not(self) -> None:
        assert not coerce_values(
            np.datetime64("20000-01-01"), np.datetime64("20001-01-01")
        ).are_equal

    def test_against_in_range_datetime(self) -> None:
        assert not coerce_values(
            np.datetime64("20000-01-01"), datetime.datetime(2000, 1, 1)
        ).are_equal
