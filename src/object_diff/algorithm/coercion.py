"""Type coercion rules for comparing primitives of differing kinds.

Bridges the inconsistencies typical of document stores: numbers stored as
strings, booleans stored as "true"/"false", timestamps stored as ISO-8601
text.  Coercion never bridges structural kinds (objects, sequences) and
never raises: anything unparseable is simply "not equal".

Supported cross-kind pairs (in either argument order):
- number  <-> string   : string parsed as a number
- boolean <-> string   : string must be "true"/"false", case-insensitive
- date    <-> string   : string parsed as an ISO-8601 timestamp
- number  <-> boolean  : boolean taken as 1/0
"""

from __future__ import annotations

import datetime
import decimal
import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from object_diff.tree.nodes import ValueKind, classify

__all__ = [
    "CoercionResult",
    "can_coerce_to_boolean",
    "can_coerce_to_date",
    "can_coerce_to_number",
    "coerce_values",
    "to_instant",
    "values_identical",
]

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.UTC)
_NULLISH = (ValueKind.NULL, ValueKind.ABSENT)


@dataclass(frozen=True, slots=True)
class CoercionResult:
    """Outcome of ``coerce_values``.

    Attributes:
        coerced_a: ``a`` after coercion (unchanged when no rule applied).
        coerced_b: ``b`` after coercion (unchanged when no rule applied).
        are_equal: The equality verdict.
    """

    coerced_a: Any
    coerced_b: Any
    are_equal: bool


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def _parse_number(text: str) -> float | None:
    stripped = text.strip()
    # float() accepts digit separators ("1_000"); stored numbers never use them.
    if not stripped or "_" in stripped:
        return None
    try:
        return float(stripped)
    except ValueError:
        return None


def _parse_boolean(text: str) -> bool | None:
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def to_instant(value: Any) -> datetime.datetime | None:
    """Return ``value`` as a timezone-aware UTC datetime, or None.

    Accepts datetime, date, numpy.datetime64 and ISO-8601 strings.  Naive
    datetimes and bare dates are taken to be UTC.  NaT, unparseable strings
    and instants outside the datetime range yield None.
    """
    if isinstance(value, str):
        try:
            value = datetime.datetime.fromisoformat(value.strip())
        except ValueError:
            return None

    if isinstance(value, np.datetime64):
        if np.isnat(value):
            return None
        try:
            micros = int(value.astype("datetime64[us]").astype(np.int64))
            return _EPOCH + datetime.timedelta(microseconds=micros)
        except (OverflowError, ValueError):
            return None

    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=datetime.UTC)
        try:
            return value.astimezone(datetime.UTC)
        except OverflowError:
            return None

    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time(), datetime.UTC)

    return None


# ---------------------------------------------------------------------------
# Single-value predicates
# ---------------------------------------------------------------------------


def can_coerce_to_number(value: Any) -> bool:
    """True for any number and for strings that parse as finite numbers."""
    kind = classify(value)
    if kind == ValueKind.NUMBER:
        return True
    if kind == ValueKind.STRING:
        parsed = _parse_number(value)
        return parsed is not None and math.isfinite(parsed)
    return False


def can_coerce_to_boolean(value: Any) -> bool:
    """True for booleans and the strings "true"/"false" in any case."""
    kind = classify(value)
    if kind == ValueKind.BOOLEAN:
        return True
    return kind == ValueKind.STRING and _parse_boolean(value) is not None


def can_coerce_to_date(value: Any) -> bool:
    """True for valid dates and strings that parse as ISO-8601 timestamps."""
    kind = classify(value)
    if kind in (ValueKind.DATE, ValueKind.STRING):
        return to_instant(value) is not None
    return False


# ---------------------------------------------------------------------------
# Equality
# ---------------------------------------------------------------------------


def values_identical(a: Any, b: Any, kind_a: ValueKind, kind_b: ValueKind) -> bool:
    """Strict equality: same kind and same value, no coercion.

    Objects and sequences are identical only when they are the same object.
    Dates are identical when they denote the same instant.
    """
    if a is b:
        return True
    if kind_a != kind_b:
        return False
    if kind_a in (ValueKind.OBJECT, ValueKind.SEQUENCE):
        return False
    if kind_a == ValueKind.DATE:
        instant_a = to_instant(a)
        instant_b = to_instant(b)
        if instant_a is None or instant_b is None:
            # numpy still orders datetime64 values beyond the datetime range.
            both_numpy = isinstance(a, np.datetime64) and isinstance(b, np.datetime64)
            return both_numpy and bool(a == b)
        return instant_a == instant_b
    if kind_a == ValueKind.NUMBER:
        return bool(_numeric(a) == _numeric(b))
    return bool(a == b)


def _numeric(value: Any) -> Any:
    # Decimal refuses to compare equal to a float it cannot represent exactly.
    if isinstance(value, decimal.Decimal):
        return float(value)
    return value


def coerce_values(a: Any, b: Any) -> CoercionResult:
    """Decide whether two primitives are equal under the coercion rules.

    Args:
        a: First value.
        b: Second value.

    Returns:
        A ``CoercionResult``; ``are_equal`` is the verdict.  Never raises.
    """
    kind_a = classify(a)
    kind_b = classify(b)

    if kind_a in _NULLISH and kind_b in _NULLISH:
        return CoercionResult(a, b, True)
    if kind_a in _NULLISH or kind_b in _NULLISH:
        return CoercionResult(a, b, False)
    if kind_a == kind_b:
        return CoercionResult(a, b, values_identical(a, b, kind_a, kind_b))

    # Normalise argument order so each rule is written once, then swap back.
    swapped = False
    if kind_b == ValueKind.NUMBER or (
        kind_b == ValueKind.BOOLEAN and kind_a == ValueKind.STRING
    ) or (kind_b == ValueKind.DATE and kind_a == ValueKind.STRING):
        a, b = b, a
        kind_a, kind_b = kind_b, kind_a
        swapped = True

    result = _coerce_ordered(a, b, kind_a, kind_b)
    if swapped:
        return CoercionResult(result.coerced_b, result.coerced_a, result.are_equal)
    return result


def _coerce_ordered(
    a: Any, b: Any, kind_a: ValueKind, kind_b: ValueKind
) -> CoercionResult:
    """Apply the rule for an ordered (kind_a, kind_b) pair."""
    if kind_a == ValueKind.NUMBER and kind_b == ValueKind.STRING:
        parsed = _parse_number(b)
        if parsed is None:
            return CoercionResult(a, b, False)
        return CoercionResult(a, parsed, bool(_numeric(a) == parsed))

    if kind_a == ValueKind.NUMBER and kind_b == ValueKind.BOOLEAN:
        as_int = 1 if b else 0
        return CoercionResult(a, as_int, bool(_numeric(a) == as_int))

    if kind_a == ValueKind.BOOLEAN and kind_b == ValueKind.STRING:
        parsed_bool = _parse_boolean(b)
        if parsed_bool is None:
            return CoercionResult(a, b, False)
        return CoercionResult(a, parsed_bool, bool(a) == parsed_bool)

    if kind_a == ValueKind.DATE and kind_b == ValueKind.STRING:
        instant_a = to_instant(a)
        instant_b = to_instant(b)
        if instant_a is None or instant_b is None:
            return CoercionResult(a, b, False)
        return CoercionResult(instant_a, instant_b, instant_a == instant_b)

    return CoercionResult(a, b, False)
