"""ValueKind StrEnum and the single classification step for input values.

Every value reaching the diff engine is classified exactly once per
recursion entry into one of nine closed kinds.  The rest of the package
branches on the kind instead of repeating ad hoc ``isinstance`` tests.
"""

from __future__ import annotations

import datetime
import decimal
import numbers
from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any, Final

import numpy as np

__all__ = ["ABSENT", "ValueKind", "classify", "is_scalar_kind"]


class _Absent:
    """Marker for a key that is not present, distinct from ``None``."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()


class ValueKind(StrEnum):
    """Enumeration of the value kinds the diff engine distinguishes.

    StrEnum values are the lowercased member names:
    - NULL      -> "null"      : ``None``
    - ABSENT    -> "absent"    : the ``ABSENT`` sentinel
    - OBJECT    -> "object"    : any Mapping (dict and friends)
    - SEQUENCE  -> "sequence"  : list, tuple, numpy.ndarray
    - NUMBER    -> "number"    : real numbers and Decimal, never bool
    - STRING    -> "string"    : str
    - BOOLEAN   -> "boolean"   : bool, numpy.bool_
    - DATE      -> "date"      : datetime, date, numpy.datetime64
    - OPAQUE    -> "opaque"    : any other leaf, compared atomically
    """

    NULL = auto()
    ABSENT = auto()
    OBJECT = auto()
    SEQUENCE = auto()
    NUMBER = auto()
    STRING = auto()
    BOOLEAN = auto()
    DATE = auto()
    OPAQUE = auto()


_SCALAR_KINDS = frozenset(
    {ValueKind.NULL, ValueKind.NUMBER, ValueKind.STRING, ValueKind.BOOLEAN}
)


def classify(value: Any) -> ValueKind:
    """Return the ValueKind of ``value``.

    Dispatch order matters: bool is checked before numbers because bool
    subclasses int, and str is checked before sequences.  Never raises;
    unrecognised values are OPAQUE.
    """
    if value is None:
        return ValueKind.NULL
    if value is ABSENT:
        return ValueKind.ABSENT
    if isinstance(value, (bool, np.bool_)):
        return ValueKind.BOOLEAN
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (numbers.Real, decimal.Decimal)):
        return ValueKind.NUMBER
    if isinstance(value, (datetime.date, np.datetime64)):
        return ValueKind.DATE
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple, np.ndarray)):
        return ValueKind.SEQUENCE
    return ValueKind.OPAQUE


def is_scalar_kind(kind: ValueKind) -> bool:
    """True for the kinds an unordered array comparison may sort."""
    return kind in _SCALAR_KINDS
