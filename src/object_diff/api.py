"""Public API functions for object-diff.

This module provides the two user-facing functions: diff and is_equivalent.
Each call resolves a fresh DiffOptions and creates a fresh DiffEngine to
guarantee zero global state shared between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from object_diff.algorithm.config import DiffOptions, resolve_options
from object_diff.engine import DiffEngine
from object_diff.result import DiffResult

__all__ = ["diff", "is_equivalent"]


def diff(
    value_a: Any,
    value_b: Any,
    options: DiffOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> DiffResult:
    """Compare two JSON-like values and return their structural difference.

    Args:
        value_a:   First value (dict, list, str, int, float, bool, date, None).
        value_b:   Second value.
        options:   A ``DiffOptions``, or a mapping of option overrides using
                   snake_case or camelCase names.  Defaults when None.
        overrides: Keyword option overrides, applied after ``options``.

    Returns:
        A ``DiffResult`` with additions, deletions and updates populated.

    Raises:
        TypeError: If an unknown option name is given.

    Example::

        diff({"age": 30}, {"age": "30"}).is_empty                           # True
        diff({"age": 30}, {"age": "30"}, enable_type_coercion=False).updates
        # {"age": {"from": 30, "to": "30"}}
    """
    engine = DiffEngine(options=resolve_options(options, **overrides))
    return engine.diff(value_a, value_b)


def is_equivalent(
    value_a: Any,
    value_b: Any,
    options: DiffOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> bool:
    """Return True if ``diff(value_a, value_b, ...)`` finds no differences."""
    return diff(value_a, value_b, options, **overrides).is_empty
