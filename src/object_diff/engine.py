"""DiffEngine: recursive structural comparison of two JSON-like values.

Architecture:
- diff() creates a root TraversalContext and delegates to _compare().
- _compare() classifies both values once and dispatches on their kinds:
  null handling, whole-value updates for differing type families, array
  equality, field-wise object comparison, or primitive equality.
- _compare_objects() walks the keys of both objects, skipping ignored
  paths, and recurses into object-valued fields while the depth budget
  lasts.  Nested results are attached under the field's key in each of
  the three maps independently.

Top-level values of differing type families (number, string, boolean,
structured) are always reported as an update, even when coercion is
enabled.  Coercion only applies to primitives compared inside objects and
arrays, or to primitives of the same family at the top level.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from object_diff.algorithm.comparison import (
    compare_arrays,
    compare_primitives,
    should_ignore_property,
)
from object_diff.algorithm.config import DiffOptions
from object_diff.cache import PatternCache
from object_diff.result import DiffResult
from object_diff.tree.nodes import ValueKind, classify
from object_diff.tree.paths import TraversalContext

__all__ = ["DiffEngine"]

logger = logging.getLogger(__name__)

_NULLISH = (ValueKind.NULL, ValueKind.ABSENT)

# Type families as a JavaScript-style ``typeof`` would report them.
_FAMILY = {
    ValueKind.NUMBER: "number",
    ValueKind.STRING: "string",
    ValueKind.BOOLEAN: "boolean",
    ValueKind.OBJECT: "structured",
    ValueKind.SEQUENCE: "structured",
    ValueKind.DATE: "structured",
    ValueKind.OPAQUE: "structured",
}


def _update(a: Any, b: Any) -> dict[str, Any]:
    return {"from": a, "to": b}


class DiffEngine:
    """Structural diff between two JSON-like values.

    The engine is stateless apart from a per-instance ``PatternCache`` of
    compiled ignore globs, which only memoises pure values.  Calling
    ``diff()`` twice with the same inputs always yields equal results.

    Example::

        from object_diff.engine import DiffEngine

        engine = DiffEngine()
        result = engine.diff({"name": "John", "age": 30}, {"name": "John", "age": 31})
        print(result.updates)   # {"age": {"from": 30, "to": 31}}
    """

    def __init__(
        self,
        options: DiffOptions | None = None,
        max_cache_size: int = 256,
    ) -> None:
        """Initialise the engine.

        Args:
            options: Comparison options.  Defaults to ``DiffOptions()``.
            max_cache_size: Maximum number of compiled ignore globs held in
                the per-instance LRU cache.  Defaults to 256.
        """
        self._options: DiffOptions = options if options is not None else DiffOptions()
        self._patterns = PatternCache(max_size=max_cache_size)

    @property
    def options(self) -> DiffOptions:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def diff(self, value_a: Any, value_b: Any) -> DiffResult:
        """Compare two values and return their additions, deletions and updates.

        Args:
            value_a: First value (dict, list, scalar, date, None or ABSENT).
            value_b: Second value.

        Returns:
            A ``DiffResult``; all three parts are empty when the values are
            equal under the configured options.  Never raises for acyclic
            input.
        """
        return self._compare(value_a, value_b, TraversalContext.root(self._options))

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------

    def _compare(self, value_a: Any, value_b: Any, ctx: TraversalContext) -> DiffResult:
        kind_a = classify(value_a)
        kind_b = classify(value_b)

        if kind_a in _NULLISH and kind_b in _NULLISH:
            return DiffResult()
        if kind_a in _NULLISH:
            return DiffResult(additions=value_b)
        if kind_b in _NULLISH:
            return DiffResult(deletions=value_a)

        if _FAMILY[kind_a] != _FAMILY[kind_b]:
            return DiffResult(updates=_update(value_a, value_b))

        if kind_a == ValueKind.SEQUENCE and kind_b == ValueKind.SEQUENCE:
            if compare_arrays(value_a, value_b, ctx, self._compare):
                return DiffResult()
            return DiffResult(updates=_update(value_a, value_b))

        if kind_a == ValueKind.OBJECT and kind_b == ValueKind.OBJECT:
            return self._compare_objects(value_a, value_b, ctx)

        if compare_primitives(value_a, value_b, ctx.options.enable_type_coercion):
            return DiffResult()
        return DiffResult(updates=_update(value_a, value_b))

    def _compare_objects(
        self,
        obj_a: Mapping[Any, Any],
        obj_b: Mapping[Any, Any],
        ctx: TraversalContext,
    ) -> DiffResult:
        """Field-wise comparison of two plain objects."""
        options = ctx.options
        additions: dict[Any, Any] = {}
        deletions: dict[Any, Any] = {}
        updates: dict[Any, Any] = {}

        for key, value_a in obj_a.items():
            if self._ignored(ctx, key):
                continue
            if key not in obj_b:
                deletions[key] = value_a

        for key, value_b in obj_b.items():
            if self._ignored(ctx, key):
                continue
            if key not in obj_a:
                additions[key] = value_b
                continue

            value_a = obj_a[key]
            kind_a = classify(value_a)
            kind_b = classify(value_b)

            if kind_a == ValueKind.OBJECT and kind_b == ValueKind.OBJECT:
                if ctx.has_depth_budget:
                    nested = self._compare(value_a, value_b, ctx.descend(key))
                    if nested.additions:
                        additions[key] = nested.additions
                    if nested.deletions:
                        deletions[key] = nested.deletions
                    if nested.updates:
                        updates[key] = nested.updates
                    continue
                logger.debug(
                    "depth budget exhausted at %s (max_depth=%d); comparing opaquely",
                    ctx.path_for(key),
                    options.max_depth,
                )
            elif kind_a == ValueKind.SEQUENCE and kind_b == ValueKind.SEQUENCE:
                if not compare_arrays(value_a, value_b, ctx.at(key), self._compare):
                    updates[key] = _update(value_a, value_b)
                continue

            if not compare_primitives(value_a, value_b, options.enable_type_coercion):
                updates[key] = _update(value_a, value_b)

        return DiffResult(additions=additions, deletions=deletions, updates=updates)

    def _ignored(self, ctx: TraversalContext, key: Any) -> bool:
        patterns = ctx.options.ignore_properties
        if not patterns:
            return False
        return should_ignore_property(ctx.path_for(key), patterns, self._patterns)
