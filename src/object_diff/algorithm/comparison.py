"""Comparison primitives used by the diff engine.

- should_ignore_property: path-based exclusion with exact, glob and
  ancestor-prefix patterns.
- compare_primitives:     strict equality, then optional type coercion.
- compare_arrays:         boolean array equality, order-sensitive or
                          multiset-style for scalar arrays.
- is_plain_object:        shape classification (traversable mappings).
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from object_diff.algorithm.coercion import coerce_values, values_identical
from object_diff.cache import glob_to_regex
from object_diff.tree.nodes import ValueKind, classify, is_scalar_kind

if TYPE_CHECKING:
    from object_diff.cache import PatternCache
    from object_diff.result import DiffResult
    from object_diff.tree.paths import TraversalContext

    NestedCompare = Callable[[Any, Any, TraversalContext], DiffResult]

__all__ = [
    "compare_arrays",
    "compare_primitives",
    "is_plain_object",
    "should_ignore_property",
]

logger = logging.getLogger(__name__)


def should_ignore_property(
    property_path: str,
    ignore_properties: Sequence[str],
    cache: PatternCache | None = None,
) -> bool:
    """Return True if ``property_path`` matches any ignore pattern.

    Patterns are tried in order:
    1. Exact match:   "user._id" matches "user._id".
    2. Glob match:    "user._*" matches "user._id" and "user._version".
    3. Prefix match:  "user.profile" matches "user.profile.email".
    4. Simple match:  "_id" matches "_id" (top-level key only).

    Args:
        property_path:     Dotted path of the key being compared.
        ignore_properties: Patterns to test.
        cache:             Optional PatternCache for compiled globs.
    """
    for pattern in ignore_properties:
        if pattern == property_path:
            return True
        if "*" in pattern:
            if cache is not None:
                regex = cache.compile(pattern)
            else:
                regex = glob_to_regex(pattern)
            if regex.match(property_path):
                return True
            continue
        if "." in pattern:
            if property_path.startswith(pattern + "."):
                return True
            continue
        if property_path == pattern:
            return True
    return False


def is_plain_object(value: Any) -> bool:
    """True for mappings the engine traverses field by field."""
    return classify(value) == ValueKind.OBJECT


def compare_primitives(a: Any, b: Any, enable_type_coercion: bool) -> bool:
    """Compare two values as atomic primitives.

    Strict equality is tried first.  Mappings and sequences are only
    strictly equal to themselves (the same object).  When that fails and
    coercion is enabled, the coercion rules decide.
    """
    if values_identical(a, b, classify(a), classify(b)):
        return True
    if not enable_type_coercion:
        return False
    return coerce_values(a, b).are_equal


def _sort_key(value: Any) -> str:
    """Canonical text so coercion-equal scalars sort next to each other."""
    kind = classify(value)
    if kind == ValueKind.NULL:
        return "null"
    if kind == ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind == ValueKind.NUMBER:
        if isinstance(value, numbers.Integral):
            return str(int(value))
        try:
            number = float(value)
        except OverflowError:
            return str(value)
        if number.is_integer():
            return str(int(number))
        return repr(number)
    return str(value)


def _all_scalar(items: Sequence[Any]) -> bool:
    return all(is_scalar_kind(classify(item)) for item in items)


def compare_arrays(
    array_a: Sequence[Any],
    array_b: Sequence[Any],
    context: TraversalContext,
    compare_nested: NestedCompare,
) -> bool:
    """Return True when two arrays are equal under the context's options.

    Args:
        array_a:        First array.
        array_b:        Second array.
        context:        Traversal context of the array-valued field.
        compare_nested: The engine's recursive compare, used for elements
                        that are both plain objects.

    Returns:
        The equality verdict.  Never produces update detail itself; callers
        record the whole arrays as an update when this returns False.
    """
    options = context.options

    if len(array_a) != len(array_b):
        return False
    if len(array_a) == 0:
        return True

    if not options.array_order_matters and _all_scalar(array_a) and _all_scalar(array_b):
        sorted_a = sorted(array_a, key=_sort_key)
        sorted_b = sorted(array_b, key=_sort_key)
        return all(
            compare_primitives(item_a, item_b, options.enable_type_coercion)
            for item_a, item_b in zip(sorted_a, sorted_b, strict=True)
        )
    # Arrays holding objects or nested arrays fall through to the ordered walk.

    for index, (item_a, item_b) in enumerate(zip(array_a, array_b, strict=True)):
        kind_a = classify(item_a)
        kind_b = classify(item_b)

        if kind_a != ValueKind.OBJECT and kind_b != ValueKind.OBJECT:
            if not compare_primitives(item_a, item_b, options.enable_type_coercion):
                return False
            continue

        if (
            kind_a == ValueKind.OBJECT
            and kind_b == ValueKind.OBJECT
            and context.has_depth_budget
        ):
            nested = compare_nested(item_a, item_b, context.descend(index))
            if not nested.is_empty:
                return False
            continue

        logger.debug(
            "array elements at %s.%d are not comparable (%s vs %s, depth %d)",
            ".".join(context.path),
            index,
            kind_a,
            kind_b,
            context.depth,
        )
        return False

    return True
