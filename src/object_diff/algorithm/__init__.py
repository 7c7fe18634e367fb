"""algorithm subpackage - comparison rules used by the diff engine.

Provides the options type, the coercion rules and the comparison
primitives.  Import from this module (not from sub-modules directly) to
stay on the stable public interface.

Example::

    from object_diff.algorithm import DiffOptions, compare_primitives

    compare_primitives(30, "30", enable_type_coercion=True)    # True
    compare_primitives(30, "30", enable_type_coercion=False)   # False
"""

from __future__ import annotations

from object_diff.algorithm.coercion import CoercionResult, coerce_values
from object_diff.algorithm.comparison import (
    compare_arrays,
    compare_primitives,
    is_plain_object,
    should_ignore_property,
)
from object_diff.algorithm.config import DiffOptions, resolve_options

__all__ = [
    "CoercionResult",
    "DiffOptions",
    "coerce_values",
    "compare_arrays",
    "compare_primitives",
    "is_plain_object",
    "resolve_options",
    "should_ignore_property",
]
