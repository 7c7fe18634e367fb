"""object-diff - structural differences between JSON-like records.

Compares two values and reports:
- additions: keys present in the second value but not in the first
- deletions: keys present in the first value but not in the second
- updates:   keys present in both whose values differ
"""

from __future__ import annotations

import logging

from object_diff.algorithm.coercion import (
    can_coerce_to_boolean,
    can_coerce_to_date,
    can_coerce_to_number,
    coerce_values,
)
from object_diff.algorithm.comparison import (
    compare_arrays,
    compare_primitives,
    is_plain_object,
    should_ignore_property,
)
from object_diff.algorithm.config import DiffOptions, resolve_options
from object_diff.api import diff, is_equivalent
from object_diff.engine import DiffEngine
from object_diff.result import DiffResult
from object_diff.tree.nodes import ABSENT, ValueKind, classify
from object_diff.tree.paths import get_nested_value, set_nested_value

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ABSENT",
    "DiffEngine",
    "DiffOptions",
    "DiffResult",
    "ValueKind",
    "can_coerce_to_boolean",
    "can_coerce_to_date",
    "can_coerce_to_number",
    "classify",
    "coerce_values",
    "compare_arrays",
    "compare_primitives",
    "diff",
    "get_nested_value",
    "is_equivalent",
    "is_plain_object",
    "resolve_options",
    "set_nested_value",
    "should_ignore_property",
]
