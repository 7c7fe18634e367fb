"""Tree subpackage for value classification and traversal paths.

Re-exports the public API for the tree module:
- ValueKind: StrEnum of the nine value kinds the engine distinguishes
- ABSENT: sentinel for a key that is not present
- classify: maps any value to its ValueKind
- TraversalContext: depth, path and options threaded through recursion
- get_nested_value / set_nested_value: dotted-path helpers for dicts
"""

from object_diff.tree.nodes import ABSENT, ValueKind, classify
from object_diff.tree.paths import (
    TraversalContext,
    get_nested_value,
    join_path,
    set_nested_value,
)

__all__ = [
    "ABSENT",
    "TraversalContext",
    "ValueKind",
    "classify",
    "get_nested_value",
    "join_path",
    "set_nested_value",
]
