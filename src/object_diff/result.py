"""DiffResult dataclass for structural diff output.

This module provides the result type returned by diff() calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

__all__ = ["DiffResult"]


def _is_empty(part: Any) -> bool:
    return isinstance(part, Mapping) and not part


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Result of a diff() call.

    Nested differences mirror the shape of the inputs: a field whose nested
    object changed holds a nested map, never a flattened dotted path.  A
    single key may therefore appear under more than one of the three maps
    when its nested object has several kinds of differences.

    Attributes:
        additions: Keys present only in the second value, with their full
            values.  When the first value is null the whole second value.
        deletions: Keys present only in the first value, with their full
            values.  When the second value is null the whole first value.
        updates: Keys present in both with unequal values, each mapped to a
            ``{"from": ..., "to": ...}`` pair or a nested map.  When the two
            values are replaced wholesale, the pair itself.
    """

    additions: Any = field(default_factory=dict)
    deletions: Any = field(default_factory=dict)
    updates: Any = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """True when no additions, deletions or updates were found."""
        return (
            _is_empty(self.additions)
            and _is_empty(self.deletions)
            and _is_empty(self.updates)
        )

    @property
    def has_changes(self) -> bool:
        return not self.is_empty

    def to_dict(self) -> dict[str, Any]:
        """Return the three parts as a plain dict."""
        return {
            "additions": self.additions,
            "deletions": self.deletions,
            "updates": self.updates,
        }
