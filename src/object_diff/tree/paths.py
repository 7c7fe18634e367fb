"""Traversal context and dotted key-path helpers.

Paths are tuples of string segments; array indices appear as their
decimal string form.  The dotted rendering ("user.tags.0") is only used
for ignore-pattern matching, never for the shape of a DiffResult.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from object_diff.algorithm.config import DiffOptions
from object_diff.tree.nodes import ABSENT

__all__ = ["TraversalContext", "get_nested_value", "join_path", "set_nested_value"]


def join_path(path: Iterable[str], key: Any) -> str:
    """Render ``path`` extended by ``key`` as a dotted string."""
    prefix = ".".join(path)
    return f"{prefix}.{key}" if prefix else str(key)


@dataclass(frozen=True, slots=True)
class TraversalContext:
    """Per-call state threaded through the recursion.

    Attributes:
        depth:   Number of nested-object descents taken so far (root is 0).
        path:    Key segments leading to the values being compared.
        options: The resolved DiffOptions, shared by reference.
    """

    depth: int
    path: tuple[str, ...]
    options: DiffOptions

    @classmethod
    def root(cls, options: DiffOptions) -> TraversalContext:
        return cls(depth=0, path=(), options=options)

    @property
    def has_depth_budget(self) -> bool:
        """True while another nested-object descent is permitted."""
        return self.depth < self.options.max_depth

    def descend(self, segment: Any) -> TraversalContext:
        """Child context one object level deeper."""
        return TraversalContext(
            depth=self.depth + 1,
            path=(*self.path, str(segment)),
            options=self.options,
        )

    def at(self, segment: Any) -> TraversalContext:
        """Child context at the same depth (used for array-valued fields)."""
        return TraversalContext(
            depth=self.depth,
            path=(*self.path, str(segment)),
            options=self.options,
        )

    def path_for(self, key: Any) -> str:
        return join_path(self.path, key)


def get_nested_value(obj: Any, path: Iterable[Any]) -> Any:
    """Return the value at ``path`` inside ``obj``, or ``ABSENT``.

    Sequence positions are addressed by integer (or digit string) segments.
    """
    current = obj
    for key in path:
        if isinstance(current, Mapping):
            if key not in current:
                return ABSENT
            current = current[key]
        elif isinstance(current, (list, tuple)):
            try:
                current = current[int(key)]
            except (ValueError, IndexError):
                return ABSENT
        else:
            return ABSENT
    return current


def set_nested_value(
    obj: MutableMapping[str, Any], path: list[str], value: Any
) -> None:
    """Store ``value`` at ``path`` inside ``obj``, creating dicts on the way.

    Intermediate entries that are missing or not mappings are replaced by
    empty dicts.  When both the existing leaf and ``value`` are mappings the
    two are shallow-merged (``value`` wins); otherwise the leaf is replaced.
    Mutates ``obj`` in place.
    """
    if not path:
        raise ValueError("path must contain at least one key")

    current = obj
    for key in path[:-1]:
        child = current.get(key)
        if not isinstance(child, MutableMapping):
            child = {}
            current[key] = child
        current = child

    last = path[-1]
    existing = current.get(last)
    if isinstance(existing, Mapping) and isinstance(value, Mapping):
        current[last] = {**existing, **value}
    else:
        current[last] = value
