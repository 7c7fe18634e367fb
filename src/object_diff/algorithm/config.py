"""DiffOptions and option resolution for the diff engine.

DiffOptions is a frozen (immutable) dataclass holding the comparison
switches.  ``resolve_options`` builds a fresh instance per call from the
default literal plus caller overrides, so no mutable default object is
ever shared between calls.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

__all__ = ["DiffOptions", "resolve_options"]

# camelCase spellings accepted in override mappings.
_ALIASES: dict[str, str] = {
    "ignoreProperties": "ignore_properties",
    "enableTypeCoercion": "enable_type_coercion",
    "arrayOrderMatters": "array_order_matters",
    "maxDepth": "max_depth",
}


@dataclass(frozen=True, slots=True)
class DiffOptions:
    """Immutable configuration for one diff call.

    Attributes:
        ignore_properties: Path patterns excluded from all three result maps.
            Exact paths ("user._id"), globs ("user._*") and ancestor
            prefixes ("user.profile") are supported.
        enable_type_coercion: When True, differing primitive kinds such as
            30 and "30" compare equal when semantically equivalent.
        array_order_matters: When False, arrays holding only null, number,
            string or boolean elements are compared as sorted multisets.
        max_depth: Number of nested-object descents before object pairs are
            compared as opaque values.  Not validated; 0 never recurses.
    """

    ignore_properties: tuple[str, ...] = ()
    enable_type_coercion: bool = True
    array_order_matters: bool = True
    max_depth: int = 10

    def __post_init__(self) -> None:
        # Accept any iterable of patterns but store a tuple so the instance
        # stays hashable and cannot be mutated through an alias.
        if not isinstance(self.ignore_properties, tuple):
            patterns: Iterable[str] = self.ignore_properties or ()
            if isinstance(patterns, str):
                patterns = (patterns,)
            object.__setattr__(self, "ignore_properties", tuple(patterns))


def resolve_options(
    options: DiffOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> DiffOptions:
    """Return a fresh DiffOptions with ``options`` and ``overrides`` applied.

    Args:
        options:   A DiffOptions to start from, or a mapping of overrides
                   (snake_case or camelCase keys).  Defaults when None.
        overrides: Keyword overrides applied last.

    Returns:
        A new DiffOptions instance.

    Raises:
        TypeError: If an override names an unknown option.
    """
    if isinstance(options, DiffOptions):
        base = options
        pending: dict[str, Any] = {}
    else:
        base = DiffOptions()
        pending = dict(options or {})
    pending.update(overrides)

    if not pending:
        return base

    changes: dict[str, Any] = {}
    known = {f.name for f in dataclasses.fields(DiffOptions)}
    for name, value in pending.items():
        field_name = _ALIASES.get(name, name)
        if field_name not in known:
            msg = f"Unknown diff option: {name!r}"
            raise TypeError(msg)
        changes[field_name] = value
    return dataclasses.replace(base, **changes)
