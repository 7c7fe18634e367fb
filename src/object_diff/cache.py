"""PatternCache: LRU cache of compiled ignore-pattern globs.

Glob patterns ("user._*") are turned into anchored regular expressions the
first time they are seen and then served from memory.  Each ``DiffEngine``
owns its own ``PatternCache``; there is no class-level shared state, so two
engines never interfere with each other.

Example::

    from object_diff.cache import PatternCache

    cache = PatternCache(max_size=64)
    cache.compile("user._*").fullmatch("user._id")   # match
    cache.compile("user._*") is cache.compile("user._*")   # True
"""

from __future__ import annotations

import re

from cachetools import LRUCache

__all__ = ["PatternCache", "glob_to_regex"]


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a ``*`` glob into an anchored regular expression.

    Every regex metacharacter except ``*`` is escaped; ``*`` matches any
    substring, dots included.
    """
    escaped = re.escape(pattern).replace(r"\*", ".*")
    return re.compile(rf"\A{escaped}\Z")


class PatternCache:
    """LRU-backed cache of compiled glob patterns.

    Args:
        max_size: Maximum number of compiled patterns held in memory.
            Defaults to 256.  When exceeded, the least-recently-used entry
            is silently evicted.
    """

    def __init__(self, max_size: int = 256) -> None:
        self._cache: LRUCache[str, re.Pattern[str]] = LRUCache(maxsize=max_size)

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def compile(self, pattern: str) -> re.Pattern[str]:
        """Return the compiled regex for ``pattern``, compiling on a miss."""
        compiled = self._cache.get(pattern)
        if compiled is None:
            compiled = glob_to_regex(pattern)
            self._cache[pattern] = compiled
        return compiled

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._cache
