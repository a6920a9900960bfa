"""ParseCache: LRU-backed memoization of signature parsing.

Parsing is pure, so a tree can be reused for any later request with the same
text. Component documentation repeats the same few signatures across many
props, which makes the hit rate high when a generator runs over a whole
library.

Each ``ParseCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state. Failed parses are not cached: the ``ParseError`` is
raised again on every call with the same text.

Example::

    from ts_overloads.cache import ParseCache

    cache = ParseCache(max_size=128)
    tree = cache.parse("'small' | 'medium' | 'large'")
    same = cache.parse("'small' | 'medium' | 'large'")   # served from memory
    assert tree is same
"""

from __future__ import annotations

from cachetools import LRUCache

from ts_overloads.model.nodes import TsType
from ts_overloads.parsing.parser import SignatureParser

__all__ = ["ParseCache"]


class ParseCache:
    """LRU-backed caching proxy around a ``SignatureParser``.

    Args:
        max_size: Maximum number of parsed trees held in memory. Defaults to
            256. When exceeded, the least-recently-used entry is evicted.
        parser: The parser to delegate to. Defaults to ``SignatureParser()``.

    Raises:
        ValueError: If ``max_size`` is less than 1.
    """

    def __init__(self, max_size: int = 256, parser: SignatureParser | None = None) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._parser = parser if parser is not None else SignatureParser()
        self._cache: LRUCache[str, TsType] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, text: str) -> TsType:
        """Return the tree for ``text``, parsing only on a cache miss.

        Raises:
            ParseError: If ``text`` does not match the grammar.
        """
        try:
            return self._cache[text]
        except KeyError:
            pass
        tree = self._parser.parse(text)
        self._cache[text] = tree
        return tree

    def clear(self) -> None:
        self._cache.clear()

    def __contains__(self, text: object) -> bool:
        return text in self._cache
