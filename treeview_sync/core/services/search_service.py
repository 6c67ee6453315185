from __future__ import annotations

"""Text search over the forest: compute the set of keys that are pruned.

An item survives when its own text contains the search text
(case-insensitive) or when at least one child survives. A matching item
short-circuits: its subtree is not examined, so none of its descendants is
ever excluded. Excluded keys are every item that does not survive.

The exclusion set is computed once per (search text, forest version) and
reused for every per-node query until either one changes or
:meth:`SearchService.invalidate` is called.
"""

import logging
from typing import Any, FrozenSet, Optional, Sequence, Set, Tuple

from treeview_sync.core.models import TreeAccessors

__all__ = ["SearchService"]

logger = logging.getLogger(__name__)


class SearchService:
    """Cached exclusion-set computation for a text search.

    Parameters
    ----------
    accessors : TreeAccessors
        Caller functions used to read keys, children and display text.
    """

    def __init__(self, accessors: TreeAccessors) -> None:
        self._accessors = accessors
        self._cache_key: Optional[Tuple[str, int]] = None
        self._cache: FrozenSet[Any] = frozenset()
        self.computations: int = 0

    def compute_excluded(self, forest: Sequence[Any], search: Optional[str], version: int = 0) -> FrozenSet[Any]:
        """Return the exclusion set for ``search`` over ``forest``.

        ``version`` identifies the forest content; pass the builder's
        version so a rebuild invalidates the cache.
        """
        if not search:
            return frozenset()

        cache_key = (search, version)
        if cache_key == self._cache_key:
            return self._cache

        needle = search.lower()
        excluded: Set[Any] = set()
        for item in forest or []:
            self._survives(item, needle, excluded)

        self._cache_key = cache_key
        self._cache = frozenset(excluded)
        self.computations += 1
        logger.debug("Search OK: term=%r excluded=%d", search, len(self._cache))
        return self._cache

    def is_excluded(self, key: Any, forest: Sequence[Any], search: Optional[str], version: int = 0) -> bool:
        if not search:
            return False
        return key in self.compute_excluded(forest, search, version)

    def invalidate(self) -> None:
        self._cache_key = None
        self._cache = frozenset()

    def matches(self, item: Any, needle: str) -> bool:
        """True if the item's text contains the already lower-cased needle."""
        return needle in self._accessors.text(item).lower()

    # --------------------------------------------------------------- Internals

    def _survives(self, item: Any, needle: str, excluded: Set[Any]) -> bool:
        if self.matches(item, needle):
            return True

        survived = False
        for child in self._accessors.children(item):
            if self._survives(child, needle, excluded):
                survived = True
        if survived:
            return True

        excluded.add(self._accessors.key(item))
        return False
