"""Manual expand/collapse state for one taxonomy tree."""

import logging

from domain.schemas import FilterResult
from domain.taxonomy.index import TreeIndex

logger = logging.getLogger(__name__)


class ExpansionState:
    """
    Stored manual expansion flags, one per slug.

    Only toggle/expand_all/collapse_all write flags. The expansion forced open
    by an active query is layered on top at read time (effective_expansion)
    and never stored, so clearing the query restores the manual state exactly.
    """

    def __init__(self, index: TreeIndex) -> None:
        self._index = index
        self._manual: dict[str, bool] = {}

    def is_expanded(self, slug: str) -> bool:
        """Stored manual flag (collapsed unless set)."""
        self._index.get(slug)
        return self._manual.get(slug, False)

    def toggle(self, slug: str) -> bool:
        """
        Flip the stored flag for `slug` only and return the new value.

        Descendant flags are left untouched, so re-expanding a node restores its
        subtree as it was.

        Raises:
            NotFoundError: If the slug is not in the index
        """
        self._index.get(slug)
        expanded = not self._manual.get(slug, False)
        self._manual[slug] = expanded
        logger.debug("Toggled %s -> %s", slug, "expanded" if expanded else "collapsed")
        return expanded

    def expand_all(self) -> None:
        self._manual = dict.fromkeys(self._index.slugs, True)

    def collapse_all(self) -> None:
        """Full reset: every stored flag becomes False."""
        self._manual = dict.fromkeys(self._index.slugs, False)

    @property
    def all_expanded(self) -> bool:
        return len(self._index) > 0 and all(self._manual.get(s, False) for s in self._index.slugs)

    def snapshot(self) -> dict[str, bool]:
        """Copy of the stored flags for every slug."""
        return {s: self._manual.get(s, False) for s in self._index.slugs}

    def is_effectively_expanded(self, slug: str, result: FilterResult | None = None) -> bool:
        if self.is_expanded(slug):
            return True
        return result is not None and result.is_active and slug in result.forced_slugs

    def effective_expansion(self, result: FilterResult | None = None) -> dict[str, bool]:
        """Manual flags OR'ed with the ancestors an active query forces open."""
        forced = result.forced_slugs if result is not None and result.is_active else frozenset()
        return {s: self._manual.get(s, False) or s in forced for s in self._index.slugs}
