"""Flat slug index over a taxonomy forest."""

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from domain.errors import DuplicateSlugError, NotFoundError
from domain.schemas import ResolvedCategory, TaxonomyCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexEntry:
    """Position of one category inside its forest."""

    category: TaxonomyCategory
    depth: int
    parent_slug: str | None
    child_slugs: tuple[str, ...]
    ordinal: int

    @property
    def slug(self) -> str:
        return self.category.slug

    @property
    def name(self) -> str:
        return self.category.name

    @property
    def has_children(self) -> bool:
        return len(self.child_slugs) > 0


class TreeIndex:
    """
    Read-only lookup (slug -> depth, parent, children, ordinal) built once from a forest.

    Entries are kept in pre-order declaration order, so iterating the index
    yields categories exactly as they appear in the source data.
    """

    def __init__(self, entries: dict[str, IndexEntry], roots: tuple[str, ...]) -> None:
        self._entries = entries
        self._roots = roots

    @classmethod
    def build(cls, forest: Sequence[TaxonomyCategory]) -> "TreeIndex":
        """
        Flatten a forest into a TreeIndex.

        Raises:
            DuplicateSlugError: If any slug repeats within the forest
        """
        entries: dict[str, IndexEntry] = {}
        # (category, depth, parent_slug); reversed so pops follow declaration order
        stack: list[tuple[TaxonomyCategory, int, str | None]] = [(c, 0, None) for c in reversed(forest)]

        while stack:
            category, depth, parent_slug = stack.pop()
            if category.slug in entries:
                raise DuplicateSlugError(category.slug)

            entries[category.slug] = IndexEntry(
                category=category,
                depth=depth,
                parent_slug=parent_slug,
                child_slugs=tuple(child.slug for child in category.children),
                ordinal=len(entries),
            )
            stack.extend((child, depth + 1, category.slug) for child in reversed(category.children))

        roots = tuple(c.slug for c in forest)
        logger.debug("Built taxonomy index: %d categories, %d roots", len(entries), len(roots))
        return cls(entries, roots)

    def __contains__(self, slug: object) -> bool:
        return slug in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[IndexEntry]:
        return iter(self._entries.values())

    @property
    def roots(self) -> tuple[str, ...]:
        return self._roots

    @property
    def slugs(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def count_all(self) -> int:
        """Total number of categories in the forest."""
        return len(self._entries)

    def get(self, slug: str) -> IndexEntry:
        try:
            return self._entries[slug]
        except KeyError:
            raise NotFoundError(slug) from None

    def category(self, slug: str) -> TaxonomyCategory:
        return self.get(slug).category

    def get_ancestors(self, slug: str) -> tuple[str, ...]:
        """Ancestor slugs, root first, excluding `slug` itself."""
        chain: list[str] = []
        parent = self.get(slug).parent_slug
        while parent is not None:
            chain.append(parent)
            parent = self._entries[parent].parent_slug
        chain.reverse()
        return tuple(chain)

    def iter_descendants(self, slug: str) -> Iterator[str]:
        """Lazily yield descendant slugs depth-first, excluding `slug` itself."""
        stack = list(reversed(self.get(slug).child_slugs))
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(self._entries[current].child_slugs))

    def subtree_slugs(self, slug: str) -> list[str]:
        """The slug plus all of its descendants (selecting a parent covers its children)."""
        return [slug, *self.iter_descendants(slug)]

    def canonical_slug(self, slug: str) -> str:
        """
        Trimmed slug as stored in the index.

        Exact matches win; the lower-cased form is used only when the exact
        slug is absent. Unknown slugs come back trimmed.
        """
        key = slug.strip()
        if key in self._entries:
            return key
        lowered = key.lower()
        return lowered if lowered in self._entries else key

    def matches_selection(self, slug: str, selected: Iterable[str]) -> bool:
        """
        True if `slug` equals a selected slug, or one of them is an ancestor of the other.

        Unknown slugs only match by equality.
        """
        slug = self.canonical_slug(slug)
        own_chain = set(self.get_ancestors(slug)) if slug in self else set()

        for sel in selected:
            sel = self.canonical_slug(sel)
            if sel == slug:
                return True
            if sel in own_chain:
                return True
            if sel in self and slug in self.get_ancestors(sel):
                return True
        return False

    def resolve(self, slug: str) -> ResolvedCategory:
        """
        Resolve a slug (trimmed; case-insensitive only when no exact match exists)
        to its category, parent and display path.

        Examples:
            "natural_language_processing/summarization" ->
            full_path "Natural Language Processing > Summarization"
        """
        normalized = self.canonical_slug(slug)
        entry = self.get(normalized)
        path = [self._entries[a].name for a in self.get_ancestors(normalized)]
        parent = self._entries[entry.parent_slug].category if entry.parent_slug is not None else None

        return ResolvedCategory(
            slug=normalized,
            name=entry.name,
            parent_name=parent.name if parent is not None else None,
            full_path=" > ".join([*path, entry.name]),
            category=entry.category,
            parent=parent,
        )
