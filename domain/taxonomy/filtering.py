"""Query filtering over a TreeIndex."""

from domain.schemas import FilterResult
from domain.taxonomy.index import TreeIndex


def normalize_query(query: str | None) -> str:
    """Trim surrounding whitespace; None is treated as an empty query."""
    return (query or "").strip()


def filter_taxonomy(query: str | None, index: TreeIndex, *, match_slugs: bool = False) -> FilterResult:
    """
    Match categories by case-insensitive substring and expose the path to every hit.

    Empty query: every category is both matched and visible, nothing is forced open.
    Otherwise: matched = names containing the query (slugs too if match_slugs),
    visible = matched plus the ancestors of every match.

    Single pass in declaration order; ancestor walks stop at the first
    ancestor already collected, so the cost stays linear in node count.

    Args:
        query: Raw query text as typed
        index: TreeIndex of one taxonomy type
        match_slugs: Also match against the slug string

    Returns:
        A fresh FilterResult (an empty match set is a valid outcome)
    """
    q = normalize_query(query)
    total = index.count_all()

    if not q:
        every = frozenset(index.slugs)
        return FilterResult(
            query="",
            matched_slugs=every,
            visible_slugs=every,
            forced_slugs=frozenset(),
            ordered_matches=index.slugs,
            match_count=total,
            total_count=total,
        )

    needle = q.lower()
    matches: list[str] = []
    forced: set[str] = set()

    for entry in index:
        hit = needle in entry.name.lower() or (match_slugs and needle in entry.slug.lower())
        if not hit:
            continue
        matches.append(entry.slug)

        parent = entry.parent_slug
        while parent is not None and parent not in forced:
            forced.add(parent)
            parent = index.get(parent).parent_slug

    matched = frozenset(matches)
    return FilterResult(
        query=q,
        matched_slugs=matched,
        visible_slugs=matched | forced,
        forced_slugs=frozenset(forced),
        ordered_matches=tuple(matches),
        match_count=len(matches),
        total_count=total,
    )
