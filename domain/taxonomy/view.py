"""Visible node list and counters for rendering."""

from domain.schemas import FilterResult, TreeSummary, VisibleNode
from domain.taxonomy.expansion import ExpansionState
from domain.taxonomy.index import TreeIndex


def build_visible_nodes(index: TreeIndex, expansion: ExpansionState, result: FilterResult) -> list[VisibleNode]:
    """
    Ordered rows to render, in declaration order.

    A node is listed when its parent is listed and effectively expanded, and,
    while a query is active, when it is in the query's visible set.
    """
    expanded = expansion.effective_expansion(result)
    nodes: list[VisibleNode] = []

    stack = list(reversed(index.roots))
    while stack:
        slug = stack.pop()
        if result.is_active and slug not in result.visible_slugs:
            continue

        entry = index.get(slug)
        is_expanded = expanded[slug]
        nodes.append(
            VisibleNode(
                slug=slug,
                name=entry.name,
                depth=entry.depth,
                is_expanded=is_expanded,
                has_children=entry.has_children,
                is_matched=slug in result.matched_slugs,
            )
        )
        if is_expanded:
            stack.extend(reversed(entry.child_slugs))

    return nodes


def summarize(result: FilterResult, nodes: list[VisibleNode] | None = None) -> TreeSummary:
    """Counters for display, e.g. "12 of 340 categories"."""
    return TreeSummary(
        total_count=result.total_count,
        match_count=result.match_count,
        visible_count=len(nodes) if nodes is not None else result.visible_count,
        is_filtered=result.is_active,
        no_results=result.no_results,
    )
