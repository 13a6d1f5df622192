"""Plain-text rendering of the visible taxonomy tree."""

import logging

from application.browser import TaxonomyBrowser
from application.constants import (
    COLLAPSED_MARKER,
    EXPANDED_MARKER,
    INDENT,
    LEAF_MARKER,
    MATCH_MARKER,
    NO_RESULTS_TEMPLATE,
    TAB_LABELS,
)
from domain.schemas import VisibleNode

logger = logging.getLogger(__name__)


def render_tree_lines(nodes: list[VisibleNode], *, highlight_matches: bool = False) -> list[str]:
    """
    One line per visible node, indented by depth.

    Examples:
        [-] Audio
              Audio Classification *
    """
    lines: list[str] = []
    for node in nodes:
        if not node.has_children:
            marker = LEAF_MARKER
        else:
            marker = EXPANDED_MARKER if node.is_expanded else COLLAPSED_MARKER
        suffix = f" {MATCH_MARKER}" if highlight_matches and node.is_matched else ""
        lines.append(f"{INDENT * node.depth}{marker} {node.name}{suffix}")
    return lines


def log_browser_view(browser: TaxonomyBrowser) -> None:
    """Log a human-readable view of the active taxonomy tab."""
    nodes = browser.visible_nodes()
    summary = browser.summary()
    result = browser.filter_result

    logger.info("=" * 60)
    label = TAB_LABELS[browser.active_type.value]
    if browser.version:
        label = f"{label} v{browser.version}"
    logger.info("%s | %s", label, summary.label)
    if result.is_active:
        logger.info("Query: %r", result.query)
    logger.info("=" * 60)

    for line in render_tree_lines(nodes, highlight_matches=result.is_active):
        logger.info("%s", line)

    if summary.no_results:
        logger.info("%s", NO_RESULTS_TEMPLATE.format(query=result.query))
