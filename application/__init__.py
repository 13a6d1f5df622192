"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
wiring the taxonomy core into a browsing session and rendering it as text.
"""

from application.browser import TaxonomyBrowser
from application.render import log_browser_view, render_tree_lines

__all__ = [
    # Main workflow
    "TaxonomyBrowser",
    # Rendering
    "render_tree_lines",
    "log_browser_view",
]
