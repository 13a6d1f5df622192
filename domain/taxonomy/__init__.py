"""
Taxonomy browsing core: indexing, filtering, expansion and selection.

All functions in this module are pure (no file I/O); YAML loading happens in
infrastructure.config.loader.
"""

from domain.taxonomy.dataset import TaxonomyDataset
from domain.taxonomy.expansion import ExpansionState
from domain.taxonomy.filtering import filter_taxonomy, normalize_query
from domain.taxonomy.index import IndexEntry, TreeIndex
from domain.taxonomy.loader import parse_taxonomy_config
from domain.taxonomy.selection import CategorySelector, SelectCallback
from domain.taxonomy.view import build_visible_nodes, summarize

__all__ = [
    "TaxonomyDataset",
    "parse_taxonomy_config",
    # Index
    "TreeIndex",
    "IndexEntry",
    # Filtering
    "filter_taxonomy",
    "normalize_query",
    # Expansion
    "ExpansionState",
    # Selection
    "CategorySelector",
    "SelectCallback",
    # Rendering
    "build_visible_nodes",
    "summarize",
]
