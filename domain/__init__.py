"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for categories, filter results and rendered nodes
- errors: Taxonomy error hierarchy
- taxonomy: Tree index, filtering, expansion state and selection
"""

from domain.errors import DuplicateSlugError, InvalidTypeError, NotFoundError, TaxonomyError
from domain.schemas import (
    FilterResult,
    ResolvedCategory,
    TaxonomyCategory,
    TaxonomyTree,
    TaxonomyType,
    TreeSummary,
    VisibleNode,
    coerce_taxonomy_type,
)

__all__ = [
    # Models
    "TaxonomyType",
    "TaxonomyCategory",
    "TaxonomyTree",
    "ResolvedCategory",
    "FilterResult",
    "VisibleNode",
    "TreeSummary",
    "coerce_taxonomy_type",
    # Errors
    "TaxonomyError",
    "DuplicateSlugError",
    "InvalidTypeError",
    "NotFoundError",
]
