"""Category selection."""

import logging
from collections.abc import Callable

from domain.schemas import TaxonomyCategory, TaxonomyType
from domain.taxonomy.index import TreeIndex

logger = logging.getLogger(__name__)

SelectCallback = Callable[[TaxonomyCategory, TaxonomyType], None]


class CategorySelector:
    """
    Resolve a slug and hand the category to a caller-supplied callback.

    Selection never touches expansion state; navigation and other side
    effects belong to the callback.
    """

    def __init__(
        self,
        index: TreeIndex,
        taxonomy_type: TaxonomyType,
        on_select: SelectCallback | None = None,
    ) -> None:
        self._index = index
        self._type = taxonomy_type
        self._on_select = on_select

    @property
    def taxonomy_type(self) -> TaxonomyType:
        return self._type

    def select(self, slug: str) -> TaxonomyCategory:
        """
        Raises:
            NotFoundError: If the slug is not in the index (callback is not invoked)
        """
        category = self._index.resolve(slug).category
        logger.debug("Selected %s category: %s", self._type.value, category.slug)
        if self._on_select is not None:
            self._on_select(category, self._type)
        return category
