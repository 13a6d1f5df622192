"""Static taxonomy source: one forest per taxonomy type."""

from collections.abc import Mapping

from domain.errors import InvalidTypeError
from domain.schemas import TaxonomyCategory, TaxonomyTree, TaxonomyType, coerce_taxonomy_type


class TaxonomyDataset:
    """Immutable holder of the skill and domain forests for the process lifetime."""

    def __init__(self, trees: Mapping[TaxonomyType, TaxonomyTree]) -> None:
        self._trees: dict[TaxonomyType, TaxonomyTree] = {coerce_taxonomy_type(t): tree for t, tree in trees.items()}

    @property
    def types(self) -> tuple[TaxonomyType, ...]:
        return tuple(t for t in TaxonomyType if t in self._trees)

    def tree(self, taxonomy_type: TaxonomyType | str) -> TaxonomyTree:
        """
        Return the TaxonomyTree for a type.

        Raises:
            InvalidTypeError: If the type is unknown or has no data loaded
        """
        t = coerce_taxonomy_type(taxonomy_type)
        if t not in self._trees:
            raise InvalidTypeError(taxonomy_type)
        return self._trees[t]

    def get_tree(self, taxonomy_type: TaxonomyType | str) -> tuple[TaxonomyCategory, ...]:
        """Return the root categories (the forest) for a type."""
        return self.tree(taxonomy_type).categories

    def version(self, taxonomy_type: TaxonomyType | str = TaxonomyType.SKILL) -> str | None:
        return self.tree(taxonomy_type).version
