"""Pydantic models for taxonomy categories, filter results and rendered nodes."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.errors import InvalidTypeError


class TaxonomyType(str, Enum):
    """OASF taxonomy types."""

    SKILL = "skill"
    DOMAIN = "domain"


def coerce_taxonomy_type(value: object) -> TaxonomyType:
    """
    Resolve a taxonomy type from an enum member or a (case-insensitive) string.

    Raises:
        InvalidTypeError: If the value does not name a known taxonomy type
    """
    if isinstance(value, TaxonomyType):
        return value
    if isinstance(value, str):
        try:
            return TaxonomyType(value.strip().lower())
        except ValueError:
            pass
    raise InvalidTypeError(value)


class TaxonomyCategory(BaseModel):
    """Single taxonomy category with its owned children."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(..., description="Stable identifier, unique within its taxonomy type.")
    name: str = Field(..., description="Display name.")
    description: str | None = None
    children: tuple["TaxonomyCategory", ...] = Field(default_factory=tuple)

    @field_validator("slug", "name")
    @classmethod
    def _non_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must be a non-empty string")
        return v

    @field_validator("children", mode="before")
    @classmethod
    def _none_as_empty(cls, v: object) -> object:
        # YAML `children:` with no items parses to None
        return () if v is None else v


class TaxonomyTree(BaseModel):
    """One taxonomy forest plus its schema version."""

    model_config = ConfigDict(frozen=True)

    version: str | None = None
    categories: tuple[TaxonomyCategory, ...] = Field(default_factory=tuple)


class ResolvedCategory(BaseModel):
    """Category resolved together with its parent and display path."""

    model_config = ConfigDict(frozen=True)

    slug: str
    name: str
    parent_name: str | None = None
    full_path: str
    category: TaxonomyCategory
    parent: TaxonomyCategory | None = None


class FilterResult(BaseModel):
    """
    Outcome of one filter invocation.

    - matched_slugs: nodes whose name contains the query
    - visible_slugs: matches plus the ancestor closure of every match
    - forced_slugs: ancestors that the query forces open (empty when the query is empty)
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    matched_slugs: frozenset[str] = Field(default_factory=frozenset)
    visible_slugs: frozenset[str] = Field(default_factory=frozenset)
    forced_slugs: frozenset[str] = Field(default_factory=frozenset)
    ordered_matches: tuple[str, ...] = Field(default_factory=tuple)
    match_count: int = 0
    total_count: int = 0

    @property
    def is_active(self) -> bool:
        """True when a non-empty query is applied."""
        return bool(self.query)

    @property
    def no_results(self) -> bool:
        return self.is_active and self.match_count == 0

    @property
    def visible_count(self) -> int:
        return len(self.visible_slugs)


class VisibleNode(BaseModel):
    """One rendered row of the taxonomy tree."""

    model_config = ConfigDict(frozen=True)

    slug: str
    name: str
    depth: int
    is_expanded: bool
    has_children: bool
    is_matched: bool


class TreeSummary(BaseModel):
    """Aggregate counters shown above the tree."""

    model_config = ConfigDict(frozen=True)

    total_count: int
    match_count: int
    visible_count: int
    is_filtered: bool = False
    no_results: bool = False

    @property
    def label(self) -> str:
        if self.is_filtered:
            return f"{self.match_count} of {self.total_count} categories"
        return f"{self.total_count} categories"
