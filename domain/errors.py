"""Taxonomy browsing errors."""


class TaxonomyError(Exception):
    """Base class for taxonomy browsing errors."""


class DuplicateSlugError(TaxonomyError, ValueError):
    """A slug appears more than once within one taxonomy type (malformed static data)."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Duplicate taxonomy slug: {slug!r}")
        self.slug = slug


class InvalidTypeError(TaxonomyError, ValueError):
    """Requested taxonomy type does not exist."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown taxonomy type: {value!r} (expected 'skill' or 'domain')")
        self.value = value


class NotFoundError(TaxonomyError, KeyError):
    """Slug is not present in the taxonomy index."""

    def __init__(self, slug: str) -> None:
        super().__init__(slug)
        self.slug = slug

    def __str__(self) -> str:
        return f"Taxonomy slug not found: {self.slug!r}"
