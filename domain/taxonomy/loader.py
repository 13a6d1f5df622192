"""Parse taxonomy data from a YAML dict."""

from typing import Any

from domain.schemas import TaxonomyCategory, TaxonomyTree


def _parse_category(raw: Any, where: str) -> TaxonomyCategory:
    if not isinstance(raw, dict):
        raise ValueError(f"{where}: category must be a mapping, got {type(raw).__name__}")

    children_raw = raw.get("children") or []
    if not isinstance(children_raw, list):
        raise ValueError(f"{where}: children must be a list")

    slug = raw.get("slug")
    children = [_parse_category(c, f"{where} > {slug}") for c in children_raw]

    return TaxonomyCategory(
        slug=str(slug) if slug is not None else "",
        name=str(raw.get("name") or ""),
        description=raw.get("description"),
        children=tuple(children),
    )


def parse_taxonomy_config(data: dict[str, Any]) -> TaxonomyTree:
    """
    Parse pre-loaded YAML dict into a TaxonomyTree.

    This is a pure function - it does NOT perform file I/O.
    The YAML loading happens in infrastructure.config.loader.

    Expected shape:
        version: "0.8.0"          # optional
        categories:
          - slug: audio
            name: Audio
            children:
              - slug: audio/audio_classification
                name: Audio Classification

    Args:
        data: Dictionary from yaml.safe_load()

    Returns:
        TaxonomyTree with the forest in declaration order

    Raises:
        ValueError: If required keys are missing or have wrong types
    """
    categories_raw = data.get("categories", []) or []
    if not isinstance(categories_raw, list):
        raise ValueError("categories must be a list")

    version = data.get("version")
    categories = [_parse_category(c, "categories") for c in categories_raw]
    return TaxonomyTree(
        version=str(version) if version is not None else None,
        categories=tuple(categories),
    )
