import pytest

from domain.schemas import TaxonomyCategory, TaxonomyTree, TaxonomyType
from domain.taxonomy import TaxonomyDataset, TreeIndex


def cat(slug: str, name: str | None = None, *children: TaxonomyCategory) -> TaxonomyCategory:
    return TaxonomyCategory(slug=slug, name=name or slug.upper(), children=children)


@pytest.fixture
def abcd_forest() -> tuple[TaxonomyCategory, ...]:
    # A(B(D), C)
    return (cat("a", "A", cat("b", "B", cat("d", "D")), cat("c", "C")),)


@pytest.fixture
def abcd_index(abcd_forest) -> TreeIndex:
    return TreeIndex.build(abcd_forest)


@pytest.fixture
def ten_node_forest() -> tuple[TaxonomyCategory, ...]:
    return (
        cat(
            "nlp",
            "Natural Language Processing",
            cat("nlp/nlu", "Natural Language Understanding"),
            cat(
                "nlp/gen",
                "Natural Language Generation",
                cat("nlp/gen/summarization", "Summarization"),
                cat("nlp/gen/translation", "Translation"),
            ),
        ),
        cat(
            "vision",
            "Images / Computer Vision",
            cat("vision/segmentation", "Image Segmentation"),
            cat("vision/detection", "Object Detection"),
        ),
        cat("audio", "Audio", cat("audio/classification", "Audio Classification")),
    )


@pytest.fixture
def ten_node_index(ten_node_forest) -> TreeIndex:
    return TreeIndex.build(ten_node_forest)


@pytest.fixture
def dataset(abcd_forest, ten_node_forest) -> TaxonomyDataset:
    return TaxonomyDataset(
        {
            TaxonomyType.SKILL: TaxonomyTree(version="0.8.0", categories=ten_node_forest),
            TaxonomyType.DOMAIN: TaxonomyTree(version="0.8.0", categories=abcd_forest),
        }
    )
