from pathlib import Path

import pytest

from domain.errors import InvalidTypeError
from domain.schemas import TaxonomyType
from domain.taxonomy import TreeIndex, filter_taxonomy
from infrastructure.config import load_browser_config, load_taxonomy_dataset, load_taxonomy_tree
from infrastructure.constants import ENV_DEFAULT_TYPE, ENV_MATCH_SLUGS

REPO_ROOT = Path(__file__).resolve().parents[2]
TAXONOMY_DIR = REPO_ROOT / "configs" / "taxonomy"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENV_DEFAULT_TYPE, raising=False)
    monkeypatch.delenv(ENV_MATCH_SLUGS, raising=False)


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_browser_config(tmp_path: Path) -> None:
    cfg_path = _write(
        tmp_path / "browser.yaml",
        "default_type: Domain\nmatch_slugs: true\ntaxonomy_files:\n  skill: s.yaml\n  domain: d.yaml\n",
    )
    cfg = load_browser_config(cfg_path)

    assert cfg.default_type is TaxonomyType.DOMAIN
    assert cfg.match_slugs is True
    assert cfg.taxonomy_files == {TaxonomyType.SKILL: Path("s.yaml"), TaxonomyType.DOMAIN: Path("d.yaml")}
    assert cfg.log_file is None


def test_environment_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_path = _write(tmp_path / "browser.yaml", "default_type: skill\nmatch_slugs: true\n")
    monkeypatch.setenv(ENV_DEFAULT_TYPE, "domain")
    monkeypatch.setenv(ENV_MATCH_SLUGS, "off")

    cfg = load_browser_config(cfg_path)

    assert cfg.default_type is TaxonomyType.DOMAIN
    assert cfg.match_slugs is False


def test_unknown_type_in_config(tmp_path: Path) -> None:
    cfg_path = _write(tmp_path / "browser.yaml", "default_type: agents\n")
    with pytest.raises(InvalidTypeError):
        load_browser_config(cfg_path)


def test_missing_and_malformed_files(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_taxonomy_tree(tmp_path / "missing.yaml")
    with pytest.raises(ValueError):
        load_taxonomy_tree(_write(tmp_path / "list.yaml", "- a\n- b\n"))
    with pytest.raises(ValueError):
        load_taxonomy_tree(_write(tmp_path / "bad.yaml", "categories:\n  slug: x\n"))


def test_load_taxonomy_tree_handles_empty_children(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "t.yaml",
        "version: 1.0\ncategories:\n"
        "  - slug: root\n    name: Root\n    children:\n"
        "  - slug: other\n    name: Other\n    description: Leaf root\n",
    )
    tree = load_taxonomy_tree(path)

    assert tree.version == "1.0"
    assert [c.slug for c in tree.categories] == ["root", "other"]
    assert tree.categories[0].children == ()
    assert tree.categories[1].description == "Leaf root"


def test_shipped_oasf_taxonomies() -> None:
    skills = load_taxonomy_tree(TAXONOMY_DIR / "skills.yaml")
    domains = load_taxonomy_tree(TAXONOMY_DIR / "domains.yaml")

    assert skills.version == domains.version == "0.8.0"
    assert len(skills.categories) == 15
    assert len(domains.categories) == 24
    assert skills.categories[0].name == "Natural Language Processing"
    assert domains.categories[0].slug == "technology"

    skill_index = TreeIndex.build(skills.categories)
    assert "natural_language_processing/natural_language_understanding" in skill_index
    assert skill_index.resolve("images_computer_vision/image_segmentation").full_path == (
        "Images / Computer Vision > Image Segmentation"
    )
    TreeIndex.build(domains.categories)


def test_load_taxonomy_dataset_from_config(tmp_path: Path) -> None:
    cfg_path = _write(
        tmp_path / "browser.yaml",
        f"taxonomy_files:\n  skill: {TAXONOMY_DIR / 'skills.yaml'}\n  domain: {TAXONOMY_DIR / 'domains.yaml'}\n",
    )
    dataset = load_taxonomy_dataset(load_browser_config(cfg_path))

    assert dataset.types == (TaxonomyType.SKILL, TaxonomyType.DOMAIN)
    index = TreeIndex.build(dataset.get_tree("domain"))
    result = filter_taxonomy("blockchain", index)
    assert "technology/blockchain" in result.matched_slugs
    assert "technology" in result.visible_slugs


@pytest.mark.parametrize(("raw", "expected"), [('"false"', False), ('"off"', False), ('"yes"', True), ("true", True)])
def test_quoted_match_slugs_is_parsed_as_boolean(tmp_path: Path, raw: str, expected: bool) -> None:
    cfg_path = _write(tmp_path / "browser.yaml", f"match_slugs: {raw}\n")
    assert load_browser_config(cfg_path).match_slugs is expected


def test_invalid_match_slugs_string(tmp_path: Path) -> None:
    cfg_path = _write(tmp_path / "browser.yaml", 'match_slugs: "maybe"\n')
    with pytest.raises(ValueError):
        load_browser_config(cfg_path)
