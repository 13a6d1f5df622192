"""Configuration and taxonomy loading from YAML files."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from domain.schemas import TaxonomyTree, TaxonomyType, coerce_taxonomy_type
from domain.taxonomy.dataset import TaxonomyDataset
from domain.taxonomy.loader import parse_taxonomy_config
from infrastructure.config.models import BrowserConfig
from infrastructure.constants import ENV_DEFAULT_TYPE, ENV_MATCH_SLUGS

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _parse_bool(raw: str, name: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw!r}")


def load_taxonomy_tree(path: Path) -> TaxonomyTree:
    """
    Load one taxonomy forest from a YAML file.

    This function handles file I/O, then delegates parsing to domain layer.
    """
    data = _load_yaml(path)
    tree = parse_taxonomy_config(data)
    logger.debug("Loaded taxonomy %s (version=%s, roots=%d)", path, tree.version, len(tree.categories))
    return tree


def load_taxonomy_dataset(cfg: BrowserConfig) -> TaxonomyDataset:
    """Load every configured taxonomy type into a TaxonomyDataset."""
    trees = {t: load_taxonomy_tree(path) for t, path in cfg.taxonomy_files.items()}
    return TaxonomyDataset(trees)


def load_browser_config(path: Path | None = None) -> BrowserConfig:
    """
    Load browser.yaml and construct a fully-resolved BrowserConfig.

    Without a path, the defaults are used (shipped OASF taxonomy files).
    Environment overrides (applied last):
    - TAXONOMY_DEFAULT_TYPE: skill | domain
    - TAXONOMY_MATCH_SLUGS: true/false

    Raises:
        InvalidTypeError: If a taxonomy type in the file or environment is unknown
        ValueError: If the YAML has invalid types
    """
    raw = _load_yaml(path) if path is not None else {}

    default_type = coerce_taxonomy_type(raw.get("default_type", TaxonomyType.SKILL))
    match_raw = raw.get("match_slugs", False)
    match_slugs = _parse_bool(match_raw, "match_slugs") if isinstance(match_raw, str) else bool(match_raw)

    files_raw = raw.get("taxonomy_files")
    if files_raw is not None and not isinstance(files_raw, dict):
        raise ValueError("taxonomy_files must be a mapping of taxonomy type -> path")

    env_type = os.environ.get(ENV_DEFAULT_TYPE)
    if env_type:
        default_type = coerce_taxonomy_type(env_type)
    env_match = os.environ.get(ENV_MATCH_SLUGS)
    if env_match is not None:
        match_slugs = _parse_bool(env_match, ENV_MATCH_SLUGS)

    kwargs: dict[str, Any] = {"default_type": default_type, "match_slugs": match_slugs}
    if files_raw:
        kwargs["taxonomy_files"] = {coerce_taxonomy_type(k): Path(str(v)) for k, v in files_raw.items()}
    if raw.get("log_file"):
        kwargs["log_file"] = Path(str(raw["log_file"]))

    return BrowserConfig(**kwargs)
