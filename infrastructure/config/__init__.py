"""
Configuration management: models, loading, and validation.

Handles:
- BrowserConfig: default taxonomy type, matching options, data files
- Taxonomy loading from YAML
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import (
    load_browser_config,
    load_taxonomy_dataset,
    load_taxonomy_tree,
)
from infrastructure.config.models import BrowserConfig

__all__ = [
    # Main config (most commonly used)
    "BrowserConfig",
    "load_browser_config",
    # Loaders
    "load_taxonomy_tree",
    "load_taxonomy_dataset",
]
