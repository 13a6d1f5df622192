"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- Taxonomy data loading (YAML)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    BrowserConfig,
    load_browser_config,
    load_taxonomy_dataset,
)
from infrastructure.observability import configure_logging

__all__ = [
    # Configuration (most commonly used)
    "load_browser_config",
    "load_taxonomy_dataset",
    "BrowserConfig",
    # Logging
    "configure_logging",
]
