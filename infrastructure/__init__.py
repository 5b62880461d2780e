"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Taxonomies (Python codecs, iconv, mapping tables, REGISTRY files)
- Configuration loading (YAML, environment)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    RegistryConfig,
    load_registry_config,
)
from infrastructure.taxonomies import TaxonomyAdapter, make_adapter, make_adapters

__all__ = [
    # Taxonomy adapters (most commonly used)
    "make_adapter",
    "make_adapters",
    "TaxonomyAdapter",
    # Configuration (most commonly used)
    "load_registry_config",
    "RegistryConfig",
]
