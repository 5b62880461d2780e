"""
Configuration management: models, loading, and validation.

Handles:
- RegistryConfig: dataset locations, lookup behavior, enabled taxonomies
- Per-taxonomy settings (Python codecs, iconv, mapping tables, REGISTRY files)
- Loading the IANA document and the equivalence groups

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import (
    load_equivalence_groups,
    load_iana_entries,
    load_registry_config,
)
from infrastructure.config.models import (
    IconvConfig,
    MappingDirConfig,
    MapRegistryConfig,
    PythonCodecsConfig,
    # Main config
    RegistryConfig,
    StaticTaxonomyConfig,
)

__all__ = [
    # Main config (most commonly used)
    "RegistryConfig",
    "load_registry_config",
    # Taxonomy settings
    "PythonCodecsConfig",
    "IconvConfig",
    "MappingDirConfig",
    "MapRegistryConfig",
    "StaticTaxonomyConfig",
    # Loaders
    "load_iana_entries",
    "load_equivalence_groups",
]
