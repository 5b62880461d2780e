"""
Taxonomy adapters: one module per naming convention.

Modules are imported lazily by the factory and register themselves via
register_adapter().
"""

from infrastructure.taxonomies.base import IngestReport, SpellingOverride, TaxonomyAdapter, UnavailableAdapter
from infrastructure.taxonomies.factory import make_adapter, make_adapters
from infrastructure.taxonomies.registry import get_adapter_class, register_adapter

__all__ = [
    "IngestReport",
    "SpellingOverride",
    "TaxonomyAdapter",
    "UnavailableAdapter",
    "get_adapter_class",
    "make_adapter",
    "make_adapters",
    "register_adapter",
]
