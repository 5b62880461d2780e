"""
Charset name handling: normalization, registry parsing and the key registry.

All functions in this module are pure (no file I/O).
"""

from domain.charsets.keys import SyntheticKeyAllocator, is_synthetic
from domain.charsets.loader import parse_equivalence_groups, parse_iana_registry
from domain.charsets.normalizer import EXTENSION_PREFIX, lookup_candidates, normalize
from domain.charsets.registry import KeyRegistry

__all__ = [
    "EXTENSION_PREFIX",
    "KeyRegistry",
    "SyntheticKeyAllocator",
    "is_synthetic",
    "lookup_candidates",
    "normalize",
    "parse_equivalence_groups",
    "parse_iana_registry",
]
