"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for registry entries, keys and taxonomy records
- charsets: Name normalization, registry parsing and the key registry
"""

from domain.schemas import (
    CanonicalEntry,
    CharsetKey,
    EquivalenceGroup,
    SpellingConflictPolicy,
    SyntheticKey,
    TaxonomyEntry,
    TaxonomyId,
)

__all__ = [
    "CanonicalEntry",
    "CharsetKey",
    "EquivalenceGroup",
    "SpellingConflictPolicy",
    "SyntheticKey",
    "TaxonomyEntry",
    "TaxonomyId",
]
