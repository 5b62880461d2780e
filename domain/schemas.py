"""Pydantic models for registry entries, keys and taxonomy records."""

from enum import Enum
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaxonomyId(str, Enum):
    """Naming conventions layered on the shared key space."""

    IANA = "iana"
    PYTHON = "python"
    ICONV = "iconv"
    MAPPING_DIR = "mapping_dir"
    MAP_REGISTRY = "map_registry"
    STATIC = "static"


class SpellingConflictPolicy(str, Enum):
    """What happens when two records of one taxonomy land on the same key."""

    LAST_WINS = "last_wins"
    FIRST_WINS = "first_wins"


class SyntheticKey(BaseModel):
    """Key minted for a taxonomy entry that has no IANA counterpart.

    The type itself is the namespace tag: a SyntheticKey never equals an int
    MIBenum, so the two can share one dict without colliding.
    """

    model_config = ConfigDict(frozen=True)

    serial: int = Field(..., ge=1)

    def __str__(self) -> str:
        return f"synthetic-{self.serial:03d}"


CharsetKey: TypeAlias = int | SyntheticKey


class CanonicalEntry(BaseModel):
    """One record of the authoritative (IANA) registry."""

    model_config = ConfigDict(frozen=True)

    key: int = Field(..., description="IANA MIBenum.")
    name: str = Field(..., min_length=1, description="Registry-assigned display name.")
    aliases: tuple[str, ...] = Field(default_factory=tuple)
    preferred_mime_name: str | None = Field(
        default=None,
        description="The registry's preferred_alias, used for MIME-style lookups.",
    )


class TaxonomyEntry(BaseModel):
    """One encoding as enumerated by an external taxonomy."""

    spelling: str = Field(..., min_length=1, description="The taxonomy's own name for the encoding.")
    aliases: tuple[str, ...] = Field(default_factory=tuple)
    key_hint: int | None = Field(
        default=None,
        description="MIBenum declared by the taxonomy itself, trusted only if authoritative.",
    )

    @property
    def candidates(self) -> tuple[str, ...]:
        return (self.spelling, *self.aliases)


class EquivalenceGroup(BaseModel):
    """Hand-authored aliases for an IANA name that the registry does not list."""

    model_config = ConfigDict(frozen=True)

    head: str = Field(..., min_length=1)
    aliases: tuple[str, ...] = Field(..., min_length=1)

    @field_validator("head")
    @classmethod
    def _strip_head(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("equivalence group head must not be blank")
        return v

    @field_validator("aliases")
    @classmethod
    def _strip_aliases(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        cleaned = tuple(a.strip() for a in v if a and a.strip())
        if not cleaned:
            raise ValueError("equivalence group needs at least one non-blank alias")
        return cleaned
