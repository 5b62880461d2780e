"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.charsets.normalizer import EXTENSION_PREFIX
from domain.schemas import SpellingConflictPolicy, TaxonomyEntry, TaxonomyId
from infrastructure.constants import (
    EQUIVALENCES_FILE,
    IANA_REGISTRY_FILE,
    ICONV_BINARY,
    MAPPING_DIR_ALIASES_FILENAME,
)


class PythonCodecsConfig(BaseModel):
    """Python codec registry settings."""

    include_non_text: bool = Field(
        default=False,
        description="Also ingest bytes-to-bytes codecs such as base64 or zlib.",
    )


class IconvConfig(BaseModel):
    """iconv(1) settings."""

    binary: str = Field(default=ICONV_BINARY, description="Executable name or path.")
    timeout_seconds: float = Field(default=10.0, gt=0)


class MappingDirConfig(BaseModel):
    """Directory of mapping tables (one file per encoding)."""

    path: Path | None = None
    aliases_filename: str = MAPPING_DIR_ALIASES_FILENAME


class MapRegistryConfig(BaseModel):
    """REGISTRY file of name/alias stanzas."""

    path: Path | None = None


class StaticTaxonomyConfig(BaseModel):
    """In-memory taxonomy, for embedding applications and tests."""

    entries: list[TaxonomyEntry] = Field(default_factory=list)


class RegistryConfig(BaseModel):
    """
    Registry configuration.
    - Loaded from YAML (or built in code with defaults)
    - Consumed by the resolver when the registry is first built

    Convention: each TaxonomyId other than IANA has a field of the same name
    holding that adapter's settings.
    """

    registry_file: Path = Field(
        default_factory=lambda: IANA_REGISTRY_FILE,
        description="IANA character-sets XML document.",
    )
    equivalences_file: Path | None = Field(
        default_factory=lambda: EQUIVALENCES_FILE,
        description="YAML list of hand-made equivalence groups. None disables them.",
    )
    extension_prefix: str = Field(
        default=EXTENSION_PREFIX,
        description="Prefix stripped (repeatedly) when a name does not resolve as given.",
    )
    conflict_policy: SpellingConflictPolicy = SpellingConflictPolicy.LAST_WINS

    taxonomies: list[TaxonomyId] = Field(
        default_factory=lambda: [
            TaxonomyId.PYTHON,
            TaxonomyId.ICONV,
            TaxonomyId.MAPPING_DIR,
            TaxonomyId.MAP_REGISTRY,
        ],
        description="Taxonomies to ingest, in ingestion order.",
    )

    python: PythonCodecsConfig = Field(default_factory=PythonCodecsConfig)
    iconv: IconvConfig = Field(default_factory=IconvConfig)
    mapping_dir: MappingDirConfig = Field(default_factory=MappingDirConfig)
    map_registry: MapRegistryConfig = Field(default_factory=MapRegistryConfig)
    static: StaticTaxonomyConfig = Field(default_factory=StaticTaxonomyConfig)

    @model_validator(mode="after")
    def _validate(self) -> "RegistryConfig":
        if TaxonomyId.IANA in self.taxonomies:
            raise ValueError("iana is the authoritative registry and cannot be listed under taxonomies")
        if len(set(self.taxonomies)) != len(self.taxonomies):
            raise ValueError(f"taxonomies must not repeat: {[t.value for t in self.taxonomies]}")
        return self
