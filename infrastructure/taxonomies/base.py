"""Base adapter interface for external charset-name taxonomies."""

import logging
import subprocess
from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict

from domain.charsets.registry import KeyRegistry
from domain.schemas import CharsetKey, TaxonomyEntry, TaxonomyId
from infrastructure.config.models import RegistryConfig
from infrastructure.observability import clear_taxonomy_context, set_log_context

logger = logging.getLogger(__name__)


class SpellingOverride(BaseModel):
    """Force `spelling` as the taxonomy's name for the IANA entry `canonical`."""

    model_config = ConfigDict(frozen=True)

    canonical: str
    spelling: str


class IngestReport(BaseModel):
    """Counters collected while one taxonomy is ingested."""

    taxonomy: TaxonomyId
    available: bool = True
    entries: int = 0
    reused_keys: int = 0
    synthetic_keys: int = 0
    spelling_conflicts: int = 0
    overrides_applied: int = 0


class TaxonomyAdapter(ABC):
    """
    Abstract base class for taxonomy adapters.
    Common interface for naming conventions (Python codecs, iconv, etc.).

    All concrete adapters must implement:
    - enumerate(): list the taxonomy's encodings (the one external probe)
    """

    taxonomy: TaxonomyId

    # Applied after automatic ingestion to correct known mis-resolutions
    spelling_overrides: tuple[SpellingOverride, ...] = ()
    # (alias, target) pairs registered through the alias registry after ingestion
    post_ingest_aliases: tuple[tuple[str, str], ...] = ()
    # If True, an entry's own spelling never displaces an existing short-name binding
    keep_existing_primary_binding: bool = False
    # If False, an entry's aliases only fill short names nobody has claimed yet
    overwrite_aliases: bool = True

    @classmethod
    @abstractmethod
    def from_cfg(cls, cfg: RegistryConfig) -> "TaxonomyAdapter":
        """Build the adapter from its section of the registry config."""
        raise NotImplementedError

    def is_available(self) -> bool:
        """Capability probe: is the library, tool or file behind this taxonomy present?"""
        return True

    @abstractmethod
    def enumerate(self) -> list[TaxonomyEntry]:
        """
        Return every encoding the taxonomy knows, with its spellings.

        May raise OSError or subprocess.SubprocessError; ingest() treats
        either as an empty taxonomy.
        """
        raise NotImplementedError

    def _safe_enumerate(self) -> list[TaxonomyEntry]:
        try:
            return self.enumerate()
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Probe for %s taxonomy failed: %s", self.taxonomy.value, e)
            return []

    @staticmethod
    def _resolve_existing(registry: KeyRegistry, entry: TaxonomyEntry) -> CharsetKey | None:
        """Find a key for `entry` without touching the registry."""
        if entry.key_hint is not None and registry.entry_for(entry.key_hint) is not None:
            return entry.key_hint
        for candidate in entry.candidates:
            key = registry.resolve(candidate)
            if key is not None:
                return key
        return None

    def ingest(self, registry: KeyRegistry) -> IngestReport:
        """
        Walk the enumeration and merge it into `registry`.

        Per entry: reuse an existing key (or mint a synthetic one), record
        this taxonomy's spelling, then bind every spelling variant so other
        taxonomies can find the entry too.
        """
        report = IngestReport(taxonomy=self.taxonomy, available=self.is_available())
        set_log_context(taxonomy=self.taxonomy.value)
        try:
            for entry in self._safe_enumerate():
                key = self._resolve_existing(registry, entry)
                if key is None:
                    key = registry.allocate_key()
                    report.synthetic_keys += 1
                    logger.debug("No registry match for '%s'; using %s", entry.spelling, key)
                else:
                    report.reused_keys += 1

                if registry.record_spelling(self.taxonomy, key, entry.spelling):
                    report.spelling_conflicts += 1

                registry.bind(
                    entry.spelling,
                    key,
                    overwrite=not self.keep_existing_primary_binding,
                    protect_canonical=True,
                )
                for alias in entry.aliases:
                    registry.bind(alias, key, overwrite=self.overwrite_aliases, protect_canonical=True)
                report.entries += 1

            if report.entries:
                report.overrides_applied = self._apply_overrides(registry)
        finally:
            clear_taxonomy_context()

        logger.info(
            "Ingested %s taxonomy: %d entries (%d matched, %d synthetic, %d spelling conflicts)",
            self.taxonomy.value,
            report.entries,
            report.reused_keys,
            report.synthetic_keys,
            report.spelling_conflicts,
        )
        return report

    def _apply_overrides(self, registry: KeyRegistry) -> int:
        applied = 0
        for override in self.spelling_overrides:
            key = registry.resolve(override.canonical)
            if key is None or registry.entry_for(key) is None:
                logger.debug("Skipping %s override for unknown entry '%s'", self.taxonomy.value, override.canonical)
                continue
            registry.record_spelling(self.taxonomy, key, override.spelling, force=True)
            registry.bind(override.spelling, key)
            applied += 1
        return applied


class UnavailableAdapter(TaxonomyAdapter):
    """Stand-in for a taxonomy whose library or tool is not installed."""

    def __init__(self, taxonomy: TaxonomyId) -> None:
        self.taxonomy = taxonomy

    @classmethod
    def from_cfg(cls, cfg: RegistryConfig) -> "TaxonomyAdapter":
        raise TypeError("UnavailableAdapter is created by the factory, not from config")

    def is_available(self) -> bool:
        return False

    def enumerate(self) -> list[TaxonomyEntry]:
        return []

    def ingest(self, registry: KeyRegistry) -> IngestReport:
        logger.debug("Taxonomy %s is not available; its lookups will return None", self.taxonomy.value)
        return IngestReport(taxonomy=self.taxonomy, available=False)
