"""Resolution API: canonical, MIME and per-taxonomy names for free-form charset text."""

import logging
from collections.abc import Sequence

from application.aliases import AliasRegistry
from domain.charsets.registry import KeyRegistry
from domain.schemas import CharsetKey, TaxonomyId
from infrastructure.config import RegistryConfig, load_equivalence_groups, load_iana_entries
from infrastructure.taxonomies import IngestReport, TaxonomyAdapter, make_adapters

logger = logging.getLogger(__name__)


class CharsetResolver:
    """
    One registry of charset names, built once and queried many times.

    Construction is cheap; the IANA document, the equivalence groups and
    every configured taxonomy are ingested on the first lookup (or an
    explicit load()). Every lookup returns None for input it cannot resolve,
    including None, "" and non-string values.
    """

    def __init__(
        self,
        cfg: RegistryConfig | None = None,
        *,
        adapters: Sequence[TaxonomyAdapter] | None = None,
    ) -> None:
        """
        Args:
            cfg: Registry configuration (defaults are usable as-is)
            adapters: Explicit adapters, in ingestion order. When omitted they
                are built from cfg.taxonomies by the adapter factory.
        """
        self.cfg = cfg if cfg is not None else RegistryConfig()
        self._adapters = list(adapters) if adapters is not None else None
        self.registry = KeyRegistry(
            extension_prefix=self.cfg.extension_prefix,
            conflict_policy=self.cfg.conflict_policy,
        )
        self.aliases = AliasRegistry(self)
        self.reports: list[IngestReport] = []
        self._loaded = False

    # ---- building ----

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> "CharsetResolver":
        """Build the registry. Calling it again is a no-op."""
        if self._loaded:
            return self

        entries = load_iana_entries(self.cfg.registry_file)
        added = self.registry.add_entries(entries)
        groups = load_equivalence_groups(self.cfg.equivalences_file)
        applied = self.registry.apply_equivalence_groups(groups)
        logger.info(
            "Loaded %d IANA charsets and %d/%d equivalence groups",
            added,
            applied,
            len(groups),
        )

        adapters = self._adapters if self._adapters is not None else make_adapters(self.cfg)
        for adapter in adapters:
            report = adapter.ingest(self.registry)
            self.reports.append(report)
            if report.available:
                for alias, target in adapter.post_ingest_aliases:
                    self.aliases.register(
                        adapter.taxonomy,
                        alias,
                        target,
                        failure_level=logging.DEBUG,
                        protect_canonical=True,
                    )

        self._loaded = True
        logger.info(
            "Charset registry ready: %d short names, %d synthetic keys",
            self.registry.short_name_count,
            self.registry.synthetic_count,
        )
        return self

    def available_taxonomies(self) -> list[TaxonomyId]:
        """IANA plus every taxonomy whose adapter was available at build time."""
        self.load()
        return [TaxonomyId.IANA, *(r.taxonomy for r in self.reports if r.available)]

    # ---- lookups ----

    def lookup(self, taxonomy: TaxonomyId, text: object) -> tuple[CharsetKey, str] | None:
        """Key and taxonomy name for `text`, without loading. None if either is missing."""
        key = self.registry.resolve(text)
        if key is None:
            return None
        if taxonomy is TaxonomyId.IANA:
            entry = self.registry.entry_for(key)
            return (key, entry.name) if entry is not None else None
        name = self.registry.spelling(taxonomy, key)
        return (key, name) if name is not None else None

    def canonical_name(self, text: object) -> str | None:
        """IANA display name for `text` ("latin1" -> "ISO_8859-1:1987")."""
        self.load()
        hit = self.lookup(TaxonomyId.IANA, text)
        return hit[1] if hit else None

    def preferred_mime_name(self, text: object) -> str | None:
        """The registry's preferred MIME name for `text` ("latin1" -> "ISO-8859-1")."""
        self.load()
        entry = self.registry.entry_for(self.registry.resolve(text))
        return entry.preferred_mime_name if entry is not None else None

    def taxonomy_name(self, taxonomy: object, text: object) -> str | None:
        """Name of `text` in one taxonomy. None for an unknown taxonomy id."""
        try:
            taxonomy = TaxonomyId(taxonomy)
        except ValueError:
            logger.debug("Unknown taxonomy %r", taxonomy)
            return None
        self.load()
        hit = self.lookup(taxonomy, text)
        return hit[1] if hit else None

    def python_codec_name(self, text: object) -> str | None:
        return self.taxonomy_name(TaxonomyId.PYTHON, text)

    def iconv_name(self, text: object) -> str | None:
        return self.taxonomy_name(TaxonomyId.ICONV, text)

    def mapping_dir_name(self, text: object) -> str | None:
        return self.taxonomy_name(TaxonomyId.MAPPING_DIR, text)

    def map_registry_name(self, text: object) -> str | None:
        return self.taxonomy_name(TaxonomyId.MAP_REGISTRY, text)

    def key_for_name(self, text: object) -> CharsetKey | None:
        """Key `text` resolves to: an IANA MIBenum, or a SyntheticKey for encodings IANA does not list."""
        self.load()
        return self.registry.resolve(text)

    def name_for_key(self, key: object) -> str | None:
        """Canonical name for a MIBenum given as an int or a string of digits."""
        self.load()
        if isinstance(key, bool):
            return None
        if isinstance(key, str):
            key = key.strip()
            if not (key.isascii() and key.isdigit()):
                return None
            key = int(key)
        if not isinstance(key, int):
            return None
        entry = self.registry.entry_for(key)
        return entry.name if entry is not None else None

    def all_canonical_names(self) -> set[str]:
        self.load()
        return self.registry.canonical_names()

    # ---- aliases ----

    def add_alias(self, taxonomy: object, alias: str, target: str) -> str | None:
        return self.aliases.add_alias(taxonomy, alias, target)

    def add_iana_alias(self, alias: str, target: str) -> str | None:
        return self.aliases.add_iana_alias(alias, target)

    def add_python_alias(self, alias: str, target: str) -> str | None:
        return self.aliases.add_python_alias(alias, target)

    def add_iconv_alias(self, alias: str, target: str) -> str | None:
        return self.aliases.add_iconv_alias(alias, target)

    def add_mapping_dir_alias(self, alias: str, target: str) -> str | None:
        return self.aliases.add_mapping_dir_alias(alias, target)

    def add_map_registry_alias(self, alias: str, target: str) -> str | None:
        return self.aliases.add_map_registry_alias(alias, target)
