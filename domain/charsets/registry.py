"""Central key registry: canonical entries, short-name index and per-taxonomy spellings."""

import logging
from collections.abc import Iterable

from domain.charsets.keys import SyntheticKeyAllocator, is_synthetic
from domain.charsets.normalizer import EXTENSION_PREFIX, lookup_candidates, normalize
from domain.schemas import (
    CanonicalEntry,
    CharsetKey,
    EquivalenceGroup,
    SpellingConflictPolicy,
    SyntheticKey,
    TaxonomyId,
)

logger = logging.getLogger(__name__)


class KeyRegistry:
    """
    Numeric-key tables unifying every taxonomy's view of an encoding.

    - key -> CanonicalEntry (authoritative keys only, never rebound)
    - normalized short name -> key (many-to-one, grows only)
    - taxonomy -> key -> that taxonomy's spelling
    """

    def __init__(
        self,
        *,
        extension_prefix: str = EXTENSION_PREFIX,
        conflict_policy: SpellingConflictPolicy = SpellingConflictPolicy.LAST_WINS,
    ) -> None:
        self.extension_prefix = extension_prefix
        self.conflict_policy = conflict_policy

        self._entries: dict[int, CanonicalEntry] = {}
        self._key_by_short_canonical: dict[str, int] = {}
        self._short_index: dict[str, CharsetKey] = {}
        self._spellings: dict[TaxonomyId, dict[CharsetKey, str]] = {}
        self._allocator = SyntheticKeyAllocator()

    # ---- authoritative entries ----

    def add_entry(self, entry: CanonicalEntry) -> bool:
        """Register one authoritative entry. Returns False if the key already names something else."""
        existing = self._entries.get(entry.key)
        if existing is not None and existing.name != entry.name:
            logger.warning(
                "Refusing to rebind key %d from '%s' to '%s'",
                entry.key,
                existing.name,
                entry.name,
            )
            return False

        self._entries[entry.key] = entry
        self._key_by_short_canonical.setdefault(normalize(entry.name), entry.key)

        if entry.preferred_mime_name:
            self.bind(entry.preferred_mime_name, entry.key)
        self.bind(entry.name, entry.key)
        for alias in entry.aliases:
            self.bind(alias, entry.key)
        return True

    def add_entries(self, entries: Iterable[CanonicalEntry]) -> int:
        return sum(1 for e in entries if self.add_entry(e))

    def apply_equivalence_groups(self, groups: Iterable[EquivalenceGroup]) -> int:
        """Bind each group's aliases to the key of its head. Unknown heads are skipped."""
        applied = 0
        for group in groups:
            key = self._short_index.get(normalize(group.head))
            if key is None:
                logger.warning("Cannot find a registry entry for equivalence group head '%s'", group.head)
                continue
            for alias in group.aliases:
                self.bind(alias, key)
            applied += 1
        return applied

    def entry_for(self, key: CharsetKey | None) -> CanonicalEntry | None:
        if key is None or is_synthetic(key):
            return None
        return self._entries.get(key)  # type: ignore[arg-type]

    def canonical_entries(self) -> list[CanonicalEntry]:
        return sorted(self._entries.values(), key=lambda e: e.key)

    def canonical_names(self) -> set[str]:
        return {e.name for e in self._entries.values()}

    # ---- keys ----

    def allocate_key(self) -> SyntheticKey:
        key = self._allocator.allocate()
        logger.debug("Allocated synthetic key %s", key)
        return key

    def knows_key(self, key: object) -> bool:
        if isinstance(key, SyntheticKey):
            return key.serial <= self._allocator.allocated
        if isinstance(key, bool) or not isinstance(key, int):
            return False
        return key in self._entries

    @property
    def synthetic_count(self) -> int:
        return self._allocator.allocated

    # ---- short names ----

    def bind(
        self,
        name: str,
        key: CharsetKey,
        *,
        overwrite: bool = True,
        protect_canonical: bool = False,
    ) -> bool:
        """
        Point the short form of `name` at `key`.

        Returns True if the index changed. With overwrite=False an existing
        binding is kept. With protect_canonical=True the short form of a
        canonical name is never moved to another key.
        """
        if not self.knows_key(key):
            raise ValueError(f"Cannot bind '{name}' to unknown key {key!r}")
        short = normalize(name)
        if not short:
            return False
        if not overwrite and short in self._short_index:
            return False
        if protect_canonical:
            owner = self._key_by_short_canonical.get(short)
            if owner is not None and owner != key:
                logger.debug("Not rebinding canonical name '%s' (key %d) to %s", name, owner, key)
                return False
        self._short_index[short] = key
        return True

    def resolve(self, text: object) -> CharsetKey | None:
        """Resolve free text to a key (authoritative or synthetic); first candidate hit wins."""
        for candidate in lookup_candidates(text, self.extension_prefix):
            key = self._short_index.get(candidate)
            if key is not None:
                return key
        return None

    @property
    def short_name_count(self) -> int:
        return len(self._short_index)

    # ---- taxonomy spellings ----

    def record_spelling(
        self,
        taxonomy: TaxonomyId,
        key: CharsetKey,
        spelling: str,
        *,
        force: bool = False,
    ) -> bool:
        """
        Record `spelling` as the taxonomy's name for `key`.

        Collisions are settled by the registry's conflict policy unless
        `force` is set. Returns True if a different spelling was already present.
        """
        if not self.knows_key(key):
            raise ValueError(f"Cannot record spelling '{spelling}' for unknown key {key!r}")
        table = self._spellings.setdefault(taxonomy, {})
        previous = table.get(key)
        conflict = previous is not None and previous != spelling

        if conflict:
            keep_previous = self.conflict_policy is SpellingConflictPolicy.FIRST_WINS and not force
            logger.debug(
                "%s spelling collision on key %s: '%s' vs '%s' (keeping '%s')",
                taxonomy.value,
                key,
                previous,
                spelling,
                previous if keep_previous else spelling,
            )
            if keep_previous:
                return True

        table[key] = spelling
        return conflict

    def spelling(self, taxonomy: TaxonomyId, key: CharsetKey | None) -> str | None:
        if key is None:
            return None
        return self._spellings.get(taxonomy, {}).get(key)

    def spellings(self, taxonomy: TaxonomyId) -> dict[CharsetKey, str]:
        return dict(self._spellings.get(taxonomy, {}))
