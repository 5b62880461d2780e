"""Taxonomy read from a REGISTRY file of name/alias stanzas."""

import logging
import re
from pathlib import Path

from domain.schemas import TaxonomyEntry, TaxonomyId
from infrastructure.config.models import RegistryConfig
from infrastructure.io import read_text
from infrastructure.taxonomies.base import TaxonomyAdapter
from infrastructure.taxonomies.registry import register_adapter

logger = logging.getLogger(__name__)

_STANZA_SPLIT = re.compile(r"\n\s*\n")
_NAME_RE = re.compile(r"^name:\s+(\S+)", re.IGNORECASE | re.MULTILINE)
_ALIAS_RE = re.compile(r"^\s*alias:\s+(.+?)\s*$", re.IGNORECASE | re.MULTILINE)
_MIB_RE = re.compile(r"^#mib:\s+(\d+)", re.IGNORECASE | re.MULTILINE)


def parse_map_registry(text: str) -> list[TaxonomyEntry]:
    """
    Parse a REGISTRY file.

    Stanzas are separated by blank lines. Each may hold a `name:` line,
    any number of `alias:` lines and a `#mib:` comment carrying the IANA
    MIBenum. Stanzas without a name are ignored; when a stanza has several
    `name:` lines the first one counts.
    """
    entries = []
    for stanza in _STANZA_SPLIT.split(text):
        name = _NAME_RE.search(stanza)
        if name is None:
            continue
        aliases = tuple(a for a in _ALIAS_RE.findall(stanza) if a)
        mib = _MIB_RE.search(stanza)
        entries.append(
            TaxonomyEntry(
                spelling=name.group(1),
                aliases=aliases,
                key_hint=int(mib.group(1)) if mib else None,
            )
        )
    return entries


class MapRegistryAdapter(TaxonomyAdapter):
    """Names from a REGISTRY file."""

    taxonomy = TaxonomyId.MAP_REGISTRY

    # A stanza's name is this taxonomy's spelling, not a better short name for the encoding
    keep_existing_primary_binding = True

    def __init__(self, *, path: Path | None) -> None:
        self.path = path

    @classmethod
    def from_cfg(cls, cfg: RegistryConfig) -> "MapRegistryAdapter":
        return cls(path=cfg.map_registry.path)

    def is_available(self) -> bool:
        return self.path is not None and self.path.is_file()

    def enumerate(self) -> list[TaxonomyEntry]:
        if self.path is None:
            return []
        entries = parse_map_registry(read_text(self.path, errors="replace"))
        logger.debug("Read %d stanzas from %s", len(entries), self.path)
        return entries


register_adapter(TaxonomyId.MAP_REGISTRY, MapRegistryAdapter)
