"""Taxonomy of a directory of mapping tables, one file per encoding."""

import logging
from pathlib import Path

from domain.charsets.normalizer import normalize
from domain.schemas import TaxonomyEntry, TaxonomyId
from infrastructure.config.models import RegistryConfig
from infrastructure.constants import MAPPING_DIR_ALIASES_FILENAME, MAPPING_TABLE_SUFFIXES
from infrastructure.io import read_text
from infrastructure.taxonomies.base import TaxonomyAdapter
from infrastructure.taxonomies.registry import register_adapter

logger = logging.getLogger(__name__)


def parse_aliases_file(text: str) -> dict[str, list[str]]:
    """
    Parse an aliases file: `charset alias alias ...` per line, `#` starts a comment.

    Returns:
        normalized charset name -> aliases, in file order
    """
    out: dict[str, list[str]] = {}
    for line in text.splitlines():
        line = line.split("#", 1)[0]
        words = line.split()
        if len(words) < 2:
            continue
        out.setdefault(normalize(words[0]), []).extend(words[1:])
    return out


def scan_mapping_dir(path: Path, aliases_filename: str = MAPPING_DIR_ALIASES_FILENAME) -> list[TaxonomyEntry]:
    """List the tables in `path`; each file stem is an encoding spelling."""
    stems = sorted(
        {p.stem for p in path.iterdir() if p.is_file() and p.suffix.lower() in MAPPING_TABLE_SUFFIXES}
    )

    aliases: dict[str, list[str]] = {}
    aliases_path = path / aliases_filename
    if aliases_path.is_file():
        aliases = parse_aliases_file(read_text(aliases_path))

    known = {normalize(s) for s in stems}
    for charset in aliases:
        if charset not in known:
            logger.debug("Aliases file names '%s', which has no table in %s", charset, path)

    return [TaxonomyEntry(spelling=s, aliases=tuple(aliases.get(normalize(s), ()))) for s in stems]


class MappingDirAdapter(TaxonomyAdapter):
    """Table names (file stems) of a mapping directory."""

    taxonomy = TaxonomyId.MAPPING_DIR

    post_ingest_aliases = (
        ("ISO_8859-13:1998", "ISO_8859-13"),
        ("L 7", "ISO_8859-13"),
        ("Latin 7", "ISO_8859-13"),
        ("ISO_8859-15:1998", "ISO_8859-15"),
        ("L 0", "ISO_8859-15"),
        ("Latin 0", "ISO_8859-15"),
        ("L 9", "ISO_8859-15"),
        ("Latin 9", "ISO_8859-15"),
        ("ISO-8859-1-Windows-3.1-Latin-1", "cp1252"),
        ("csWindows31Latin1", "cp1252"),
    )

    def __init__(self, *, path: Path | None, aliases_filename: str = MAPPING_DIR_ALIASES_FILENAME) -> None:
        self.path = path
        self.aliases_filename = aliases_filename

    @classmethod
    def from_cfg(cls, cfg: RegistryConfig) -> "MappingDirAdapter":
        return cls(path=cfg.mapping_dir.path, aliases_filename=cfg.mapping_dir.aliases_filename)

    def is_available(self) -> bool:
        return self.path is not None and self.path.is_dir()

    def enumerate(self) -> list[TaxonomyEntry]:
        if self.path is None:
            return []
        return scan_mapping_dir(self.path, self.aliases_filename)


register_adapter(TaxonomyId.MAPPING_DIR, MappingDirAdapter)
