"""iconv(1) taxonomy, enumerated from `iconv -l`."""

import logging
import re
import shutil
import subprocess

from domain.schemas import TaxonomyEntry, TaxonomyId
from infrastructure.config.models import RegistryConfig
from infrastructure.taxonomies.base import TaxonomyAdapter
from infrastructure.taxonomies.registry import register_adapter

logger = logging.getLogger(__name__)

_TOKEN_SPLIT = re.compile(r"[\s,]+")


def parse_iconv_listing(text: str) -> list[TaxonomyEntry]:
    """
    Parse the output of `iconv -l`.

    Two layouts exist:
      - libiconv prints one encoding per line, aliases separated by spaces;
        the first word is the spelling.
      - glibc prints every name on its own (or comma-separated) with a
        trailing "//" (or "/" for names that contain a slash); each name
        is its own entry because glibc does not group aliases.
    """
    tokens = [t for t in _TOKEN_SPLIT.split(text) if t]
    if any(t.endswith("//") for t in tokens):
        names = [t.rstrip("/") for t in tokens if t.endswith("/") and t.rstrip("/")]
        return [TaxonomyEntry(spelling=n) for n in dict.fromkeys(names)]

    entries = []
    for line in text.splitlines():
        words = line.split()
        if not words:
            continue
        entries.append(TaxonomyEntry(spelling=words[0], aliases=tuple(words[1:])))
    return entries


class IconvAdapter(TaxonomyAdapter):
    """Names usable with `iconv -f NAME`."""

    taxonomy = TaxonomyId.ICONV

    def __init__(self, *, binary: str, timeout_seconds: float = 10.0) -> None:
        self.binary = binary
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_cfg(cls, cfg: RegistryConfig) -> "IconvAdapter":
        return cls(binary=cfg.iconv.binary, timeout_seconds=cfg.iconv.timeout_seconds)

    def is_available(self) -> bool:
        return shutil.which(self.binary) is not None

    def enumerate(self) -> list[TaxonomyEntry]:
        proc = subprocess.run(
            [self.binary, "-l"],
            capture_output=True,
            text=True,
            timeout=self.timeout_seconds,
            check=True,
        )
        entries = parse_iconv_listing(proc.stdout)
        logger.debug("iconv -l listed %d encodings", len(entries))
        return entries


register_adapter(TaxonomyId.ICONV, IconvAdapter)
