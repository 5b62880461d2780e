"""Python codec registry taxonomy."""

import codecs
import encodings
import encodings.aliases
import logging
import pkgutil

from domain.schemas import TaxonomyEntry, TaxonomyId
from infrastructure.config.models import RegistryConfig
from infrastructure.taxonomies.base import SpellingOverride, TaxonomyAdapter
from infrastructure.taxonomies.registry import register_adapter

logger = logging.getLogger(__name__)

# Modules of the encodings package that are not codecs
_NOT_CODECS = frozenset({"aliases"})


def enumerate_codecs(*, include_non_text: bool = False) -> list[TaxonomyEntry]:
    """
    Group the stdlib codecs by their CodecInfo name.

    The spelling of each entry is what codecs.lookup() reports; module
    names and entries of encodings.aliases become aliases. Codecs that
    fail to load on this platform (mbcs, oem on POSIX) are skipped.
    """
    by_module: dict[str, list[str]] = {}
    for alias, module in encodings.aliases.aliases.items():
        by_module.setdefault(module, []).append(alias)
    for mod in pkgutil.iter_modules(encodings.__path__):
        if mod.name.startswith("_") or mod.name in _NOT_CODECS:
            continue
        by_module.setdefault(mod.name, [])

    by_name: dict[str, list[str]] = {}
    for module in sorted(by_module):
        try:
            info = codecs.lookup(module)
        except LookupError:
            logger.debug("Codec module '%s' is not usable here", module)
            continue
        if not include_non_text and not getattr(info, "_is_text_encoding", True):
            continue
        names = by_name.setdefault(info.name, [])
        names.append(module)
        names.extend(sorted(by_module[module]))

    entries = []
    for name, names in by_name.items():
        aliases = tuple(n for n in dict.fromkeys(names) if n != name)
        entries.append(TaxonomyEntry(spelling=name, aliases=aliases))
    return entries


class PythonCodecsAdapter(TaxonomyAdapter):
    """Names usable with str.encode() / bytes.decode()."""

    taxonomy = TaxonomyId.PYTHON

    # cp932 carries the "ms_kanji" alias, which the registry gives to Shift_JIS.
    spelling_overrides = (
        SpellingOverride(canonical="Shift_JIS", spelling="shift_jis"),
        SpellingOverride(canonical="Windows-31J", spelling="cp932"),
    )

    # Codec aliases such as "korean" or "chinese" name a different IANA entry than the codec itself
    overwrite_aliases = False

    def __init__(self, *, include_non_text: bool = False) -> None:
        self.include_non_text = include_non_text

    @classmethod
    def from_cfg(cls, cfg: RegistryConfig) -> "PythonCodecsAdapter":
        return cls(include_non_text=cfg.python.include_non_text)

    def enumerate(self) -> list[TaxonomyEntry]:
        return enumerate_codecs(include_non_text=self.include_non_text)


register_adapter(TaxonomyId.PYTHON, PythonCodecsAdapter)
