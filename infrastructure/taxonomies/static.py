"""In-memory taxonomy for embedding applications and tests."""

from collections.abc import Iterable

from domain.schemas import TaxonomyEntry, TaxonomyId
from infrastructure.config.models import RegistryConfig
from infrastructure.taxonomies.base import TaxonomyAdapter
from infrastructure.taxonomies.registry import register_adapter


class StaticAdapter(TaxonomyAdapter):
    """Fixed list of entries; always available."""

    taxonomy = TaxonomyId.STATIC

    def __init__(self, entries: Iterable[TaxonomyEntry] = ()) -> None:
        self.entries = list(entries)

    @classmethod
    def from_cfg(cls, cfg: RegistryConfig) -> "StaticAdapter":
        return cls(cfg.static.entries)

    def enumerate(self) -> list[TaxonomyEntry]:
        return list(self.entries)


register_adapter(TaxonomyId.STATIC, StaticAdapter)
