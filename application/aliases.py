"""User-extensible aliases layered on the short-name index."""

import logging
from typing import TYPE_CHECKING

from domain.schemas import TaxonomyId

if TYPE_CHECKING:
    from application.resolver import CharsetResolver

logger = logging.getLogger(__name__)


class AliasRegistry:
    """
    Adds short names that point at an encoding some taxonomy already knows.

    The target is resolved first (through the taxonomy's own lookup, or the
    canonical lookup for IANA). Only a resolved target changes the index, so
    a failed registration leaves no trace. Aliases of aliases compose:
    registering `b -> a` after `a -> Shift_JIS` makes `b` resolve to Shift_JIS.
    """

    def __init__(self, resolver: "CharsetResolver") -> None:
        self._resolver = resolver

    def add_alias(self, taxonomy: object, alias: str, target: str) -> str | None:
        """
        Make `alias` resolve to whatever `target` resolves to in `taxonomy`.

        Args:
            taxonomy: Taxonomy the target is looked up in
            alias: New name to register
            target: Existing name (or alias) in that taxonomy

        Returns:
            The taxonomy's name for the target, or None if the target or the
            taxonomy is unknown
        """
        try:
            taxonomy = TaxonomyId(taxonomy)
        except ValueError:
            logger.warning("Attempt to alias '%s' in unknown taxonomy %r", alias, taxonomy)
            return None
        self._resolver.load()
        return self.register(taxonomy, alias, target, failure_level=logging.WARNING)

    def register(
        self,
        taxonomy: TaxonomyId,
        alias: str,
        target: str,
        *,
        failure_level: int = logging.WARNING,
        protect_canonical: bool = False,
    ) -> str | None:
        """
        Like add_alias, without triggering a load. Used while the registry is built.

        With protect_canonical=True an alias that is another entry's canonical
        name is refused instead of moving that name.
        """
        hit = self._resolver.lookup(taxonomy, target)
        if hit is None:
            logger.log(
                failure_level,
                "Attempt to alias '%s' to unknown %s charset '%s'",
                alias,
                taxonomy.value,
                target,
            )
            return None
        key, name = hit
        if not self._resolver.registry.bind(alias, key, protect_canonical=protect_canonical):
            logger.log(failure_level, "Alias '%s' was not registered for %s name '%s'", alias, taxonomy.value, name)
            return None
        logger.debug("Aliased '%s' to %s name '%s'", alias, taxonomy.value, name)
        return name

    def add_iana_alias(self, alias: str, target: str) -> str | None:
        return self.add_alias(TaxonomyId.IANA, alias, target)

    def add_python_alias(self, alias: str, target: str) -> str | None:
        return self.add_alias(TaxonomyId.PYTHON, alias, target)

    def add_iconv_alias(self, alias: str, target: str) -> str | None:
        return self.add_alias(TaxonomyId.ICONV, alias, target)

    def add_mapping_dir_alias(self, alias: str, target: str) -> str | None:
        return self.add_alias(TaxonomyId.MAPPING_DIR, alias, target)

    def add_map_registry_alias(self, alias: str, target: str) -> str | None:
        return self.add_alias(TaxonomyId.MAP_REGISTRY, alias, target)
