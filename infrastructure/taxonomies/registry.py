import logging

from domain.schemas import TaxonomyId

from .base import TaxonomyAdapter

logger = logging.getLogger(__name__)

# TaxonomyId -> Adapter class
_ADAPTER_REGISTRY: dict[TaxonomyId, type[TaxonomyAdapter]] = {}


def register_adapter(taxonomy: TaxonomyId, adapter_cls: type[TaxonomyAdapter], *, override: bool = False) -> None:
    """Register an adapter class for a taxonomy.

    This is the plugin hook: taxonomy modules call this at import time.
    """
    if (taxonomy in _ADAPTER_REGISTRY) and not override:
        existing = _ADAPTER_REGISTRY[taxonomy]
        raise RuntimeError(
            f"Adapter already registered for taxonomy={taxonomy.value}: {existing.__name__}. "
            f"Use override=True to replace."
        )
    _ADAPTER_REGISTRY[taxonomy] = adapter_cls
    logger.debug("Registered adapter for taxonomy=%s: %s", taxonomy.value, adapter_cls.__name__)


def get_adapter_class(taxonomy: TaxonomyId) -> type[TaxonomyAdapter] | None:
    """Return the registered adapter class (or None if not registered yet)."""
    return _ADAPTER_REGISTRY.get(taxonomy)
