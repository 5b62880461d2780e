"""Factory for creating taxonomy adapters."""

import importlib
import logging

from domain.schemas import TaxonomyId
from infrastructure.config.models import RegistryConfig

from .base import TaxonomyAdapter, UnavailableAdapter
from .registry import get_adapter_class

logger = logging.getLogger(__name__)


def _ensure_taxonomy_imported(taxonomy: TaxonomyId) -> None:
    """
    Lazy-import the taxonomy module to trigger `register_adapter(...)`.

    Convention:
      - TaxonomyId value MUST match module filename under infrastructure/taxonomies/
        e.g., TaxonomyId.ICONV.value == "iconv" -> infrastructure/taxonomies/iconv.py
    """
    module_name = f"{__package__}.{taxonomy.value}"
    try:
        importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        if getattr(e, "name", None) == module_name:
            raise RuntimeError(
                f"No taxonomy module found for taxonomy='{taxonomy.value}'. "
                f"Expected file: infrastructure/taxonomies/{taxonomy.value}.py"
            ) from e
        raise


def make_adapter(taxonomy: TaxonomyId, cfg: RegistryConfig) -> TaxonomyAdapter:
    """
    Factory function to create the adapter for one taxonomy.

    The capability probe runs here, once: a taxonomy whose library, tool or
    file is missing gets an UnavailableAdapter, so callers never branch on it.

    Args:
        taxonomy: Which naming convention to build
        cfg: Registry configuration holding the taxonomy's settings
    Returns:
        A TaxonomyAdapter (possibly the unavailable stand-in).
    Raises:
        RuntimeError: If the taxonomy has no adapter module.
    """
    if taxonomy is TaxonomyId.IANA:
        raise ValueError("iana is the authoritative registry, not an adapter taxonomy")

    # 1) Try registry first (maybe already imported elsewhere)
    adapter_cls = get_adapter_class(taxonomy)

    # 2) If not registered yet, import the taxonomy module by convention, then retry
    if adapter_cls is None:
        _ensure_taxonomy_imported(taxonomy)
        adapter_cls = get_adapter_class(taxonomy)

    if adapter_cls is None:
        raise RuntimeError(
            f"Taxonomy '{taxonomy.value}' did not register an adapter. "
            f"Make sure {taxonomy.value}.py calls register_adapter(...)."
        )

    adapter = adapter_cls.from_cfg(cfg)
    if not adapter.is_available():
        logger.debug("Taxonomy %s is not installed or configured", taxonomy.value)
        return UnavailableAdapter(taxonomy)
    return adapter


def make_adapters(cfg: RegistryConfig) -> list[TaxonomyAdapter]:
    """Build adapters for every configured taxonomy, in ingestion order."""
    return [make_adapter(t, cfg) for t in cfg.taxonomies]
