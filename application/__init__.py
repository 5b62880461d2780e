"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure: it builds
the registry from the IANA data and the configured taxonomies, answers
lookups and registers aliases.

Most callers only need the module-level functions, which share one lazily
built resolver.
"""

from application.aliases import AliasRegistry
from application.api import (
    add_alias,
    add_iana_alias,
    add_iconv_alias,
    add_map_registry_alias,
    add_mapping_dir_alias,
    add_python_alias,
    all_canonical_names,
    canonical_name,
    get_registry,
    iconv_name,
    key_for_name,
    map_registry_name,
    mapping_dir_name,
    name_for_key,
    preferred_mime_name,
    python_codec_name,
    reset_registry,
    taxonomy_name,
)
from application.report import build_coverage_table, missing_in_taxonomy, save_coverage_table
from application.resolver import CharsetResolver

__all__ = [
    # Main entry points
    "CharsetResolver",
    "AliasRegistry",
    "get_registry",
    "reset_registry",
    # Lookups
    "canonical_name",
    "preferred_mime_name",
    "taxonomy_name",
    "python_codec_name",
    "iconv_name",
    "mapping_dir_name",
    "map_registry_name",
    "key_for_name",
    "name_for_key",
    "all_canonical_names",
    # Aliases
    "add_alias",
    "add_iana_alias",
    "add_python_alias",
    "add_iconv_alias",
    "add_mapping_dir_alias",
    "add_map_registry_alias",
    # Reports
    "build_coverage_table",
    "missing_in_taxonomy",
    "save_coverage_table",
]
