"""Process-wide default resolver and module-level lookup functions."""

import logging
import os
import threading
from pathlib import Path

from application.resolver import CharsetResolver
from domain.schemas import CharsetKey
from infrastructure.config import RegistryConfig, load_registry_config
from infrastructure.constants import CONFIG_ENV_VAR

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_default: CharsetResolver | None = None


def _default_config() -> RegistryConfig:
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return RegistryConfig()
    logger.info("Using registry config from $%s=%s", CONFIG_ENV_VAR, path)
    return load_registry_config(Path(path))


def get_registry() -> CharsetResolver:
    """
    Return the shared resolver, building it on first use.

    The configuration comes from the YAML file named by
    $CHARSET_REGISTRY_CONFIG, or the defaults when it is unset.
    """
    global _default
    with _lock:
        if _default is None:
            _default = CharsetResolver(_default_config()).load()
        return _default


def reset_registry() -> None:
    """Drop the shared resolver; the next lookup builds a fresh one."""
    global _default
    with _lock:
        _default = None


def canonical_name(text: object) -> str | None:
    return get_registry().canonical_name(text)


def preferred_mime_name(text: object) -> str | None:
    return get_registry().preferred_mime_name(text)


def taxonomy_name(taxonomy: object, text: object) -> str | None:
    return get_registry().taxonomy_name(taxonomy, text)


def python_codec_name(text: object) -> str | None:
    return get_registry().python_codec_name(text)


def iconv_name(text: object) -> str | None:
    return get_registry().iconv_name(text)


def mapping_dir_name(text: object) -> str | None:
    return get_registry().mapping_dir_name(text)


def map_registry_name(text: object) -> str | None:
    return get_registry().map_registry_name(text)


def key_for_name(text: object) -> CharsetKey | None:
    return get_registry().key_for_name(text)


def name_for_key(key: object) -> str | None:
    return get_registry().name_for_key(key)


def all_canonical_names() -> set[str]:
    return get_registry().all_canonical_names()


def add_alias(taxonomy: object, alias: str, target: str) -> str | None:
    return get_registry().add_alias(taxonomy, alias, target)


def add_iana_alias(alias: str, target: str) -> str | None:
    return get_registry().add_iana_alias(alias, target)


def add_python_alias(alias: str, target: str) -> str | None:
    return get_registry().add_python_alias(alias, target)


def add_iconv_alias(alias: str, target: str) -> str | None:
    return get_registry().add_iconv_alias(alias, target)


def add_mapping_dir_alias(alias: str, target: str) -> str | None:
    return get_registry().add_mapping_dir_alias(alias, target)


def add_map_registry_alias(alias: str, target: str) -> str | None:
    return get_registry().add_map_registry_alias(alias, target)
