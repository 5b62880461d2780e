"""Configuration and dataset loading from files."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from domain.charsets.loader import parse_equivalence_groups, parse_iana_registry
from domain.schemas import CanonicalEntry, EquivalenceGroup
from infrastructure.config.models import RegistryConfig
from infrastructure.io.fs import ensure_exists

logger = logging.getLogger(__name__)

# Keys of RegistryConfig (and its sub-sections) holding filesystem paths
_PATH_KEYS = ("registry_file", "equivalences_file")
_SECTION_PATH_KEYS = {"mapping_dir": "path", "map_registry": "path"}


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _anchor(value: Any, base_dir: Path) -> Any:
    if value is None:
        return None
    p = Path(str(value)).expanduser()
    return p if p.is_absolute() else base_dir / p


def load_registry_config(path: Path) -> RegistryConfig:
    """
    Load a registry YAML into a RegistryConfig.

    Relative paths inside the file are resolved against the file's directory.
    Keys that are absent keep their defaults.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is not a mapping or fails validation
    """
    data = _load_yaml(path)
    base_dir = path.parent

    for key in _PATH_KEYS:
        if key in data:
            data[key] = _anchor(data[key], base_dir)

    for section, key in _SECTION_PATH_KEYS.items():
        block = data.get(section)
        if isinstance(block, dict) and key in block:
            block[key] = _anchor(block[key], base_dir)

    try:
        cfg = RegistryConfig(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid registry config {path}: {e}") from e

    logger.debug("Loaded registry config from %s (taxonomies=%s)", path, [t.value for t in cfg.taxonomies])
    return cfg


def load_iana_entries(path: Path) -> list[CanonicalEntry]:
    """
    Read the IANA character-sets document and parse it.

    This function handles file I/O, then delegates parsing to domain layer.
    """
    ensure_exists(path, "charset registry document")
    return parse_iana_registry(path.read_bytes())


def load_equivalence_groups(path: Path | None) -> list[EquivalenceGroup]:
    """Load equivalence groups from YAML; None means no groups."""
    if path is None:
        return []
    return parse_equivalence_groups(_load_yaml(path))
