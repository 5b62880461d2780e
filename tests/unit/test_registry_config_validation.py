from pathlib import Path

import pytest
from pydantic import ValidationError

from domain.schemas import SpellingConflictPolicy, TaxonomyId
from infrastructure.config import RegistryConfig, load_registry_config
from infrastructure.constants import EQUIVALENCES_FILE, IANA_REGISTRY_FILE


def test_defaults_are_usable_without_a_file() -> None:
    cfg = RegistryConfig()

    assert cfg.registry_file == IANA_REGISTRY_FILE
    assert cfg.equivalences_file == EQUIVALENCES_FILE
    assert cfg.extension_prefix == "x-"
    assert cfg.conflict_policy is SpellingConflictPolicy.LAST_WINS
    assert cfg.taxonomies == [
        TaxonomyId.PYTHON,
        TaxonomyId.ICONV,
        TaxonomyId.MAPPING_DIR,
        TaxonomyId.MAP_REGISTRY,
    ]
    assert cfg.mapping_dir.path is None
    assert cfg.map_registry.path is None


def test_iana_cannot_be_listed_as_a_taxonomy() -> None:
    with pytest.raises(ValidationError, match="authoritative"):
        RegistryConfig(taxonomies=[TaxonomyId.PYTHON, TaxonomyId.IANA])


def test_taxonomies_must_not_repeat() -> None:
    with pytest.raises(ValueError, match="must not repeat"):
        RegistryConfig(taxonomies=["python", "iconv", "python"])


def test_iconv_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        RegistryConfig(iconv={"timeout_seconds": 0})


def test_load_registry_config_anchors_relative_paths(tmp_path: Path) -> None:
    cfg_dir = tmp_path / "conf"
    cfg_dir.mkdir()
    path = cfg_dir / "registry.yaml"
    path.write_text(
        "\n".join(
            [
                "registry_file: data/character-sets.xml",
                "equivalences_file: null",
                "conflict_policy: first_wins",
                "taxonomies: [mapping_dir, map_registry]",
                "mapping_dir:",
                "  path: maps",
                "map_registry:",
                f"  path: {tmp_path / 'REGISTRY'}",
            ]
        ),
        encoding="utf-8",
    )

    cfg = load_registry_config(path)

    assert cfg.registry_file == cfg_dir / "data" / "character-sets.xml"
    assert cfg.equivalences_file is None
    assert cfg.conflict_policy is SpellingConflictPolicy.FIRST_WINS
    assert cfg.taxonomies == [TaxonomyId.MAPPING_DIR, TaxonomyId.MAP_REGISTRY]
    assert cfg.mapping_dir.path == cfg_dir / "maps"
    assert cfg.map_registry.path == tmp_path / "REGISTRY"


def test_load_registry_config_static_entries(tmp_path: Path) -> None:
    path = tmp_path / "registry.yaml"
    path.write_text(
        "taxonomies: [static]\nstatic:\n  entries:\n    - spelling: Acme-Private\n      aliases: [acme]\n",
        encoding="utf-8",
    )

    cfg = load_registry_config(path)

    assert cfg.static.entries[0].spelling == "Acme-Private"
    assert cfg.static.entries[0].aliases == ("acme",)


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "registry.yaml"
    path.write_text("", encoding="utf-8")

    assert load_registry_config(path) == RegistryConfig()


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "registry.yaml"
    path.write_text("- python\n- iconv\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Expected YAML dict"):
        load_registry_config(path)


def test_invalid_values_are_reported_as_value_error(tmp_path: Path) -> None:
    path = tmp_path / "registry.yaml"
    path.write_text("conflict_policy: coin_flip\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid registry config"):
        load_registry_config(path)


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_registry_config(tmp_path / "nope.yaml")
