import pytest

from application.resolver import CharsetResolver
from domain.schemas import TaxonomyId
from infrastructure.config import RegistryConfig, load_iana_entries
from infrastructure.constants import IANA_REGISTRY_FILE


def _resolver() -> CharsetResolver:
    # IANA data and equivalence groups only; no external taxonomies
    return CharsetResolver(RegistryConfig(taxonomies=[]))


def test_canonical_and_mime_names() -> None:
    r = _resolver()

    assert r.canonical_name("latin1") == "ISO_8859-1:1987"
    assert r.preferred_mime_name("latin1") == "ISO-8859-1"
    assert r.canonical_name("UTF-8") == "UTF-8"
    assert r.canonical_name("cp1252") == "windows-1252"


def test_every_canonical_name_resolves_to_itself() -> None:
    r = _resolver()

    for entry in load_iana_entries(IANA_REGISTRY_FILE):
        assert r.canonical_name(entry.name) == entry.name
        assert r.key_for_name(entry.name) == entry.key


def test_punctuation_and_case_do_not_matter() -> None:
    r = _resolver()

    for variant in ["ISO-8859-1", "iso_8859_1", "ISO 8859 1", "Iso8859.1", "LATIN-1"]:
        assert r.canonical_name(variant) == "ISO_8859-1:1987"


def test_extension_prefix_is_stripped() -> None:
    r = _resolver()

    for variant in ["sjis", "x-sjis", "x-x-sjis", "X-SJIS", "Shift_JIS"]:
        assert r.canonical_name(variant) == "Shift_JIS"


def test_extension_prefix_only_tried_after_full_name() -> None:
    r = _resolver()
    assert r.canonical_name("x-sjis") == "Shift_JIS"

    assert r.add_iana_alias("x-sjis", "UTF-8") == "UTF-8"

    assert r.canonical_name("x-sjis") == "UTF-8"
    assert r.canonical_name("x-x-sjis") == "UTF-8"
    assert r.canonical_name("sjis") == "Shift_JIS"


def test_key_lookups() -> None:
    r = _resolver()

    assert r.key_for_name("ANSI_X3.4-1968") == 3
    assert r.key_for_name("us-ascii") == 3
    assert r.name_for_key(3) == "ANSI_X3.4-1968"
    assert r.name_for_key(1015) == "UTF-16"
    assert r.name_for_key("1015") == "UTF-16"
    assert r.name_for_key(" 106 ") == "UTF-8"


@pytest.mark.parametrize("key", [None, True, 3.0, "abc", "-3", "", "²", 999999])
def test_name_for_key_rejects_bad_keys(key: object) -> None:
    assert _resolver().name_for_key(key) is None


@pytest.mark.parametrize("text", [None, "", "   ", 42, b"utf-8", "no-such-charset"])
def test_lookups_return_none_for_unresolvable_input(text: object) -> None:
    r = _resolver()

    assert r.canonical_name(text) is None
    assert r.preferred_mime_name(text) is None
    assert r.key_for_name(text) is None
    assert r.taxonomy_name(TaxonomyId.IANA, text) is None
    assert r.python_codec_name(text) is None


def test_iana_taxonomy_is_the_canonical_lookup() -> None:
    r = _resolver()

    for text in ["latin1", "sjis", "csUTF8", "x-cp1252"]:
        assert r.taxonomy_name(TaxonomyId.IANA, text) == r.canonical_name(text)
        assert r.taxonomy_name("iana", text) == r.canonical_name(text)


def test_unknown_taxonomy_returns_none() -> None:
    r = _resolver()

    assert r.taxonomy_name("klingon", "latin1") is None
    assert r.taxonomy_name(None, "latin1") is None
    assert r.taxonomy_name(42, "latin1") is None
    assert r.taxonomy_name("iana", "latin1") == "ISO_8859-1:1987"


def test_unconfigured_taxonomies_return_none() -> None:
    r = _resolver()

    assert r.python_codec_name("latin1") is None
    assert r.iconv_name("latin1") is None
    assert r.mapping_dir_name("latin1") is None
    assert r.map_registry_name("latin1") is None


def test_all_canonical_names() -> None:
    names = _resolver().all_canonical_names()

    assert len(names) == 257
    assert {"UTF-8", "Shift_JIS", "ANSI_X3.4-1968"} <= names


def test_load_is_idempotent() -> None:
    r = _resolver()
    assert not r.loaded

    r.load()
    count = r.registry.short_name_count
    r.load()
    r.canonical_name("latin1")

    assert r.loaded
    assert r.registry.short_name_count == count
    assert r.available_taxonomies() == [TaxonomyId.IANA]


def test_equivalence_groups_can_be_disabled() -> None:
    r = CharsetResolver(RegistryConfig(taxonomies=[], equivalences_file=None))

    assert r.canonical_name("sjis") is None
    assert r.canonical_name("Shift_JIS") == "Shift_JIS"


def test_custom_extension_prefix() -> None:
    r = CharsetResolver(RegistryConfig(taxonomies=[], extension_prefix="vnd."))

    assert r.canonical_name("vnd.vnd.UTF-8") == "UTF-8"
    assert r.canonical_name("x-sjis") is None


def test_windows_names_match_across_punctuation() -> None:
    r = _resolver()

    assert r.canonical_name("windows-1252") == r.canonical_name("Windows_1252") == "windows-1252"


def test_failed_single_letter_alias() -> None:
    r = _resolver()

    assert r.add_alias(TaxonomyId.IANA, "x", "not-a-real-charset") is None
    assert r.canonical_name("x") is None
