from application.resolver import CharsetResolver
from domain.schemas import SpellingConflictPolicy, SyntheticKey, TaxonomyEntry, TaxonomyId
from infrastructure.config import MappingDirConfig, RegistryConfig, StaticTaxonomyConfig
from infrastructure.taxonomies.base import UnavailableAdapter
from infrastructure.taxonomies.factory import make_adapter
from infrastructure.taxonomies.static import StaticAdapter


class _SecondStatic(StaticAdapter):
    # Stands in for a second taxonomy that shares names with the first
    taxonomy = TaxonomyId.ICONV


def _resolver(*entries: TaxonomyEntry, **cfg_kw) -> CharsetResolver:
    cfg = RegistryConfig(
        taxonomies=[TaxonomyId.STATIC],
        static=StaticTaxonomyConfig(entries=list(entries)),
        **cfg_kw,
    )
    return CharsetResolver(cfg)


def test_known_entry_reuses_iana_key() -> None:
    r = _resolver(TaxonomyEntry(spelling="latin-1-static", aliases=("latin1",)))

    assert r.taxonomy_name(TaxonomyId.STATIC, "ISO-8859-1") == "latin-1-static"
    assert r.canonical_name("latin-1-static") == "ISO_8859-1:1987"
    assert r.reports[0].reused_keys == 1
    assert r.reports[0].synthetic_keys == 0


def test_synthetic_entry_is_hidden_from_canonical_lookups() -> None:
    r = _resolver(TaxonomyEntry(spelling="Acme-Private", aliases=("acme",)))

    assert r.taxonomy_name(TaxonomyId.STATIC, "acme") == "Acme-Private"
    assert r.taxonomy_name(TaxonomyId.STATIC, "x-acme-private") == "Acme-Private"
    assert r.canonical_name("acme") is None
    assert r.preferred_mime_name("acme") is None
    assert "Acme-Private" not in r.all_canonical_names()
    assert r.reports[0].synthetic_keys == 1
    assert r.registry.synthetic_count == 1


def test_synthetic_key_is_returned_but_never_named() -> None:
    r = _resolver(TaxonomyEntry(spelling="Acme-Private", aliases=("acme",)))

    key = r.key_for_name("acme")

    assert isinstance(key, SyntheticKey)
    assert r.key_for_name("x-acme-private") == key
    assert r.name_for_key(key) is None
    assert r.canonical_name("acme") is None
    assert r.key_for_name("utf8") == 106


def test_key_hint_wins_over_names() -> None:
    r = _resolver(
        TaxonomyEntry(spelling="Weird", key_hint=2252),
        TaxonomyEntry(spelling="Unlisted", key_hint=99999),
    )

    assert r.taxonomy_name(TaxonomyId.STATIC, "windows-1252") == "Weird"
    assert r.canonical_name("weird") == "windows-1252"
    # an unknown hint falls back to name matching, then a synthetic key
    assert r.taxonomy_name(TaxonomyId.STATIC, "unlisted") == "Unlisted"
    assert r.canonical_name("unlisted") is None


def test_synthetic_keys_are_shared_between_taxonomies() -> None:
    r = CharsetResolver(
        RegistryConfig(taxonomies=[]),
        adapters=[
            StaticAdapter([TaxonomyEntry(spelling="Acme-Private")]),
            _SecondStatic([TaxonomyEntry(spelling="ACME_PRIVATE")]),
        ],
    )

    assert r.iconv_name("acme-private") == "ACME_PRIVATE"
    assert r.taxonomy_name(TaxonomyId.STATIC, "acme-private") == "Acme-Private"
    assert r.registry.synthetic_count == 1


def test_spelling_conflict_last_wins_by_default() -> None:
    r = _resolver(
        TaxonomyEntry(spelling="first-latin1", aliases=("latin1",)),
        TaxonomyEntry(spelling="second-latin1", aliases=("latin1",)),
    )

    assert r.taxonomy_name(TaxonomyId.STATIC, "latin1") == "second-latin1"
    assert r.reports[0].spelling_conflicts == 1


def test_spelling_conflict_first_wins() -> None:
    r = _resolver(
        TaxonomyEntry(spelling="first-latin1", aliases=("latin1",)),
        TaxonomyEntry(spelling="second-latin1", aliases=("latin1",)),
        conflict_policy=SpellingConflictPolicy.FIRST_WINS,
    )

    assert r.taxonomy_name(TaxonomyId.STATIC, "latin1") == "first-latin1"
    assert r.reports[0].spelling_conflicts == 1


def test_ingestion_never_moves_canonical_names() -> None:
    r = _resolver(TaxonomyEntry(spelling="latin1", aliases=("UTF-8",)))

    assert r.canonical_name("UTF-8") == "UTF-8"
    assert r.taxonomy_name(TaxonomyId.STATIC, "latin1") == "latin1"
    assert r.taxonomy_name(TaxonomyId.STATIC, "UTF-8") is None


def test_missing_resource_gives_unavailable_adapter() -> None:
    cfg = RegistryConfig(taxonomies=[TaxonomyId.MAPPING_DIR], mapping_dir=MappingDirConfig(path=None))

    adapter = make_adapter(TaxonomyId.MAPPING_DIR, cfg)
    assert isinstance(adapter, UnavailableAdapter)

    r = CharsetResolver(cfg)
    assert r.mapping_dir_name("latin1") is None
    assert r.reports[0].available is False
    assert r.available_taxonomies() == [TaxonomyId.IANA]


def test_factory_builds_static_adapter() -> None:
    cfg = RegistryConfig(static=StaticTaxonomyConfig(entries=[TaxonomyEntry(spelling="Acme-Private")]))

    adapter = make_adapter(TaxonomyId.STATIC, cfg)

    assert isinstance(adapter, StaticAdapter)
    assert [e.spelling for e in adapter.enumerate()] == ["Acme-Private"]
