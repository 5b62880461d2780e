"""Coverage report: which IANA charsets each taxonomy can name."""

import logging
from pathlib import Path

import pandas as pd

from application.constants import CANONICAL_COL, KEY_COL, MIME_COL
from application.resolver import CharsetResolver
from domain.schemas import TaxonomyId
from infrastructure.io import write_table

logger = logging.getLogger(__name__)


def build_coverage_table(resolver: CharsetResolver) -> pd.DataFrame:
    """
    Build one row per IANA charset with each taxonomy's spelling.

    Columns in the result:
      - key: IANA MIBenum
      - canonical_name: IANA display name
      - preferred_mime_name: preferred MIME name, if the registry gives one
      - one column per ingested taxonomy (named by its TaxonomyId value),
        holding that taxonomy's spelling or None

    Unavailable taxonomies get no column.
    """
    resolver.load()
    taxonomies = [t for t in resolver.available_taxonomies() if t is not TaxonomyId.IANA]
    spellings = {t: resolver.registry.spellings(t) for t in taxonomies}

    rows: list[dict[str, object]] = []
    for entry in resolver.registry.canonical_entries():
        row: dict[str, object] = {
            KEY_COL: entry.key,
            CANONICAL_COL: entry.name,
            MIME_COL: entry.preferred_mime_name,
        }
        for t in taxonomies:
            row[t.value] = spellings[t].get(entry.key)
        rows.append(row)

    columns = [KEY_COL, CANONICAL_COL, MIME_COL, *(t.value for t in taxonomies)]
    return pd.DataFrame(rows, columns=columns)


def missing_in_taxonomy(resolver: CharsetResolver, taxonomy: TaxonomyId | str) -> list[str]:
    """Canonical names that `taxonomy` has no spelling for, in MIBenum order."""
    taxonomy = TaxonomyId(taxonomy)
    if taxonomy is TaxonomyId.IANA:
        return []
    resolver.load()
    spellings = resolver.registry.spellings(taxonomy)
    return [e.name for e in resolver.registry.canonical_entries() if e.key not in spellings]


def save_coverage_table(resolver: CharsetResolver, path: Path) -> pd.DataFrame:
    """Build the coverage table and write it to `path` (.csv or .json)."""
    df = build_coverage_table(resolver)
    write_table(df, path)

    covered = {c: int(df[c].notna().sum()) for c in df.columns[3:]}
    logger.info("Wrote coverage of %d charsets to %s (covered per taxonomy: %s)", len(df), path, covered)
    return df
