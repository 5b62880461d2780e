"""Parse the authoritative registry document and equivalence-group data."""

import logging
import xml.etree.ElementTree as ET
from typing import Any

from pydantic import ValidationError

from domain.schemas import CanonicalEntry, EquivalenceGroup

logger = logging.getLogger(__name__)


def _local(tag: object) -> str:
    # "{http://www.iana.org/assignments}record" -> "record"
    return str(tag).rsplit("}", 1)[-1]


def _child_texts(record: ET.Element, name: str) -> list[str]:
    out = []
    for child in record:
        if _local(child.tag) == name and child.text and child.text.strip():
            out.append(child.text.strip())
    return out


def parse_iana_registry(xml_text: str | bytes) -> list[CanonicalEntry]:
    """
    Parse the IANA "Character Sets" XML document into canonical entries.

    This is a pure function - it does NOT perform file I/O.
    The document is read in infrastructure.config.loader.

    A record without a name or without a numeric value is skipped with a
    warning; the rest of the document is still loaded.

    Args:
        xml_text: The registry document

    Returns:
        Entries in document order

    Raises:
        ValueError: If the document is not well-formed XML
    """
    data = xml_text.encode("utf-8") if isinstance(xml_text, str) else xml_text
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise ValueError(f"Malformed charset registry document: {e}") from e

    entries: list[CanonicalEntry] = []
    for n_record, record in enumerate((el for el in root.iter() if _local(el.tag) == "record"), start=1):
        names = _child_texts(record, "name")
        if not names:
            logger.warning("Skipping registry record #%d with no name", n_record)
            continue
        name = names[0]

        values = _child_texts(record, "value")
        if not values or not (values[0].isascii() and values[0].isdigit()):
            logger.warning("Skipping registry record '%s' with no numeric value", name)
            continue

        preferred = _child_texts(record, "preferred_alias")
        entries.append(
            CanonicalEntry(
                key=int(values[0]),
                name=name,
                aliases=tuple(_child_texts(record, "alias")),
                preferred_mime_name=preferred[0] if preferred else None,
            )
        )

    logger.debug("Parsed %d charset registry records", len(entries))
    return entries


def parse_equivalence_groups(data: dict[str, Any]) -> list[EquivalenceGroup]:
    """
    Parse pre-loaded YAML dict into equivalence groups.

    Expected shape::

        groups:
          - head: Shift_JIS
            aliases: [sjis]

    Raises:
        ValueError: If the document has the wrong shape or a group is invalid
    """
    raw_groups = data.get("groups", []) or []
    if not isinstance(raw_groups, list):
        raise ValueError("groups must be a list")

    groups: list[EquivalenceGroup] = []
    for i, raw in enumerate(raw_groups):
        if not isinstance(raw, dict):
            raise ValueError(f"groups[{i}] must be a mapping, got {type(raw).__name__}")
        aliases = raw.get("aliases") or []
        if isinstance(aliases, str):
            aliases = [aliases]
        try:
            groups.append(EquivalenceGroup(head=str(raw.get("head") or ""), aliases=tuple(str(a) for a in aliases)))
        except ValidationError as e:
            raise ValueError(f"Invalid equivalence group #{i}: {e}") from e
    return groups
