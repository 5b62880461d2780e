"""Charset name normalization utilities."""

import re

# Marker historically put in front of unregistered names ("x-sjis", "x-x-big5").
EXTENSION_PREFIX = "x-"

_NON_ALNUM = re.compile(r"[^0-9A-Za-z]+")


def normalize(raw: object) -> str:
    """
    Fold a charset name into its short-name lookup key.

    Examples:
        >>> normalize("Windows_1252")
        'windows1252'
        >>> normalize("ISO_8859-1:1987")
        'iso885911987'

    Args:
        raw: Raw name (non-string values fold to the empty string)

    Returns:
        ASCII letters and digits of the input, lower-cased
    """
    if not isinstance(raw, str):
        return ""
    # Strip first so that lower() never sees non-ASCII letters.
    return _NON_ALNUM.sub("", raw).lower()


def lookup_candidates(raw: object, prefix: str = EXTENSION_PREFIX) -> list[str]:
    """
    Return the ordered short names to try when resolving `raw`.

    The whole input comes first, followed by the input with one, two, ...
    leading extension prefixes removed. Prefix matching ignores case.

        >>> lookup_candidates("x-x-sjis")
        ['xxsjis', 'xsjis', 'sjis']
    """
    if not isinstance(raw, str):
        return []
    text = raw.strip()
    candidates = [normalize(text)]

    if prefix:
        plen = len(prefix)
        rest = text
        while rest[:plen].lower() == prefix.lower():
            rest = rest[plen:]
            candidates.append(normalize(rest))

    seen: set[str] = set()
    ordered: list[str] = []
    for c in candidates:
        if c and c not in seen:
            seen.add(c)
            ordered.append(c)
    return ordered
