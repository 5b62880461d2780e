"""Synthetic key allocation."""

from domain.schemas import CharsetKey, SyntheticKey


class SyntheticKeyAllocator:
    """Mints keys for taxonomy entries absent from the authoritative registry.

    Serials start at 1 and only ever grow; a released key is never handed out again.
    """

    def __init__(self) -> None:
        self._last = 0

    def allocate(self) -> SyntheticKey:
        self._last += 1
        return SyntheticKey(serial=self._last)

    @property
    def allocated(self) -> int:
        return self._last


def is_synthetic(key: CharsetKey | None) -> bool:
    """True if `key` was minted by an allocator rather than taken from IANA."""
    return isinstance(key, SyntheticKey)
