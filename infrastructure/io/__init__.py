"""I/O utilities: filesystem operations and report tables."""

from infrastructure.io.datasets import read_table, write_table
from infrastructure.io.fs import ensure_exists, read_text

__all__ = [
    "ensure_exists",
    "read_text",
    "read_table",
    "write_table",
]
