"""
Observability: structured logging and context management.

Provides:
- Contextual logging with the taxonomy being ingested
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    clear_taxonomy_context,
    configure_logging,
    get_log_context,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "get_log_context",
    "clear_taxonomy_context",
]
