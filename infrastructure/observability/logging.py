"""
Logging setup with contextvars-based metadata injection.

- Adds the taxonomy being ingested into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.

The library never calls configure_logging itself; applications opt in.
"""

import contextvars
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variable for dynamic log metadata
cv_taxonomy = contextvars.ContextVar("taxonomy", default="-")


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.taxonomy = cv_taxonomy.get() or "-"
        return True


def set_log_context(*, taxonomy: str | None = None) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if taxonomy is not None:
        cv_taxonomy.set(str(taxonomy))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form."""
    return {"taxonomy": str(cv_taxonomy.get() or "-")}


def clear_taxonomy_context() -> None:
    """Reset taxonomy context to default."""
    cv_taxonomy.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] t=%(taxonomy)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | t=%(taxonomy)s | %(message)s"

    console_formatter = logging.Formatter(console_fmt, datefmt="%H:%M:%S")
    file_formatter = logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S")

    ctx_filter = ContextInjectFilter()

    # Console handler (human-readable, INFO+)
    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(console_formatter)
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    # File handler (detailed, DEBUG+, with rotation)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(file_formatter)
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
