"""
Logging setup for registration runs.

Every record gets two extra fields through a contextvars filter:
- run: short tag derived from the run id
- entity: "<kind>:<identifier>" of the declaration being built/registered
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

cv_run_tag = contextvars.ContextVar("run_tag", default="-")
cv_entity = contextvars.ContextVar("entity", default="-")


def make_run_tag(run_id_full: str, length: int = 8) -> str:
    """Short, stable tag for a run id (BLAKE2s digest prefix)."""
    h = hashlib.blake2s(run_id_full.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Copy the current run tag and entity onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run = cv_run_tag.get() or "-"
        record.entity = cv_entity.get() or "-"
        return True


def set_log_context(*, run_id_full: str | None = None, entity: str | None = None) -> None:
    """Set the run and/or entity printed on subsequent log lines of this context."""
    if run_id_full is not None:
        cv_run_tag.set(make_run_tag(str(run_id_full)))
    if entity is not None:
        cv_entity.set(str(entity))


def clear_entity_context() -> None:
    """Forget the current entity; the run tag is kept."""
    cv_entity.set("-")


CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] r=%(run)s e=%(entity)s | %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | r=%(run)s e=%(entity)s | %(message)s"


def _attach(root: logging.Logger, handler: logging.Handler, level: int, fmt: str, datefmt: str) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    handler.addFilter(ContextInjectFilter())
    root.addHandler(handler)


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 5_000_000,
    backup_count: int = 3,
) -> None:
    """
    Route root logging to the console and, when log_file is given, to a rotating file.

    Calling it again replaces the previously installed handlers.

    Args:
        log_file: Run log path; parent folders are created
        console_level: Minimum level printed on the console
        file_level: Minimum level written to log_file
        max_bytes: Rotation threshold of the file handler
        backup_count: Rotated files kept next to log_file
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # handlers filter by level

    _attach(root, logging.StreamHandler(), console_level, CONSOLE_FORMAT, "%H:%M:%S")

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        _attach(root, file_handler, file_level, FILE_FORMAT, "%Y-%m-%d %H:%M:%S")

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        log_file if log_file is not None else "None",
    )
