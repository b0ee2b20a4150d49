"""Structured logging configuration using structlog."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Optional

import structlog
from structlog.types import Processor

_SIZE_UNITS = {"KB": 1024, "MB": 1024**2, "GB": 1024**3}


def _build_processors(format_type: str) -> list[Processor]:
    """Processor chain shared by both output formats."""
    processors: list[Processor] = [
        # Picks up request_id bound by the request middleware
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if format_type == "structured":
        # Policy titles and party names are Japanese; keep them readable
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    return processors


def setup_logging(
    level: str = "INFO",
    format_type: str = "structured",
    file_enabled: bool = False,
    file_path: str = "data/policy_admin.log",
    max_file_size: str = "10MB",
    backup_count: int = 5,
) -> None:
    """
    Set up application logging with structlog.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'structured' for JSON lines, 'plain' for console output
        file_enabled: Also write to a rotating log file
        file_path: Path to log file
        max_file_size: Size before rotation, e.g. "10MB"
        backup_count: Number of rotated files to keep
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    structlog.configure(
        processors=_build_processors(format_type),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    if file_enabled:
        file_handler = logging.handlers.RotatingFileHandler(
            filename=_prepare_log_file(file_path),
            maxBytes=parse_file_size(max_file_size),
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        logging.getLogger().addHandler(file_handler)


def _prepare_log_file(file_path: str) -> Path:
    log_file = Path(file_path)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    return log_file


def parse_file_size(size: str) -> int:
    """Convert "512KB", "10MB" or "1GB" (or plain bytes) into a byte count."""
    size = size.strip().upper()
    for suffix, multiplier in _SIZE_UNITS.items():
        if size.endswith(suffix):
            return int(size[: -len(suffix)]) * multiplier
    return int(size)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, usually ``get_logger(__name__)``."""
    return structlog.get_logger(name)


class LoggerMixin:
    """Gives repositories a ``logger`` named after their class."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        return get_logger(self.__class__.__name__)


def log_performance(operation: str, duration_ms: float, **context: Any) -> None:
    """Record how long a document store operation took."""
    get_logger("performance").info(
        "Performance metric",
        operation=operation,
        duration_ms=round(duration_ms, 2),
        **context,
    )


def log_audit_event(action: str, party_id: Optional[str] = None, **context: Any) -> None:
    """
    Record an admin action (login, login_failed, logout, party_cache_refresh).

    The action goes under its own key; structlog reserves ``event`` for the
    log message.

    Args:
        action: What the admin did
        party_id: Party the admin session belongs to, if known
        **context: Additional context
    """
    get_logger("audit").info(
        "Audit event",
        action=action,
        party_id=party_id,
        **context,
    )
