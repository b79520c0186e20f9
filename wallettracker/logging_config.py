"""Logging setup for the wallet tracker.

Every module logs through get_logger(), which places it under the
"wallettracker" namespace. Nothing is emitted anywhere until
configure_logging() installs a handler, normally the terminal's timestamped
log file.

Line format:
    2026-01-31 12:00:00 [INFO] [Terminal] Successful deposit of 100 to wallet wallet_1
"""

__all__ = [
    "LOG_FORMAT",
    "DATE_FORMAT",
    "ComponentFilter",
    "get_logger",
    "configure_logging",
    "reset_logging",
    "log_section_header",
    "timestamped_log_path",
]

import logging
import sys
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(component)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGER_PREFIX = "wallettracker"


class ComponentFilter(logging.Filter):
    """Stamps a `component` field on records that don't already carry one."""

    def __init__(self, component: str):
        super().__init__()
        self.component = component

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "component"):
            record.component = self.component
        return True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the wallettracker namespace."""
    if name == _LOGGER_PREFIX or name.startswith(f"{_LOGGER_PREFIX}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


def timestamped_log_path(log_dir: Union[str, Path], prefix: str = "terminal") -> Path:
    """Create log_dir if needed and return <log_dir>/<prefix>_YYYYmmdd_HHMMSS.log."""
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return directory / f"{prefix}_{stamp}.log"


_configured = False
_lock = threading.Lock()


def configure_logging(
    *,
    level: Union[int, str] = logging.INFO,
    component: str = "Terminal",
    log_file: Optional[Union[str, Path]] = None,
    stream: Any = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Configure the wallettracker logger hierarchy (idempotent).

    Exactly one handler is installed: the explicit `handler` if given,
    otherwise a FileHandler on `log_file`, otherwise a StreamHandler on
    `stream` (stderr by default).

    Args:
        level: Minimum level, as an int or a level name such as "INFO"
        component: Value for the [component] column of each line
        log_file: Path of a log file to append to
        stream: Stream for the fallback StreamHandler
        handler: Pre-built handler, mostly for tests

    Returns:
        logging.Logger: The configured "wallettracker" logger

    Raises:
        OSError: If the log file can't be opened
    """
    global _configured
    root_logger = logging.getLogger(_LOGGER_PREFIX)
    with _lock:
        if _configured:
            return root_logger

        # Handler first: a failed open leaves logging unconfigured and
        # the next call starts clean.
        if handler is not None:
            h = handler
        elif log_file is not None:
            h = logging.FileHandler(log_file, encoding="utf-8")
        else:
            h = logging.StreamHandler(stream or sys.stderr)

        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
        h.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        h.addFilter(ComponentFilter(component))

        root_logger.setLevel(level)
        root_logger.propagate = False
        root_logger.addHandler(h)
        _configured = True
    return root_logger


def reset_logging() -> None:
    """Reset logging configuration. FOR TESTING ONLY."""
    global _configured
    with _lock:
        _configured = False
    logger = logging.getLogger(_LOGGER_PREFIX)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def log_section_header(section: str, logger: Optional[logging.Logger] = None) -> None:
    """Log a `========== section ==========` marker line."""
    (logger or get_logger(_LOGGER_PREFIX)).info("========== %s ==========", section)
