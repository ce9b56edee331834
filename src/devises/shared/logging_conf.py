# src/devises/shared/logging_conf.py
"""
Logging Configuration - Logging Setup for the CLI and Library Use

Configures the root logger once for the ``devises`` command. Console output
goes to stderr so stdout only carries command results; an optional rotating
file handler is added when LOG_FILE or LOG_DIR is set.

Files that USE this module:
- devises.app (configure_from_settings at startup)
- tests.test_logging_conf (unit tests)

Files that this module USES:
- devises.config (Settings, only for configure_from_settings)
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

if TYPE_CHECKING:
    from devises.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "devises.log"

# urllib3 logs every request URL at DEBUG, access_key query parameter included
QUIET_LOGGERS = ("urllib3",)


def _log_file_path(log_file: Optional[Union[str, Path]], log_dir: Optional[Union[str, Path]]) -> Optional[Path]:
    if log_dir:
        return Path(log_dir) / LOG_FILE_NAME
    if log_file:
        return Path(log_file)
    return None


def _build_handlers(
    console: bool,
    file_path: Optional[Path],
    max_bytes: int,
    backup_count: int,
) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if file_path is not None:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(file_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        )
    if not handlers:
        # Errors still need somewhere to go
        handlers.append(logging.StreamHandler(sys.stderr))
    return handlers


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    console: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> Optional[Path]:
    """
    Configure the root logger, replacing any handlers already installed.

    Args:
        level: Logging level or level name (default: logging.INFO)
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files; takes precedence over log_file
        console: Whether to log to stderr (default: True)
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of rotated files to keep (default: 5)

    Returns:
        Path of the log file, or None when logging only to the console
    """
    file_path = _log_file_path(log_file, log_dir)
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers = _build_handlers(console, file_path, max_bytes, backup_count)
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s, console=%s, file=%s", level, console, file_path
    )
    return file_path


def configure_from_settings(settings: "Settings") -> Optional[Path]:
    """Configure logging from the LOG_* settings."""
    return setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        console=settings.log_console,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
