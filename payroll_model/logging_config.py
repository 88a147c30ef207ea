"""
Structured logging configuration for the payroll-model project.

This module provides a centralized way to configure logging across the package
with different log levels and output files for different concerns.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import List, Optional, Tuple

# Define logger names for different concerns
ENGINE_LOGGER = "payroll_model.engines"
REPORTING_LOGGER = "payroll_model.reporting"
DEBUG_LOGGER = "payroll_model.debug"

# Standard log format with module name and line number
LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_NAMES = ("combined.log", "warnings_errors.log", "debug_detail.log")

# Track if logging is already configured and the handlers it installed
_LOGGING_CONFIGURED = False
_installed_handlers: List[Tuple[logging.Logger, logging.Handler]] = []


def clear_logs(log_dir: Path) -> None:
    """
    Remove the log files this module writes in ``log_dir``.

    Args:
        log_dir: Directory containing log files to clear
    """
    for name in LOG_FILE_NAMES:
        log_file = log_dir / name
        if log_file.exists():
            try:
                log_file.unlink()
            except OSError as e:
                logging.getLogger(__name__).warning(f"Could not delete {log_file}: {e}")


def _rotating_handler(path: Path, level: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8',
        mode='a'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    return handler


def _attach(target: logging.Logger, handler: logging.Handler) -> None:
    target.addHandler(handler)
    _installed_handlers.append((target, handler))


def setup_logging(log_dir: Path, debug: bool = False, clear_existing: bool = True) -> None:
    """
    Configure structured logging for the application.

    Creates separate log files for different concerns:
    - combined.log: All messages (INFO+)
    - warnings_errors.log: Warnings and errors (WARNING+)
    - debug_detail.log: Cache recomputes and engine detail (DEBUG, only if debug=True)

    Calling it again after a successful setup does nothing.

    Args:
        log_dir: Directory where log files will be stored
        debug: If True, enables debug logging and creates debug_detail.log
        clear_existing: If True, clears existing log files before starting
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        return

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    if clear_existing:
        clear_logs(log_dir)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Console handler (for warnings and above)
    console = logging.StreamHandler()
    console.setLevel(logging.WARNING)
    console.setFormatter(logging.Formatter("%(levelname)-8s %(message)s"))
    _attach(root_logger, console)
    _attach(root_logger, _rotating_handler(log_dir / "combined.log", logging.INFO))
    _attach(root_logger, _rotating_handler(log_dir / "warnings_errors.log", logging.WARNING))

    if debug:
        debug_handler = _rotating_handler(log_dir / "debug_detail.log", logging.DEBUG)
        for name in (ENGINE_LOGGER, REPORTING_LOGGER, DEBUG_LOGGER):
            named = logging.getLogger(name)
            named.setLevel(logging.DEBUG)
            _attach(named, debug_handler)
            named.propagate = True

    _LOGGING_CONFIGURED = True


def reset_logging() -> None:
    """Detach every handler installed by setup_logging so it can run again."""
    global _LOGGING_CONFIGURED

    closed = set()
    for target, handler in _installed_handlers:
        target.removeHandler(handler)
        if id(handler) not in closed:
            handler.close()
            closed.add(id(handler))
    _installed_handlers.clear()
    for name in (ENGINE_LOGGER, REPORTING_LOGGER, DEBUG_LOGGER):
        logging.getLogger(name).setLevel(logging.NOTSET)
    _LOGGING_CONFIGURED = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance. Library code never forces file output; call
    setup_logging from the application entry point for that.

    Args:
        name: Logger name (e.g., __name__). If None, returns root logger.
    """
    return logging.getLogger(name)


__all__ = [
    "ENGINE_LOGGER",
    "REPORTING_LOGGER",
    "DEBUG_LOGGER",
    "clear_logs",
    "setup_logging",
    "reset_logging",
    "get_logger",
]
