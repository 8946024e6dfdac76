"""Logging for Scilla: a rotating log file plus terse console output."""

import logging
import os
from logging.handlers import RotatingFileHandler

from scilla.core.errors import ConfigIOError

LOG_LEVEL_ENV = "SCILLA_LOG_LEVEL"

_DEFAULT_LOG_DIR = os.path.expanduser("~/.local/share/scilla/logs")
_LOG_FILE = "scilla.log"
_MAX_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 3


def default_log_level() -> str:
    """Log level from SCILLA_LOG_LEVEL, WARNING when unset."""
    return os.environ.get(LOG_LEVEL_ENV) or "WARNING"


def setup_logging(
    level: str | None = None,
    log_dir: str | None = None,
) -> str:
    """Send log records to ``<log_dir>/scilla.log`` and, from WARNING up, to the console.

    Only the first call installs handlers; later calls change the level.
    Returns the log file path. Raises ConfigIOError when the log
    directory or file cannot be created.
    """
    level = level or default_log_level()
    log_dir = log_dir or _DEFAULT_LOG_DIR
    log_path = os.path.join(log_dir, _LOG_FILE)
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    if root.handlers:
        return log_path

    try:
        os.makedirs(log_dir, exist_ok=True)
        fh = RotatingFileHandler(log_path, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT)
    except OSError as e:
        raise ConfigIOError(log_dir, e) from e

    fh.setLevel(numeric_level)
    fh.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(fh)

    # Console stays quiet below WARNING so records don't land between prompts
    ch = logging.StreamHandler()
    ch.setLevel(max(numeric_level, logging.WARNING))
    ch.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(ch)

    return log_path


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
