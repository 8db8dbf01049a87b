"""
Logging configuration for the lesson booking API.

Everything logs through the root logger: the request middleware, the
order and lesson services and the seeding script.  Records go to the
console and, when ``LOG_FILE`` is set, to that file as well.  A
relative ``LOG_FILE`` is resolved against the working directory, like
``PUBLIC_DIR``, and its directory is created on first use.

pymongo logs server heartbeats and pool events on its own loggers; they
are held at WARNING unless the service itself runs at DEBUG, so order
and decrement records stay readable.  Handlers are installed once, so
calling ``create_app`` repeatedly (as the test suite does) does not
duplicate them.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DRIVER_LOGGER = "pymongo"


def resolve_log_file(logfile: Optional[str]) -> Optional[Path]:
    """Return the absolute path for ``logfile``, or ``None`` when unset."""
    if not logfile or not logfile.strip():
        return None
    return Path(logfile.strip()).expanduser().resolve()


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> Optional[Path]:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        File to copy log records to (``settings.log_file``).  Blank
        means console only.

    Returns the resolved log file path when a file handler was added.
    """
    root = logging.getLogger()
    if root.handlers:
        return None

    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)
    if numeric_level > logging.DEBUG:
        logging.getLogger(DRIVER_LOGGER).setLevel(max(numeric_level, logging.WARNING))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    log_path = resolve_log_file(logfile)
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    return log_path
