"""
Logging configuration for the service.

``setup_logging`` installs a console handler (and optionally a file
handler) on the root logger, so that the API modules, uvicorn and the
reset CLI all write through the same format.  Calling it again is a
no‑op.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Per‑request access lines are left to uvicorn's own access log.
QUIET_LOGGERS = ("httpx", "httpcore", "urllib3")


def _attach(logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives a copy of every record.  Parent
        directories are created when missing.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    _attach(root, logging.StreamHandler(), formatter)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _attach(root, logging.FileHandler(log_path, encoding="utf-8"), formatter)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
