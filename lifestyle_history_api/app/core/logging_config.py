"""
Logging setup for the lifestyle and history service.

``setup_logging`` attaches a console handler (and a file handler when
``LOG_FILE`` is configured) to the root logger, and brings the uvicorn
loggers to the same level so request logs and service logs agree.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to append log records to.  Empty or ``None``
        disables the file handler.
    """
    root = logging.getLogger()
    if root.handlers:
        # create_app() may run several times in one process (tests)
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).setLevel(numeric_level)
