"""
Process-wide log setup for the Lucy backend.

Every record goes to stdout at the configured level and, unfiltered, to
``logs/app_YYYYMMDD.log`` so a relay failure can be traced after the
fact even when the console was set to WARNING.
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


# Set once handlers are attached to the root logger
_logging_configured = False


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Attach the console and daily-file handlers to the root logger.

    Safe to call from both the server entry point and the app module;
    only the first call takes effect.

    Args:
        log_level: Threshold for stdout; unknown names fall back to INFO
        log_dir: Where the daily file goes; ``<project>/logs`` when omitted

    Returns:
        The root logger
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger()

    if log_dir is None:
        log_dir = Path(__file__).parent.parent.parent / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    # timestamp | level | module:line | message
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    log_file = log_dir / f"app_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    # Provider SDK and its HTTP stack log every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("groq").setLevel(logging.WARNING)

    _logging_configured = True

    root_logger.debug(f"Logging configured: level={log_level}, file={log_file}")

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass ``__name__`` so records show where they came from."""
    return logging.getLogger(name)
