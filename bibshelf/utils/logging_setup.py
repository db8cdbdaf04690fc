"""Logging configuration for the CLI and the web app."""
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from ..config import Config

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def resolve_level(level: Union[int, str, None]) -> int:
    """Accept a logging level as an int or a name like "debug"; unknown names mean INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level or "").upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(log_dir: Optional[str] = None, level: Union[int, str, None] = None) -> Optional[Path]:
    """
    Route log records to stderr and, when a log directory is available, to a
    timestamped `bibshelf_*.log` file inside it.

    Defaults come from Config (BIBSHELF_LOG_DIR, LOG_LEVEL). Pass an empty
    string as log_dir to log to the console only. Replaces any handlers
    installed by an earlier call. Returns the log file path, or None.
    """
    config = Config()
    if log_dir is None:
        log_dir = config.LOG_DIR
    level = resolve_level(level if level is not None else config.LOG_LEVEL)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    log_file = None
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        log_file = log_path / f"bibshelf_{datetime.now():%Y%m%d_%H%M%S}.log"
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT,
                        handlers=handlers, force=True)
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))

    if log_file:
        logging.info(f"Logging to {log_file} at {logging.getLevelName(level)}")
    return log_file


def log_operation(operation: str, details: str, level: int = logging.INFO) -> None:
    """Log an operation with details."""
    logging.log(level, f"{operation}: {details}")
