"""
Logging setup for the stemmer service and scripts.

Every start writes to its own session file next to the configured path
(logs/porter2.log -> logs/porter2_20240101_120000.log). The console gets a
one-line format at the requested level, the session file gets everything
with source locations.
"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Session files kept on disk, the current one included
LOG_RETENTION = 5

MAX_LOG_BYTES = 10 * 1024 * 1024

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s'

# Chatty library loggers, raised to WARNING
QUIET_LOGGERS = ("uvicorn.access", "httpx")


def _prune_session_logs(log_path: Path, keep: int) -> None:
    """Delete the oldest session files so that `keep` remain after this start."""
    sessions = sorted(log_path.parent.glob(f"{log_path.stem}_*.log"), reverse=True)
    for old_log in sessions[keep - 1:]:
        try:
            old_log.unlink()
        except FileNotFoundError:
            pass


def setup_logging(log_file: str = "logs/porter2.log", console_level: int = logging.INFO, file_level: int = logging.DEBUG) -> Path:
    """
    Point the root logger at the console and a new session file.

    Args:
        log_file: Base log path; the session file gets a timestamp suffix
        console_level: Console threshold (LOG_LEVEL in the service)
        file_level: Session file threshold

    Returns:
        Path of the session log file
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _prune_session_logs(log_path, LOG_RETENTION)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    file_handler = RotatingFileHandler(
        session_log,
        mode='a',
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_RETENTION,
        encoding='utf-8'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.info(f"Logging to {session_log} (console={logging.getLevelName(console_level)}, file={logging.getLevelName(file_level)})")

    return session_log
