"""Process-wide logging for the draft assistant.

Everything goes to a rotating file (DEBUG and up, so individual engine
decisions are kept) and to the console at the requested level.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "draft_assistant.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handler names mark what setup_logging installed on the root logger
FILE_HANDLER_NAME = "draft_assistant_file"
CONSOLE_HANDLER_NAME = "draft_assistant_console"


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> Path:
    """Attach the file and console handlers to the root logger, once.

    Args:
        log_level: Console level name ("DEBUG", "INFO", ...). Unknown names
            fall back to INFO.
        log_dir: Directory for the log file, ``logs/`` at the repo root by
            default.

    Returns:
        Path of the log file.
    """
    log_dir = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR
    log_file = log_dir / LOG_FILE_NAME

    root_logger = logging.getLogger()
    if any(h.get_name() == FILE_HANDLER_NAME for h in root_logger.handlers):
        return log_file  # Already configured

    log_dir.mkdir(parents=True, exist_ok=True)
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    root_logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # File handler with rotation (5MB max, keep 3 backups)
    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    file_handler.set_name(FILE_HANDLER_NAME)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info(
        "Logging initialized (console level=%s, file=%s)",
        logging.getLevelName(level),
        log_file,
    )
    return log_file
