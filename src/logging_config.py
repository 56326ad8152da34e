import logging
import logging.handlers
from pathlib import Path
from typing import Optional

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "hero_ranking.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    for handler in logger.handlers:
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            if Path(handler.baseFilename) == log_file.resolve():
                return True
    return False


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[Path] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Configure logging for the hero ranking tools.

    Attaches a rotating file handler (always DEBUG) and a console handler at
    *log_level* to the root logger, or to *logger_name* when given. Calling
    it again for the same log file leaves the handlers untouched.
    """
    log_dir = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    logger = logging.getLogger(logger_name)
    if _has_file_handler(logger, log_file):
        return logger  # Already configured

    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    # File handler with rotation (5MB max, keep 3 backups)
    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info("Logging initialized (level=%s, file=%s)", log_level, log_file)
    return logger
