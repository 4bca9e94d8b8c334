import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_home_dir() -> Path:
    """Get rmpatch home directory based on RMPATCH_HOME or default to ~/.rmpatch."""
    home_env = os.environ.get("RMPATCH_HOME")
    if home_env:
        return Path(home_env).expanduser().resolve()
    return Path.home() / ".rmpatch"


def configure_logging(
    home: Path | None = None,
    level: str = "INFO",
    file_name: str = "rmpatch.log",
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure unified rmpatch logging.

    Args:
        home: Path to rmpatch home directory. If None, derived from environment.
        level: Logging level name
        file_name: Log file name inside the home directory
        max_bytes: Rotation size of the log file
        backup_count: Number of rotated files to keep
    """
    global _CONFIGURED
    if _CONFIGURED:
        logging.getLogger("rmpatch").setLevel(logging.getLevelName(level))
        return

    if home is None:
        home = get_home_dir()

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / file_name

    root_logger = logging.getLogger("rmpatch")
    root_logger.setLevel(logging.getLevelName(level))

    file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"rmpatch.{name}")
