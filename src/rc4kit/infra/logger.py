from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rc4kit.infra.paths import PACKAGE_NAME

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILENAME = f"{PACKAGE_NAME}.log"


def setup_logging(
    log_level: str = "INFO",
    log_dir: str | Path | None = None,
    *,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """Configure the package logger.

    Existing handlers on the package logger are replaced, so calling this
    twice does not duplicate output.

    Args:
        log_level: Level name such as ``"DEBUG"`` or ``"INFO"``.
        log_dir: Directory for a rotating log file. No file handler is added
            when None.
        max_bytes: Rotation threshold for the log file.
        backup_count: Number of rotated files to keep.

    Returns:
        The configured ``rc4kit`` logger.

    Raises:
        ValueError: If ``log_level`` is not a known level name.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")

    logger = logging.getLogger(PACKAGE_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_dir is not None:
        path = Path(log_dir).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path / LOG_FILENAME,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
