"""Logging configuration with file rotation."""

import logging
import logging.handlers
from pathlib import Path

from weather_station.config import settings


def setup_logging(level: int | str | None = None, log_dir: str | Path | None = None,
                  console: bool = False) -> logging.Logger:
    """Configure the package logger with a rotating file handler.

    The console handler is opt-in: while the UI is running the terminal
    is owned by Textual and stray log lines would corrupt the screen.
    """
    level = level if level is not None else settings.log_level
    log_dir = Path(log_dir if log_dir is not None else settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "app.log"

    fmt = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Rotating file handler: 5 MB max, 3 backups
    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8",
    )
    file_handler.setFormatter(fmt)
    file_handler.setLevel(level)

    root = logging.getLogger("weather_station")
    root.setLevel(level)
    root.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(fmt)
        console_handler.setLevel(level)
        root.addHandler(console_handler)

    return root
