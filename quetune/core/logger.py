import logging
import os
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional


def default_log_dir() -> Path:
    """Resolve the log directory from the environment."""
    override = os.environ.get("QUETUNE_LOG_DIR")
    if override:
        return Path(override).expanduser()
    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache:
        return Path(xdg_cache) / "quetune"
    return Path.home() / ".cache" / "quetune"


def setup_logging(log_dir: Optional[Path] = None, level: Optional[str] = None):
    """Configure logging for the entire application."""
    log_dir = Path(log_dir) if log_dir else default_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "quetune.log"
    level_name = (level or os.environ.get("QUETUNE_LOG_LEVEL") or "INFO").upper()

    # Configure root logger
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            RotatingFileHandler(
                log_file,
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
                errors="backslashreplace",
            ),
            # No StreamHandler: stdout belongs to urwid
        ],
    )

    # Suppress noisy libraries
    logging.getLogger("urwid").setLevel(logging.WARNING)

    return logging.getLogger("Quetune")
