import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {"DEBUG": logging.DEBUG, "INFO": logging.INFO, "WARN": logging.WARNING, "ERROR": logging.ERROR}


def configure_logging(btex_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified btex logging.

    Args:
        btex_home: Path to btex home directory. If None, derived from environment.
        level: Level name as accepted by LogConfig (DEBUG, INFO, WARN, ERROR)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if btex_home is None:
        env_home = os.environ.get("BTEX_HOME")
        btex_home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".btex"

    btex_home.mkdir(parents=True, exist_ok=True)
    log_file = btex_home / "btex.log"

    root_logger = logging.getLogger("btex")
    root_logger.setLevel(_LEVELS.get(level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
