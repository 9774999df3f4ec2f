import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from . import config

_DEFAULT_LEVEL = os.getenv("SPRITECOMPOSER_LOG_LEVEL", "INFO").upper()
LOG_NAME = "spritecomposer.log"


def get_log_file() -> str:
    return os.path.join(str(config.LOGS_DIR), LOG_NAME)


def configure_logging(
    level: Optional[str] = None,
    *,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> str:
    desired_level = getattr(logging, (level or _DEFAULT_LEVEL).upper(), logging.INFO)
    root = logging.getLogger()
    log_file = get_log_file()
    if getattr(configure_logging, "_configured", False):
        root.setLevel(desired_level)
        return log_file

    os.makedirs(os.path.dirname(log_file), exist_ok=True)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    root.setLevel(desired_level)
    formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] %(name)s: %(message)s")

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    configure_logging._configured = True  # type: ignore[attr-defined]
    root.debug("Logging configured. Log file: %s", log_file)
    return log_file
