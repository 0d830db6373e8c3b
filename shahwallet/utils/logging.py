import logging
import sys
from typing import Optional

from shahwallet.config import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    level = level or get_settings().LOG_LEVEL
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level.upper())
    # Avoid duplicate handlers on repeated setup
    if not any(isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stdout for h in root.handlers):
        root.addHandler(handler)
