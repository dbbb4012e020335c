"""Logging helpers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level_name: Any) -> int:
    """Map a level name such as 'debug' to its logging constant, defaulting to INFO."""
    level = getattr(logging, str(level_name).upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(config: Dict[str, Any], level_override: Optional[str] = None) -> None:
    """Configure the root logger from the ``logging`` section of the configuration."""
    level = resolve_level(level_override or config.get("level", "INFO"))
    formatter = logging.Formatter(config.get("format") or DEFAULT_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if config.get("console", True):
        # stdout is reserved for resolved paths
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    file_path = config.get("file")
    if file_path:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.captureWarnings(True)
