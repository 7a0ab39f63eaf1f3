"""Structured logging and per-conversion analytics logging."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a configured logger (creates handler only once per name)."""
    from html2plain.utils.config import settings

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    effective_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logger.setLevel(effective_level)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)

    # Optional file handler
    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(fmt))
        logger.addHandler(fh)

    return logger


def log_conversion(
    source: str,
    input_chars: int,
    output_chars: int,
    elapsed_ms: float,
    analytics_file: Optional[str] = None,
) -> bool:
    """Append a single conversion record to the JSONL analytics file.

    Returns False when no analytics file is configured.
    """
    from html2plain.utils.config import settings

    target = analytics_file if analytics_file is not None else settings.analytics_file
    if not target:
        return False

    record = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "source": source,
        "input_chars": input_chars,
        "output_chars": output_chars,
        "elapsed_ms": round(elapsed_ms, 1),
    }

    path = Path(target)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(record) + "\n")
    return True
