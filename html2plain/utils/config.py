"""Configuration management -- reads from environment with sensible defaults."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Centralised settings read once from env vars."""

    # --- Parsing -----------------------------------------------------------
    html_parser: str = field(default_factory=lambda: os.getenv("HTML_PARSER", "html.parser"))

    # --- Fetching ----------------------------------------------------------
    fetch_timeout: float = field(
        default_factory=lambda: float(os.getenv("FETCH_TIMEOUT", "10.0"))
    )

    # --- Logging -----------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))
    analytics_file: str = field(default_factory=lambda: os.getenv("ANALYTICS_FILE", ""))


# Module-level singleton -- import this everywhere.
settings = Settings()
