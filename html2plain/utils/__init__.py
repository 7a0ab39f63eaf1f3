"""Utils module -- config, logging."""

from html2plain.utils.config import settings
from html2plain.utils.logger import get_logger, log_conversion

__all__ = ["settings", "get_logger", "log_conversion"]
