"""Web page fetcher -- raw HTML over HTTP, optionally converted to text."""

from typing import Dict, Optional

import httpx

from html2plain.text.converter import convert_to_plain_text
from html2plain.utils.config import settings
from html2plain.utils.logger import get_logger

log = get_logger(__name__)


def fetch_page(url: str, timeout: Optional[float] = None) -> Optional[str]:
    """GET a URL and return the body text, or None on any error."""
    try:
        with httpx.Client(timeout=timeout or settings.fetch_timeout, follow_redirects=True) as client:
            resp = client.get(url)
            resp.raise_for_status()
            return resp.text
    except Exception:
        log.warning("Failed to fetch %s", url)
        return None


def fetch_pages(urls: list[str], timeout: Optional[float] = None) -> Dict[str, Optional[str]]:
    """Fetch multiple URLs and return a url -> html mapping."""
    results: Dict[str, Optional[str]] = {}
    for url in urls:
        results[url] = fetch_page(url, timeout=timeout)
    return results


def fetch_plain_text(url: str, timeout: Optional[float] = None) -> Optional[str]:
    """Fetch a page and convert it to plain text, or None if the fetch failed."""
    html = fetch_page(url, timeout=timeout)
    if html is None:
        return None
    return convert_to_plain_text(html)
