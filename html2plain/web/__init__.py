"""Web module -- page fetching."""

from html2plain.web.fetcher import fetch_page, fetch_pages, fetch_plain_text

__all__ = ["fetch_page", "fetch_pages", "fetch_plain_text"]
