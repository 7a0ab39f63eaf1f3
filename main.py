"""CLI entry point for html2plain."""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from html2plain.text.converter import convert_document
from html2plain.text.tree import parse_html
from html2plain.utils.config import settings
from html2plain.utils.logger import get_logger, log_conversion
from html2plain.web.fetcher import fetch_page

log = get_logger(__name__)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_source(source: str) -> Optional[str]:
    """Return the markup behind *source*, or None if it cannot be read."""
    if source == "-":
        return sys.stdin.read()
    if is_url(source):
        return fetch_page(source)
    try:
        return Path(source).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        log.debug("Cannot read %s: %s", source, exc)
        return None


def convert_source(source: str, parser: Optional[str] = None) -> Optional[str]:
    """Read and convert one source; None if it could not be read."""
    markup = read_source(source)
    if markup is None:
        return None

    started = time.time()
    text = convert_document(parse_html(markup, parser))
    elapsed_ms = (time.time() - started) * 1000
    log_conversion(source, len(markup), len(text), elapsed_ms)
    return text


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Convert HTML to readable plain text")
    parser.add_argument("sources", nargs="*", default=["-"],
                        help="HTML file, http(s) URL, or '-' for stdin (default)")
    parser.add_argument("--output", "-o", help="Write the text here instead of stdout")
    parser.add_argument("--parser", default=None,
                        help=f"BeautifulSoup tree builder (default: {settings.html_parser})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable DEBUG logging")
    args = parser.parse_args(argv)

    if args.verbose:
        for name in list(logging.root.manager.loggerDict):
            if name == "__main__" or name == "main" or name.startswith("html2plain"):
                logging.getLogger(name).setLevel(logging.DEBUG)

    status = 0
    chunks: List[str] = []
    for source in args.sources:
        text = convert_source(source, args.parser)
        if text is None:
            print(f"Error: cannot read {source}", file=sys.stderr)
            status = 1
            continue
        chunks.append(text)

    output = "".join(chunks)
    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            f.write(output)
    else:
        # bytes, so a platform newline translation cannot rewrite the CRLFs
        sys.stdout.flush()
        sys.stdout.buffer.write(output.encode("utf-8"))
        sys.stdout.buffer.flush()
    return status


if __name__ == "__main__":
    sys.exit(main())
