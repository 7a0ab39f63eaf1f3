"""Text module -- tree adapter, output sink, HTML to plain text conversion."""

from html2plain.text.converter import convert_document, convert_to_plain_text
from html2plain.text.writer import PlainTextWriter

__all__ = ["PlainTextWriter", "convert_document", "convert_to_plain_text"]
