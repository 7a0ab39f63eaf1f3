"""html2plain -- readable plain text from HTML."""

from html2plain.text.converter import convert_document, convert_to_plain_text

__all__ = ["convert_document", "convert_to_plain_text"]
__version__ = "0.1.0"
