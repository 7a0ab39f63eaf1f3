"""BeautifulSoup tree adapter -- the node capabilities the converter reads."""

from enum import Enum
from typing import Any, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from html2plain.utils.config import settings

# Closing tags the parser may let overlap other elements; a stray one can
# surface as text instead of an element.
OVERLAPPING_TAGS = frozenset({"form"})


class NodeKind(Enum):
    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    OTHER = "other"


def parse_html(markup: str, features: Optional[str] = None) -> BeautifulSoup:
    """Parse *markup* into a document tree using the configured bs4 builder."""
    return BeautifulSoup(markup, features or settings.html_parser)


def node_kind(node: Any) -> NodeKind:
    """Classify a bs4 node.

    ``BeautifulSoup`` subclasses ``Tag`` and comments, doctypes and CDATA
    subclass ``NavigableString``, so the order of the checks matters.
    """
    if isinstance(node, BeautifulSoup):
        return NodeKind.DOCUMENT
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        return NodeKind.TEXT
    return NodeKind.OTHER


def tag_name(node: Any) -> str:
    if node_kind(node) is not NodeKind.ELEMENT:
        return ""
    return (node.name or "").lower()


def attribute(node: Tag, name: str) -> str:
    """Return an attribute value, ``""`` when absent.

    Multi-valued attributes (``class``, ``rel``...) come back from bs4 as
    lists and are joined with single spaces.
    """
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def text_payload(node: NavigableString) -> str:
    return str(node)


def source_text(node: NavigableString) -> str:
    """Return the payload as it reads in markup, with ``&``, ``<`` and ``>`` re-escaped.

    Escaped text such as ``&lt;/form&gt;`` keeps its entities here, so it is
    never mistaken for a stray closing tag.
    """
    return node.output_ready(formatter="minimal")


def decode_entities(text: str) -> str:
    """Entity-decode a text payload.

    bs4 resolves character and entity references while it builds the tree,
    so payloads are already decoded. Decoding again would turn a literal
    ``&amp;lt;`` into ``<``.
    """
    return text


def is_overlapped_closing_element(text: str) -> bool:
    """Return True when *text* is a stray ``</form>``-style closing tag."""
    # shortest candidate is "</x>"
    if len(text) <= 4:
        return False
    if not (text.startswith("</") and text.endswith(">")):
        return False
    return text[2:-1].lower() in OVERLAPPING_TAGS
