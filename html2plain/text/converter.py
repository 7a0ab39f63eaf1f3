"""HTML to plain text conversion.

The document tree is walked once, depth first, and text is streamed into a
:class:`PlainTextWriter`. Every conversion step reports whether it wrote any
visible content; block containers only close with a line break when their
children did, so empty markup adds no vertical spacing.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from bs4 import Tag

from html2plain.text.tree import (
    NodeKind,
    attribute,
    decode_entities,
    is_overlapped_closing_element,
    node_kind,
    parse_html,
    source_text,
    tag_name,
    text_payload,
)
from html2plain.text.writer import PlainTextWriter
from html2plain.utils.logger import get_logger

log = get_logger(__name__)

HTML_WHITESPACE = " \t\n\r\f\v"
SUPPRESSED_PARENTS = frozenset({"script", "style"})
RULE = "_" * 32


@dataclass(frozen=True)
class TagBehaviour:
    """What an element does around its children.

    ``pre`` runs before the children and returns whether it wrote visible
    content. ``stop`` elements never descend and always report no content.
    ``block`` elements end with a line break and ``post`` runs after the
    children, both only when something visible was written.
    """

    pre: Optional[Callable[[Tag, PlainTextWriter], bool]] = None
    post: Optional[Callable[[Tag, PlainTextWriter], None]] = None
    stop: bool = False
    block: bool = False


def _line_break(node: Tag, writer: PlainTextWriter) -> bool:
    writer.write_line()
    return False


def _horizontal_rule(node: Tag, writer: PlainTextWriter) -> bool:
    writer.write_line(RULE)
    return False


def _image_alt(node: Tag, writer: PlainTextWriter) -> bool:
    alt = attribute(node, "alt").strip()
    if not alt:
        return False
    writer.write(f"[{alt}]")
    return True


def _list_marker(node: Tag, writer: PlainTextWriter) -> bool:
    # The marker alone is not content.
    writer.write_attached("- ")
    return False


def _link_target(node: Tag, writer: PlainTextWriter) -> None:
    href = attribute(node, "href")
    if href:
        writer.write_attached(f"<{href}>")


_INLINE = TagBehaviour()
_BLOCK = TagBehaviour(block=True)

TAG_BEHAVIOURS: Dict[str, TagBehaviour] = {
    "br": TagBehaviour(pre=_line_break, stop=True),
    "hr": TagBehaviour(pre=_horizontal_rule, stop=True),
    "img": TagBehaviour(pre=_image_alt),
    "li": TagBehaviour(pre=_list_marker, block=True),
    "p": _BLOCK,
    "div": _BLOCK,
    "tr": _BLOCK,
    "a": TagBehaviour(post=_link_target),
}


def convert_content_to(node: Any, writer: PlainTextWriter) -> bool:
    """Convert every child of *node*; True if any of them wrote content."""
    parent_name = tag_name(node)
    result = False
    for child in node.children:
        result |= convert_to(child, writer, parent_name)
    return result


def convert_to(node: Any, writer: PlainTextWriter, parent_name: str = "") -> bool:
    """Convert a single node; True if it wrote visible content."""
    kind = node_kind(node)
    if kind is NodeKind.DOCUMENT:
        return convert_content_to(node, writer)
    if kind is NodeKind.TEXT:
        return _convert_text(node, writer, parent_name)
    if kind is NodeKind.ELEMENT:
        return _convert_element(node, writer)
    # comments, doctypes, CDATA...
    return False


def _convert_text(node: Any, writer: PlainTextWriter, parent_name: str) -> bool:
    if parent_name in SUPPRESSED_PARENTS:
        return False

    if is_overlapped_closing_element(source_text(node)):
        return False

    raw = text_payload(node)
    collapsed = raw.replace("\r\n", " ").replace("\n", " ")
    stripped = collapsed.strip(HTML_WHITESPACE)
    text = decode_entities(stripped)
    if not text:
        if collapsed:
            writer.request_space()
        return False

    if collapsed[0] in HTML_WHITESPACE:
        writer.request_space()
    writer.write(text)
    if collapsed[-1] in HTML_WHITESPACE:
        writer.request_space()
    return True


def _convert_element(node: Tag, writer: PlainTextWriter) -> bool:
    behaviour = TAG_BEHAVIOURS.get(tag_name(node), _INLINE)

    result = False
    if behaviour.pre is not None:
        result = behaviour.pre(node, writer)
    if behaviour.stop:
        return False

    if node.contents:
        result |= convert_content_to(node, writer)

    if result:
        if behaviour.block:
            writer.write_line()
        if behaviour.post is not None:
            behaviour.post(node, writer)
    return result


def convert_document(root: Any) -> str:
    """Convert an already parsed tree and return the accumulated text."""
    writer = PlainTextWriter()
    convert_to(root, writer)
    return writer.getvalue()


def convert_to_plain_text(html: str) -> str:
    """Convert an HTML string to plain text with CRLF line breaks."""
    text = convert_document(parse_html(html))
    log.debug("Converted %d chars of markup into %d chars of text", len(html), len(text))
    return text
