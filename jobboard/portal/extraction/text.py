"""
Text extraction from the portal's label/value paragraphs.
"""

import logging
from typing import List

from jobboard.core.document import CommentNode, Element, Node, TextNode
from jobboard.portal.extraction.email import decode_email
from jobboard.portal.layout import CF_EMAIL_ATTR, PARAGRAPH_PREFIX_NODES

logger = logging.getLogger(__name__)


def _node_text(node: Node, decode_emails: bool) -> str:
    if isinstance(node, TextNode):
        return node.text

    if isinstance(node, CommentNode):
        return ""

    if node.tag == "br":
        return "\n"

    if node.tag == "a":
        protected = node.find_with_attr(CF_EMAIL_ATTR) if decode_emails else None
        encoded = protected.get(CF_EMAIL_ATTR) if protected else None
        if encoded:
            return " " + decode_email(encoded)
        return " " + node.inner_text()

    # Other markup (icons, labels, spans) carries no value text
    return ""


def extract_text(paragraph: Element, decode_emails: bool = True) -> str:
    """
    Return the value text of a portal paragraph.

    The first two child nodes are the field's label and icon and are always
    skipped. Of the rest, text nodes are kept verbatim, <br> becomes a newline
    and links contribute their text (or the decoded address for protected
    emails) preceded by a space. The result is trimmed.
    """
    parts: List[str] = [
        _node_text(node, decode_emails)
        for node in paragraph.children[PARAGRAPH_PREFIX_NODES:]
    ]
    return "".join(parts).strip()
