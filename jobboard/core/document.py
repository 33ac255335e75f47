"""
Parsed-document abstraction.

HTML is parsed once with BeautifulSoup and converted into a small tree of typed
nodes (TextNode / CommentNode / Element). All extraction code works against
this tree, so it can be exercised with hand-built fixtures as easily as with
real portal pages.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import Comment, Declaration, Doctype, ProcessingInstruction

logger = logging.getLogger(__name__)

# Kept as CommentNode: they are child nodes even though they never render
COMMENT_STRINGS = (Comment, ProcessingInstruction)

# Dropped from the tree entirely
SKIPPED_STRINGS = (Declaration, Doctype)

# Elements whose text does not render
NON_RENDERED_TAGS = {"script", "style", "template", "head"}

_WHITESPACE = re.compile(r"\s+")


@dataclass
class TextNode:
    text: str


@dataclass
class CommentNode:
    text: str


@dataclass
class Element:
    tag: str
    attrs: Dict[str, str] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)

    @property
    def element_children(self) -> List["Element"]:
        return [child for child in self.children if isinstance(child, Element)]

    @property
    def first_child(self) -> Optional["Node"]:
        return self.children[0] if self.children else None

    def get(self, attr: str) -> Optional[str]:
        return self.attrs.get(attr)

    def has_attr(self, attr: str) -> bool:
        return attr in self.attrs

    def iter_descendants(self) -> Iterator["Element"]:
        """Descendant elements in document order (self excluded)."""
        stack = list(reversed(self.element_children))
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(element.element_children))

    def find_all(self, tag: str) -> List["Element"]:
        tag = tag.lower()
        return [el for el in self.iter_descendants() if el.tag == tag]

    def find_with_attr(self, attr: str) -> Optional["Element"]:
        """Return self if it carries `attr`, else the first descendant that does."""
        if self.has_attr(attr):
            return self
        for el in self.iter_descendants():
            if el.has_attr(attr):
                return el
        return None

    def text_content(self) -> str:
        parts: List[str] = []
        for child in self.children:
            if isinstance(child, TextNode):
                parts.append(child.text)
            elif isinstance(child, Element):
                parts.append(child.text_content())
        return "".join(parts)

    def inner_text(self) -> str:
        """
        Approximates the browser's rendered text: whitespace runs collapse to a
        single space, <br> becomes a newline and each line is trimmed.
        """
        parts: List[str] = []
        self._collect_rendered(parts)
        lines = [" ".join(line.split()) for line in "".join(parts).split("\n")]
        return "\n".join(lines).strip()

    def _collect_rendered(self, parts: List[str]) -> None:
        for child in self.children:
            if isinstance(child, TextNode):
                parts.append(_WHITESPACE.sub(" ", child.text))
            elif isinstance(child, CommentNode):
                continue
            elif child.tag == "br":
                parts.append("\n")
            elif child.tag not in NON_RENDERED_TAGS:
                child._collect_rendered(parts)


Node = Union[TextNode, CommentNode, Element]


def _convert_children(tag: Tag, element: Element) -> None:
    for child in tag.children:
        if isinstance(child, Tag):
            element.children.append(_convert(child))
        elif isinstance(child, COMMENT_STRINGS):
            element.children.append(CommentNode(str(child)))
        elif isinstance(child, NavigableString) and not isinstance(
            child, SKIPPED_STRINGS
        ):
            element.children.append(TextNode(str(child)))


def _convert(tag: Tag) -> Element:
    element = Element(tag=tag.name.lower(), attrs=dict(tag.attrs))
    _convert_children(tag, element)
    return element


def parse_html(html: str) -> Element:
    """
    Parse raw HTML into an Element tree rooted at a synthetic "#document" node.
    """
    soup = BeautifulSoup(html, "lxml", multi_valued_attributes=None)
    root = Element(tag="#document")
    _convert_children(soup, root)
    logger.debug(f"Parsed HTML document ({len(html)} chars)")
    return root
