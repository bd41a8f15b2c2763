"""
TreeBuilder - Convert rich-text markup into a minimal document tree.

Handles markup from writer, list and html-formatted textarea fields.

Key behaviors:
- Line breaks and <figure> wrappers are removed before parsing
- Markup is parsed leniently (lxml via BeautifulSoup); broken markup
  yields a best-effort tree, never an error
- Anchors are classified and their href rewritten; anchors that cannot
  be resolved are replaced by their content
- An <li> whose only child is a <p> takes the paragraph's value directly
- Whitespace-only text is dropped
- Elements nested deeper than MAX_TREE_DEPTH hold their text content as
  a bare string instead of child nodes

Invariants:
- An element whose reduced content is a single text node holds that
  text as a bare string value
- The synthetic <body> wrapper never appears in the output
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup
from bs4.element import CData, NavigableString, PageElement, PreformattedString, Tag

from src.components.links import LinkResolutionError

from .models import (
    DocumentTree,
    ElementNode,
    Node,
    TextNode,
    TreeInvariantError,
    TreeValue,
)
from .ports import LinkClassifierPort

logger = logging.getLogger(__name__)

# --- Normalization ---

LINE_BREAK_PATTERN = re.compile(r"[\r\n]")
WRAPPER_TAG_PATTERN = re.compile(r"</?figure(?:\s[^>]*)?>", re.IGNORECASE)

DOCUMENT_TEMPLATE = (
    "<!DOCTYPE html><html><head>"
    '<meta http-equiv="Content-Type" content="text/html; charset=utf-8">'
    "</head><body>{markup}</body></html>"
)


def normalize_markup(markup: str) -> str:
    """Strip line breaks and presentation-only wrapper tags."""
    markup = LINE_BREAK_PATTERN.sub("", markup)
    return WRAPPER_TAG_PATTERN.sub("", markup)


def parse_markup(markup: str) -> Tag | None:
    """
    Parse markup into a DOM and return its <body>.

    The markup is wrapped in an explicit document so the parser does not
    invent paragraphs around top-level text.
    """
    soup = BeautifulSoup(
        DOCUMENT_TEMPLATE.format(markup=markup),
        "lxml",
        multi_valued_attributes=None,
    )
    body = soup.body
    return body if isinstance(body, Tag) else None


# --- Reduction ---

MAX_TREE_DEPTH = 100


def collapse(value: tuple[Node, ...]) -> TreeValue:
    """Replace a lone text child by its bare string."""
    if len(value) == 1 and isinstance(value[0], TextNode):
        return value[0].value
    return value


def _is_text(node: PageElement) -> bool:
    if isinstance(node, CData):
        return True
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def _is_significant(node: PageElement) -> bool:
    if isinstance(node, Tag):
        return True
    return _is_text(node) and bool(str(node).strip())


def _text_value(tag: Tag) -> str | None:
    # Text of all descendants, comments excluded
    text = tag.get_text()
    return text if text.strip() else None


class TreeBuilder:
    """
    Markup tree builder.

    Delegates every anchor to the link classifier.
    """

    def __init__(self, classifier: LinkClassifierPort) -> None:
        """Initialize with the classifier used for anchors."""
        self._classifier = classifier

    def build(self, markup: str, language_code: str) -> DocumentTree:
        """
        Build the document tree for a markup string.

        Returns a bare string when the whole document is one text run, a
        single node when there is exactly one top-level element, and a
        tuple of nodes otherwise (empty for empty markup).
        """
        body = parse_markup(normalize_markup(markup))
        if body is None:
            return ()

        value = self._element_value(body, language_code, depth=1)
        if value is None:
            return ()
        if isinstance(value, str):
            return value
        if len(value) == 1:
            return value[0]
        return value

    def _element_value(self, tag: Tag, language_code: str, depth: int) -> TreeValue | None:
        children = list(tag.children)
        if not children:
            return None

        significant = [child for child in children if _is_significant(child)]
        only = significant[0] if len(significant) == 1 else None
        if tag.name.lower() == "li" and isinstance(only, Tag) and only.name.lower() == "p":
            return self._element_value(only, language_code, depth)

        reduced: list[Node] = []
        for child in significant:
            reduced.extend(self._reduce(child, language_code, depth))
        return collapse(tuple(reduced))

    def _reduce(self, node: PageElement, language_code: str, depth: int) -> list[Node]:
        if isinstance(node, Tag):
            return self._reduce_element(node, language_code, depth)
        return [TextNode(str(node))]

    def _reduce_element(self, tag: Tag, language_code: str, depth: int) -> list[Node]:
        name = tag.name.lower()
        if depth >= MAX_TREE_DEPTH:
            value = _text_value(tag)
        else:
            value = self._element_value(tag, language_code, depth + 1)
        attrs = {str(key): str(val) for key, val in tag.attrs.items()}

        if name != "a":
            return [ElementNode(tag=name, value=value, attrs=attrs)]

        try:
            link = self._classifier.classify(
                language_code,
                attrs.get("href"),
                title=attrs.get("title"),
                blank=attrs.get("target") == "_blank",
            )
        except LinkResolutionError as e:
            logger.warning("Dropping unresolvable link %r: %s", attrs.get("href"), e)
            return _unwrap(value)

        if not link.href:
            raise TreeInvariantError(f"Classifier returned {link.kind} link without href")
        attrs["href"] = link.href
        return [ElementNode(tag=name, value=value, attrs=attrs, link=link)]


def _unwrap(value: TreeValue | None) -> list[Node]:
    if value is None:
        return []
    if isinstance(value, str):
        return [TextNode(value)]
    return list(value)


def build_tree(
    markup: str,
    language_code: str,
    classifier: LinkClassifierPort,
) -> DocumentTree:
    """Build a document tree with a one-off builder."""
    return TreeBuilder(classifier).build(markup, language_code)
