# engine/html_classifier.py
# Node classification shared by the export and augmentation walkers.
#
# CRITICAL DESIGN:
# - classify() is pure and total: every node maps to exactly one Category
# - tag-string comparisons live HERE only; walkers switch on Category
# - `div` is the only tag whose category depends on the walk mode

from enum import Enum

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag
from bs4.builder import ParserRejectedMarkup

from engine.errors import ParseFailure

OPAQUE_TAGS = {"pre", "code", "kbd", "samp", "var"}

BLOCK_TAGS = {
    "p", "div",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "li", "blockquote",
    "td", "th", "dd", "dt", "figcaption",
}

CONTAINER_TAGS = {"ul", "ol"}

# Text under these parents is never visible content
_INVISIBLE_PARENTS = {"script", "style"}


class Category(str, Enum):
    OPAQUE = "OPAQUE"
    BLOCK = "BLOCK"
    CONTAINER = "CONTAINER"
    PLAIN_TEXT = "PLAIN_TEXT"
    IGNORED = "IGNORED"


class WalkMode(str, Enum):
    EXPORT = "EXPORT"
    AUGMENT = "AUGMENT"


def classify(node: PageElement, mode: WalkMode) -> Category:
    if isinstance(node, Tag):
        # BeautifulSoup (the document root) is a Tag named "[document]"
        name = node.name
        if name in OPAQUE_TAGS:
            return Category.OPAQUE
        if name == "div":
            return Category.BLOCK if mode == WalkMode.AUGMENT else Category.CONTAINER
        if name in CONTAINER_TAGS:
            return Category.CONTAINER
        if name in BLOCK_TAGS:
            return Category.BLOCK
        return Category.IGNORED

    if is_visible_text(node) and node.strip():
        return Category.PLAIN_TEXT

    return Category.IGNORED


def is_visible_text(node: PageElement) -> bool:
    """Plain character data: not a comment, doctype, CDATA, or script/style body."""
    if not isinstance(node, NavigableString):
        return False
    if isinstance(node, PreformattedString):
        return False
    parent = node.parent
    return parent is None or parent.name not in _INVISIBLE_PARENTS


def parse_fragment(html) -> BeautifulSoup:
    """
    INPUT:
      html: str | bytes : one HTML fragment (no implicit <html>/<body> wrapping)
                          bytes are decoded as UTF-8, undecodable bytes dropped

    OUTPUT:
      soup OWNED by the caller, lives for one engine call

    Raises TypeError for any other input type.
    Raises ParseFailure if the markup is rejected.
    """
    if isinstance(html, bytes):
        html = html.decode("utf-8", errors="ignore")
    if not isinstance(html, str):
        raise TypeError(f"PARSE ERROR: expected str or bytes, got {type(html).__name__}")

    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        raise ParseFailure(f"PARSE ERROR: {e}") from e
