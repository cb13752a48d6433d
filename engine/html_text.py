# engine/html_text.py
# Text extraction and verbatim serialization of parsed subtrees.

from bs4.element import PageElement, Tag

from engine.html_classifier import Category, WalkMode, classify, is_visible_text


def extract_text(node: PageElement, mode: WalkMode, *, include_opaque: bool = False) -> str:
    """
    Visible text of a subtree, trimmed ONCE at the end.

    Intermediate fragments are not trimmed so the single space between
    inline elements (`<b>a</b> <i>b</i>`) survives.

    - Container nodes contribute nothing (their Block children are handled
      individually by the walkers).
    - Opaque nodes contribute nothing unless include_opaque; the export path
      keeps inline code text, the translation path never does.
    """
    parts = []
    stack = [node]

    while stack:
        current = stack.pop()

        if isinstance(current, Tag):
            category = classify(current, mode)
            if category == Category.CONTAINER:
                continue
            if category == Category.OPAQUE:
                if include_opaque:
                    parts.append(raw_text(current))
                continue
            stack.extend(reversed(current.contents))
        elif is_visible_text(current):
            parts.append(str(current))

    return "".join(parts).strip()


def raw_text(node: PageElement) -> str:
    """Untrimmed character data of a subtree, no classification applied."""
    if not isinstance(node, Tag):
        return str(node) if is_visible_text(node) else ""
    return "".join(str(s) for s in node.descendants if is_visible_text(s))


def serialize(node: PageElement) -> str:
    """Markup text for a node, attribute-for-attribute, subtree included."""
    if isinstance(node, Tag):
        return node.decode()
    return node.output_ready()
