# engine/block_emitter.py
# Export path: HTML fragment -> ordered, size-bounded ContentBlocks.
#
# INVARIANTS:
# - every block's text fits config.max_block_text_length
# - chunks of one source node concatenate back to its extracted text
# - document order is preserved
# - at least one block is returned (empty paragraph placeholder)

from typing import List

from bs4.element import PageElement, Tag

from engine.chunk_splitter import split_text, truncate_heading
from engine.config import EngineConfig
from engine.content_blocks import BlockKind, ContentBlock, empty_paragraph, kind_for_tag
from engine.html_classifier import Category, WalkMode, classify, parse_fragment
from engine.html_text import extract_text, raw_text
from utils.logger import log


def html_to_blocks(html: str, config: EngineConfig) -> List[ContentBlock]:
    """
    INPUT:
      html: str : fragment to export
      config: EngineConfig : only max_block_text_length is used here

    OUTPUT:
      list[ContentBlock] : never empty

    Raises engine.errors.ParseFailure if the markup is rejected.
    """
    soup = parse_fragment(html)

    blocks: List[ContentBlock] = []
    _walk(soup, config, blocks)

    if not blocks:
        log("BLOCK_EMITTER: no content, using empty paragraph placeholder")
        blocks.append(empty_paragraph())

    log(f"BLOCK_EMITTER: {len(blocks)} blocks emitted")
    return blocks


def _walk(root: PageElement, config: EngineConfig, out: List[ContentBlock]) -> None:
    # inside_block: an enclosing Block already emitted this node's text
    stack = [(root, False)]

    while stack:
        node, inside_block = stack.pop()
        category = classify(node, WalkMode.EXPORT)

        if category == Category.PLAIN_TEXT:
            if not inside_block:
                out.extend(blocks_for_text(node.strip(), BlockKind.PARAGRAPH, config))
            continue

        if category == Category.OPAQUE:
            if not inside_block:
                out.extend(_emit_opaque(node, config))
            continue

        if category == Category.BLOCK:
            if not inside_block:
                out.extend(emit_block(node, config))
            inside_block = True
        elif category == Category.CONTAINER:
            # excluded from the parent's text, so its items stand on their own
            inside_block = False
        elif not isinstance(node, Tag):
            continue

        stack.extend((child, inside_block) for child in reversed(node.contents))


def emit_block(node: Tag, config: EngineConfig) -> List[ContentBlock]:
    """Blocks for one Block-classified element; empty text emits nothing."""
    text = extract_text(node, WalkMode.EXPORT, include_opaque=True)
    if not text:
        return []
    return blocks_for_text(text, kind_for_tag(node.name), config)


def blocks_for_text(text: str, kind: BlockKind, config: EngineConfig) -> List[ContentBlock]:
    max_len = config.max_block_text_length

    if kind.is_heading:
        return [ContentBlock.of(kind, truncate_heading(text, max_len))]

    return [ContentBlock.of(kind, chunk) for chunk in split_text(text, max_len)]


def _emit_opaque(node: Tag, config: EngineConfig) -> List[ContentBlock]:
    # code keeps its whitespace untouched
    text = raw_text(node)
    if not text.strip():
        return []
    return blocks_for_text(text, kind_for_tag(node.name), config)
