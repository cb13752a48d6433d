# engine/content_blocks.py
# Exported content records and their Notion wire rendering.

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

CODE_LANGUAGE = "plain text"


class BlockKind(str, Enum):
    PARAGRAPH = "paragraph"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    QUOTE = "quote"
    CODE = "code"

    @property
    def is_heading(self) -> bool:
        return self in _HEADINGS


_HEADINGS = {BlockKind.HEADING_1, BlockKind.HEADING_2, BlockKind.HEADING_3}

_KIND_BY_TAG = {
    "h1": BlockKind.HEADING_1,
    "h2": BlockKind.HEADING_2,
    "h3": BlockKind.HEADING_3,
    "li": BlockKind.BULLETED_LIST_ITEM,
    "blockquote": BlockKind.QUOTE,
    "pre": BlockKind.CODE,
    "code": BlockKind.CODE,
    "kbd": BlockKind.CODE,
    "samp": BlockKind.CODE,
    "var": BlockKind.CODE,
}


def kind_for_tag(tag_name: Optional[str]) -> BlockKind:
    """p, h4-h6, table cells, definitions, captions and bare text -> PARAGRAPH."""
    return _KIND_BY_TAG.get(tag_name or "", BlockKind.PARAGRAPH)


@dataclass(frozen=True)
class RichTextRun:
    text: str

    def to_notion(self) -> dict:
        return {"text": {"content": self.text}}


@dataclass(frozen=True)
class ContentBlock:
    kind: BlockKind
    rich_text: List[RichTextRun] = field(default_factory=list)
    language: Optional[str] = None

    @classmethod
    def of(cls, kind: BlockKind, text: str) -> "ContentBlock":
        language = CODE_LANGUAGE if kind == BlockKind.CODE else None
        return cls(kind=kind, rich_text=[RichTextRun(text)], language=language)

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.rich_text)

    def to_notion(self) -> dict:
        body = {"rich_text": [run.to_notion() for run in self.rich_text]}
        if self.kind == BlockKind.CODE:
            body["language"] = self.language or CODE_LANGUAGE
        return {
            "object": "block",
            "type": self.kind.value,
            self.kind.value: body,
        }


def empty_paragraph() -> ContentBlock:
    return ContentBlock.of(BlockKind.PARAGRAPH, "")
