# engine/html_augmenter.py
# Augmentation path: after every translatable block, insert a sibling
# element of the same tag carrying the translated text.
#
# CRITICAL DESIGN:
# - original markup is NEVER modified: originals are serialized as-is
# - opaque (code-like) subtrees are copied verbatim, never translated
# - one translate call per block, sequential, in document order
# - a failing block keeps its original and loses only its translation
# - cancel is checked before each translate call; on cancel the
#   output assembled so far is returned

import threading
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from engine.config import EngineConfig
from engine.errors import Cancelled, ParseFailure
from engine.fallback_splitter import translate_plain_text
from engine.html_classifier import Category, WalkMode, classify, is_visible_text, parse_fragment
from engine.html_text import extract_text, serialize
from translator.base import Translator
from utils.logger import log


class HtmlAugmenter:
    def __init__(
            self,
            translator: Translator,
            config: Optional[EngineConfig] = None,
            cancel: Optional[threading.Event] = None,
    ):
        self.translator = translator
        self.config = config or EngineConfig()
        self.cancel = cancel

        self.translated_blocks = 0
        self.failed_blocks = 0

    # =========================================================
    # PUBLIC API
    # =========================================================
    def translate_html(self, html: str) -> str:
        """
        INPUT:
          html: str | bytes : fragment to augment, bytes decoded as UTF-8

        OUTPUT:
          str : originals in document order, each translated block followed
                by its translation sibling
        """
        self.translated_blocks = 0
        self.failed_blocks = 0

        if isinstance(html, bytes):
            html = html.decode("utf-8", errors="ignore")

        try:
            soup = parse_fragment(html)
        except ParseFailure as e:
            log(f"HTML_AUGMENTER: {e} → plain-text fallback")
            return translate_plain_text(
                html,
                self._translate,
                marker=self.config.fallback_marker,
            )

        out: List[str] = []
        try:
            self._walk(soup, soup, out)
        except Cancelled:
            log(f"HTML_AUGMENTER: cancelled after {self.translated_blocks} blocks, returning partial output")

        log(
            f"HTML_AUGMENTER: done | translated={self.translated_blocks} "
            f"failed={self.failed_blocks}"
        )
        return "".join(out)

    # =========================================================
    # TRAVERSAL
    # =========================================================
    def _walk(self, root: PageElement, soup: BeautifulSoup, out: List[str]) -> None:
        stack = [root]

        while stack:
            node = stack.pop()
            category = classify(node, WalkMode.AUGMENT)

            if category == Category.OPAQUE:
                out.append(serialize(node))
                continue

            if category == Category.BLOCK:
                text = extract_text(node, WalkMode.AUGMENT)
                if text:
                    out.append(serialize(node))
                    translated = self._translate(text)
                    if translated:
                        out.append(self._translation_element(soup, node, translated))
                    continue

            if isinstance(node, Tag):
                # containers and unknown wrappers: children only, no wrapping
                stack.extend(reversed(node.contents))
            elif is_visible_text(node):
                out.append(serialize(node))

    def _translate(self, text: str) -> Optional[str]:
        if self.cancel is not None and self.cancel.is_set():
            raise Cancelled()

        try:
            translated = self.translator.translate(text, self.config.target_language)
        except Exception as e:
            self.failed_blocks += 1
            log(f"HTML_AUGMENTER: skip translation text={text[:50]!r} error={e}")
            return None

        if not translated or not translated.strip():
            self.failed_blocks += 1
            log(f"HTML_AUGMENTER: empty translation text={text[:50]!r}")
            return None

        self.translated_blocks += 1
        return translated

    def _translation_element(self, soup: BeautifulSoup, original: Tag, translated: str) -> str:
        """Same tag, attributes copied, marker class + style appended, escaped text."""
        attrs = dict(original.attrs)

        classes = original.get_attribute_list("class")
        attrs["class"] = [c for c in classes if c] + [self.config.translation_class]

        style = self.config.translation_style
        if style:
            existing = (original.get("style") or "").strip().rstrip(";")
            attrs["style"] = f"{existing}; {style}" if existing else style

        sibling = soup.new_tag(original.name, attrs=attrs)
        sibling.string = translated
        return serialize(sibling)
