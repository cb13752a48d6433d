# engine/fallback_splitter.py
# Degraded path for markup the parser rejects: blank-line paragraphs,
# code-looking paragraphs kept as-is, the rest followed by a translation.

import re
from typing import Callable, List, Optional

from engine.errors import Cancelled
from utils.logger import log

_BLANK_LINE_RE = re.compile(r"\n[ \t]*\n")
_ASSIGNMENT_LIKE_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*\s*[=({]")


def split_paragraphs(text: str) -> List[str]:
    paragraphs = []
    for para in _BLANK_LINE_RE.split(text.replace("\r\n", "\n")):
        para = para.strip("\n")
        if para.strip():
            paragraphs.append(para)
    return paragraphs


def looks_like_code(paragraph: str) -> bool:
    """
    More than half of the lines are indented (tab / 4+ spaces) or start
    like `name =`, `name(`, `name {`.
    """
    lines = paragraph.split("\n")
    code_lines = 0
    for line in lines:
        if line.startswith("\t") or line.startswith("    ") or _ASSIGNMENT_LIKE_RE.match(line):
            code_lines += 1
    return code_lines * 2 > len(lines)


def translate_plain_text(
        text: str,
        translate: Callable[[str], Optional[str]],
        *,
        marker: str = "",
) -> str:
    """
    translate returns None on failure and raises Cancelled when the caller
    gave up; either way the original paragraphs already written are kept.
    """
    out: List[str] = []
    paragraphs = split_paragraphs(text)
    log(f"FALLBACK_SPLITTER: {len(paragraphs)} paragraphs")

    for para in paragraphs:
        out.append(para)

        if looks_like_code(para):
            continue

        try:
            translated = translate(para.strip())
        except Cancelled:
            log("FALLBACK_SPLITTER: cancelled, returning partial output")
            break

        if translated:
            out.append(f"{marker}{translated}")

    return "".join(f"{block}\n\n" for block in out)
