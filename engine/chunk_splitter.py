# engine/chunk_splitter.py
# Size management for block text.
# Python str slicing works on code points, so a chunk boundary never
# falls inside a multi-byte character.

from typing import List

ELLIPSIS = "..."


def split_text(text: str, max_len: int) -> List[str]:
    """
    Fixed-size slices of exactly max_len, last slice holds the remainder.
    No word/sentence boundary search. "".join(result) == text.
    """
    if max_len < 1:
        raise ValueError(f"CHUNK_SPLITTER ERROR: max_len must be >= 1, got {max_len}")

    if len(text) <= max_len:
        return [text]

    return [text[i:i + max_len] for i in range(0, len(text), max_len)]


def truncate_heading(text: str, max_len: int) -> str:
    """Headings are cut, not split: max_len - 3 chars plus '...'."""
    if len(text) <= max_len:
        return text
    return text[:max(0, max_len - len(ELLIPSIS))] + ELLIPSIS
