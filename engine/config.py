# engine/config.py
# Engine configuration passed explicitly into every entry point.
# Read-only once built; use dataclasses.replace() for per-call overrides.

import os
from dataclasses import dataclass

from utils.logger import log

DEFAULT_MAX_BLOCK_TEXT_LENGTH = 2000  # Notion rich_text content limit
DEFAULT_MAX_BLOCKS_PER_REQUEST = 100  # Notion children limit per request
DEFAULT_TARGET_LANGUAGE = "zh-CN"

TRANSLATION_CLASS = "translation"
TRANSLATION_STYLE = (
    "color: #555; margin-top: 0.3em; margin-bottom: 1em; padding-left: 1.2em; "
    "border-left: 4px solid #4CAF50 !important; "
    "background-color: rgba(76, 175, 80, 0.05);"
)
FALLBACK_MARKER = "[译] "


@dataclass(frozen=True)
class EngineConfig:
    max_block_text_length: int = DEFAULT_MAX_BLOCK_TEXT_LENGTH
    max_blocks_per_request: int = DEFAULT_MAX_BLOCKS_PER_REQUEST
    target_language: str = DEFAULT_TARGET_LANGUAGE
    translation_class: str = TRANSLATION_CLASS
    translation_style: str = TRANSLATION_STYLE
    fallback_marker: str = FALLBACK_MARKER

    def __post_init__(self):
        if self.max_block_text_length < 4:
            raise ValueError(
                f"CONFIG ERROR: max_block_text_length must be >= 4, got {self.max_block_text_length}"
            )
        if self.max_blocks_per_request < 1:
            raise ValueError(
                f"CONFIG ERROR: max_blocks_per_request must be >= 1, got {self.max_blocks_per_request}"
            )

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """
        HTMLBLOCKS_MAX_BLOCK_TEXT / HTMLBLOCKS_MAX_BLOCKS / HTMLBLOCKS_TARGET_LANG
        override the defaults. Unset or empty variables keep the default.
        """
        config = cls(
            max_block_text_length=_env_int("HTMLBLOCKS_MAX_BLOCK_TEXT", DEFAULT_MAX_BLOCK_TEXT_LENGTH),
            max_blocks_per_request=_env_int("HTMLBLOCKS_MAX_BLOCKS", DEFAULT_MAX_BLOCKS_PER_REQUEST),
            target_language=os.getenv("HTMLBLOCKS_TARGET_LANG") or DEFAULT_TARGET_LANGUAGE,
        )
        log(
            f"CONFIG: max_block_text={config.max_block_text_length} "
            f"max_blocks={config.max_blocks_per_request} lang={config.target_language}"
        )
        return config


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"CONFIG ERROR: {name} must be an integer, got {raw!r}")
