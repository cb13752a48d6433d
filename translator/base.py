# translator/base.py
# The Translate capability consumed by the engine, plus helpers shared
# by the LLM-backed providers.

from typing import Protocol

DEFAULT_TARGET_LANGUAGE = "zh-CN"

LANGUAGE_NAMES = {
    "zh-CN": "简体中文",
    "zh-TW": "繁體中文",
    "en": "English",
    "ja": "日本語",
    "ko": "한국어",
    "fr": "Français",
    "de": "Deutsch",
    "es": "Español",
}


class Translator(Protocol):
    def translate(self, text: str, target_lang: str) -> str:
        """Return text translated into target_lang; raise on failure."""
        ...


def build_prompt(content: str, target_lang: str) -> str:
    lang = LANGUAGE_NAMES.get(target_lang) or target_lang
    return (
        f"Translate the following content into {lang}.\n"
        "Requirements:\n"
        "- Keep the format and structure of the original\n"
        "- Convey the meaning accurately\n"
        f"- Use fluent, natural {lang}\n"
        "- Return ONLY the translated content, no notes or explanations\n\n"
        "Content:\n"
        f"{content}"
    )


def truncate_content(content: str, max_len: int) -> str:
    if len(content) <= max_len:
        return content
    return content[:max_len] + "..."
