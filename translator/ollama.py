# translator/ollama.py
# Local Ollama server, non-streaming /api/generate.

import requests

from translator.base import DEFAULT_TARGET_LANGUAGE, build_prompt, truncate_content
from translator.errors import TranslationError
from utils.http_json import request_json

MAX_INPUT_CHARS = 30000
DEFAULT_MODEL = "qwen2:4b"
TIMEOUT_SEC = 120  # local inference is slow


class OllamaTranslator:
    def __init__(self, url: str, model: str = DEFAULT_MODEL,
                 target_lang: str = DEFAULT_TARGET_LANGUAGE, session: requests.Session = None):
        self.url = url.rstrip("/")
        self.model = model
        self.target_lang = target_lang
        self.session = session

    def translate(self, text: str, target_lang: str = "") -> str:
        target_lang = target_lang or self.target_lang
        prompt = build_prompt(truncate_content(text, MAX_INPUT_CHARS), target_lang)

        data = request_json(
            self.session,
            "POST",
            f"{self.url}/api/generate",
            json={"model": self.model, "prompt": prompt, "stream": False},
            error_cls=TranslationError,
            label="OLLAMA",
            timeout=TIMEOUT_SEC,
        )

        if not isinstance(data, dict):
            raise TranslationError("OLLAMA: unexpected response format")
        if data.get("error"):
            raise TranslationError(f"OLLAMA API call failed: {data['error']}")
        translated = data.get("response") or ""
        if not translated.strip():
            raise TranslationError("OLLAMA: no translation returned")
        return translated.strip()
