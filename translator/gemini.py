# translator/gemini.py
# Google Gemini through the official google-genai SDK.

from google import genai
from google.genai import types

from translator.base import DEFAULT_TARGET_LANGUAGE, build_prompt, truncate_content
from translator.errors import TranslationError
from utils.logger import log

MAX_INPUT_CHARS = 30000
DEFAULT_MODEL = "gemini-2.5-flash-lite"


class GeminiTranslator:
    def __init__(self, api_key: str, target_lang: str = DEFAULT_TARGET_LANGUAGE,
                 model: str = DEFAULT_MODEL, client=None):
        self.target_lang = target_lang
        self.model = model
        self.client = client or genai.Client(api_key=api_key)
        self._config = types.GenerateContentConfig(temperature=0)

    def translate(self, text: str, target_lang: str = "") -> str:
        target_lang = target_lang or self.target_lang
        prompt = build_prompt(truncate_content(text, MAX_INPUT_CHARS), target_lang)

        log(f"GEMINI TRANSLATE | model={self.model} | lang={target_lang} | chars={len(text)}")
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self._config,
            )
        except Exception as e:
            raise TranslationError(f"GEMINI API call failed: {e}") from e

        if not response.text:
            finish_reason = "Unknown"
            if response.candidates:
                finish_reason = response.candidates[0].finish_reason
            raise TranslationError(f"GEMINI: no translation returned. Reason: {finish_reason}")

        return response.text.strip()
