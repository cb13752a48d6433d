# translator/openai_chat.py
# OpenAI chat completions. Refusals and content-filter stops are errors.

from openai import OpenAI

from translator.base import DEFAULT_TARGET_LANGUAGE, build_prompt, truncate_content
from translator.errors import TranslationError
from utils.logger import log

MAX_INPUT_CHARS = 30000
DEFAULT_MODEL = "gpt-4o-mini"
MAX_OUTPUT_TOKENS = 3000

SYSTEM_PROMPT = "You are a translation engine. Output only the translation."


class OpenAITranslator:
    def __init__(self, api_key: str, target_lang: str = DEFAULT_TARGET_LANGUAGE,
                 model: str = DEFAULT_MODEL, client=None):
        self.target_lang = target_lang
        self.model = model
        self.client = client or OpenAI(api_key=api_key)

    def _params(self, prompt: str) -> dict:
        params = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
        }
        # reasoning models reject max_tokens / temperature
        if any(x in self.model for x in ["o1-", "o3-", "gpt-5", "reasoning"]):
            params["max_completion_tokens"] = MAX_OUTPUT_TOKENS
        else:
            params["max_tokens"] = MAX_OUTPUT_TOKENS
            params["temperature"] = 0.2
        return params

    def translate(self, text: str, target_lang: str = "") -> str:
        target_lang = target_lang or self.target_lang
        prompt = build_prompt(truncate_content(text, MAX_INPUT_CHARS), target_lang)

        log(f"OPENAI TRANSLATE | model={self.model} | lang={target_lang} | chars={len(text)}")
        try:
            response = self.client.chat.completions.create(**self._params(prompt))
        except Exception as e:
            raise TranslationError(f"OPENAI API call failed: {e}") from e

        choice = response.choices[0]
        message = choice.message

        if getattr(message, "refusal", None):
            raise TranslationError(f"OPENAI refused: {message.refusal}")
        if choice.finish_reason == "content_filter":
            raise TranslationError("OPENAI blocked: finish reason is 'content_filter'")
        if not message.content:
            raise TranslationError("OPENAI: no translation returned")

        return message.content.strip()
