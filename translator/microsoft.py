# translator/microsoft.py
# Azure Cognitive Services Translator v3.

import requests

from translator.base import DEFAULT_TARGET_LANGUAGE, truncate_content
from translator.errors import TranslationError
from utils.http_json import request_json

MICROSOFT_TRANSLATE_URL = "https://api.cognitive.microsofttranslator.com/translate"
MAX_INPUT_CHARS = 50000


class MicrosoftTranslator:
    def __init__(self, api_key: str, target_lang: str = DEFAULT_TARGET_LANGUAGE,
                 session: requests.Session = None):
        self.api_key = api_key
        self.target_lang = target_lang
        self.session = session

    def translate(self, text: str, target_lang: str = "") -> str:
        target_lang = target_lang or self.target_lang

        data = request_json(
            self.session,
            "POST",
            MICROSOFT_TRANSLATE_URL,
            params={"api-version": "3.0", "to": target_lang},
            json=[{"Text": truncate_content(text, MAX_INPUT_CHARS)}],
            headers={"Ocp-Apim-Subscription-Key": self.api_key},
            error_cls=TranslationError,
            label="MICROSOFT",
        )

        try:
            return data[0]["translations"][0]["text"]
        except (IndexError, KeyError, TypeError):
            raise TranslationError("MICROSOFT: no translation returned")
