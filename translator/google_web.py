# translator/google_web.py
# Google Translate public web endpoint (no key). Response is a nested
# JSON array: [[["translated", "original", ...], ...], ...].

import requests

from translator.base import DEFAULT_TARGET_LANGUAGE, truncate_content
from translator.errors import TranslationError
from utils.http_json import request_json

GOOGLE_TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"
MAX_INPUT_CHARS = 5000


class GoogleTranslator:
    def __init__(self, target_lang: str = DEFAULT_TARGET_LANGUAGE, session: requests.Session = None):
        self.target_lang = target_lang
        self.session = session

    def translate(self, text: str, target_lang: str = "") -> str:
        target_lang = target_lang or self.target_lang

        data = request_json(
            self.session,
            "GET",
            GOOGLE_TRANSLATE_URL,
            params={
                "client": "gtx",
                "sl": "auto",
                "tl": target_lang,
                "dt": "t",
                "q": truncate_content(text, MAX_INPUT_CHARS),
            },
            headers={"User-Agent": "Mozilla/5.0"},
            error_cls=TranslationError,
            label="GOOGLE",
        )
        return parse_google_response(data)


def parse_google_response(data) -> str:
    if not isinstance(data, list) or not data:
        raise TranslationError("GOOGLE: no translation returned")

    segments = data[0]
    if not isinstance(segments, list) or not segments:
        raise TranslationError("GOOGLE: unexpected response format")

    translated = "".join(
        seg[0] for seg in segments
        if isinstance(seg, list) and seg and isinstance(seg[0], str)
    )
    if not translated:
        raise TranslationError("GOOGLE: no translation returned")
    return translated
