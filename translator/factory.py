# translator/factory.py
# Provider selection. Keys come from the environment, like the rest of
# the project (GOOGLE_API_KEY, OPENAI_API_KEY, ...).

import os
from dataclasses import dataclass

from translator.base import DEFAULT_TARGET_LANGUAGE, Translator
from translator.errors import ProviderNotConfigured, ProviderNotSupported
from translator.gemini import GeminiTranslator
from translator.google_web import GoogleTranslator
from translator.microsoft import MicrosoftTranslator
from translator.ollama import DEFAULT_MODEL as OLLAMA_DEFAULT_MODEL, OllamaTranslator
from translator.openai_chat import OpenAITranslator
from utils.logger import log

PROVIDERS = ("gemini", "openai", "google", "microsoft", "ollama")


@dataclass
class TranslatorConfig:
    provider: str = ""
    api_key: str = ""
    url: str = ""
    model: str = ""
    target_lang: str = DEFAULT_TARGET_LANGUAGE

    @classmethod
    def from_env(cls, provider: str, target_lang: str = "") -> "TranslatorConfig":
        key_var = {
            "gemini": "GOOGLE_API_KEY",
            "openai": "OPENAI_API_KEY",
            "microsoft": "MICROSOFT_TRANSLATOR_KEY",
        }.get(provider)
        return cls(
            provider=provider,
            api_key=os.getenv(key_var, "") if key_var else "",
            url=os.getenv("OLLAMA_URL", "") if provider == "ollama" else "",
            model=os.getenv("OLLAMA_MODEL", "") if provider == "ollama" else "",
            target_lang=target_lang or DEFAULT_TARGET_LANGUAGE,
        )


def new_translator(config: TranslatorConfig) -> Translator:
    target_lang = config.target_lang or DEFAULT_TARGET_LANGUAGE
    provider = config.provider

    if provider in ("disabled", ""):
        raise ProviderNotConfigured("translation provider not configured: translation provider is disabled")

    if provider == "gemini":
        if not config.api_key:
            raise ProviderNotConfigured("translation provider not configured: Gemini API key not set")
        kwargs = {"model": config.model} if config.model else {}
        translator = GeminiTranslator(config.api_key, target_lang, **kwargs)

    elif provider == "openai":
        if not config.api_key:
            raise ProviderNotConfigured("translation provider not configured: OpenAI API key not set")
        kwargs = {"model": config.model} if config.model else {}
        translator = OpenAITranslator(config.api_key, target_lang, **kwargs)

    elif provider == "google":
        translator = GoogleTranslator(target_lang)

    elif provider == "microsoft":
        if not config.api_key:
            raise ProviderNotConfigured(
                "translation provider not configured: Microsoft Translator API key not set"
            )
        translator = MicrosoftTranslator(config.api_key, target_lang)

    elif provider == "ollama":
        if not config.url:
            raise ProviderNotConfigured("translation provider not configured: Ollama URL not set")
        translator = OllamaTranslator(config.url, config.model or OLLAMA_DEFAULT_MODEL, target_lang)

    else:
        raise ProviderNotSupported(f"translation provider not supported: {provider}")

    log(f"TRANSLATOR: provider={provider} lang={target_lang}")
    return translator
