# summarizer/factory.py

import os
from dataclasses import dataclass

from summarizer.errors import ProviderNotConfigured, ProviderNotSupported
from summarizer.gemini import GeminiSummarizer
from summarizer.ollama import DEFAULT_MODEL as OLLAMA_DEFAULT_MODEL, OllamaSummarizer
from utils.logger import log


@dataclass
class SummarizerConfig:
    provider: str = ""
    gemini_api_key: str = ""
    ollama_url: str = ""
    ollama_model: str = ""

    @classmethod
    def from_env(cls, provider: str) -> "SummarizerConfig":
        return cls(
            provider=provider,
            gemini_api_key=os.getenv("GOOGLE_API_KEY", ""),
            ollama_url=os.getenv("OLLAMA_URL", ""),
            ollama_model=os.getenv("OLLAMA_MODEL", ""),
        )


def new_summarizer(config: SummarizerConfig):
    if config.provider in ("disabled", ""):
        raise ProviderNotConfigured("AI provider not configured: AI provider is disabled")

    if config.provider == "gemini":
        if not config.gemini_api_key:
            raise ProviderNotConfigured("AI provider not configured: Gemini API key not set")
        summarizer = GeminiSummarizer(config.gemini_api_key)
    elif config.provider == "ollama":
        if not config.ollama_url:
            raise ProviderNotConfigured("AI provider not configured: Ollama URL not set")
        summarizer = OllamaSummarizer(config.ollama_url, config.ollama_model or OLLAMA_DEFAULT_MODEL)
    else:
        raise ProviderNotSupported(f"AI provider not supported: {config.provider}")

    log(f"SUMMARIZER: provider={config.provider}")
    return summarizer
