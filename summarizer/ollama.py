# summarizer/ollama.py

import requests

from summarizer.errors import SummarizationError
from summarizer.prompt import build_prompt
from utils.http_json import request_json
from utils.logger import log

DEFAULT_MODEL = "qwen2:4b"
TIMEOUT_SEC = 120


class OllamaSummarizer:
    def __init__(self, url: str, model: str = DEFAULT_MODEL, session: requests.Session = None):
        self.url = url.rstrip("/")
        self.model = model
        self.session = session

    def summarize(self, title: str, content: str) -> str:
        log(f"SUMMARIZER: ollama | model={self.model} | chars={len(content)}")
        data = request_json(
            self.session,
            "POST",
            f"{self.url}/api/generate",
            json={"model": self.model, "prompt": build_prompt(title, content), "stream": False},
            error_cls=SummarizationError,
            label="OLLAMA",
            timeout=TIMEOUT_SEC,
        )

        if not isinstance(data, dict):
            raise SummarizationError("OLLAMA: unexpected response format")
        if data.get("error"):
            raise SummarizationError(f"OLLAMA API call failed: {data['error']}")
        summary = (data.get("response") or "").strip()
        if not summary:
            raise SummarizationError("OLLAMA: empty summary returned")
        return summary
