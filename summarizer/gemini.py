# summarizer/gemini.py

from google import genai
from google.genai import types

from summarizer.errors import SummarizationError
from summarizer.prompt import build_prompt
from utils.logger import log

DEFAULT_MODEL = "gemini-2.0-flash"


class GeminiSummarizer:
    def __init__(self, api_key: str, model: str = DEFAULT_MODEL, client=None):
        self.model = model
        self.client = client or genai.Client(api_key=api_key)

    def summarize(self, title: str, content: str) -> str:
        log(f"SUMMARIZER: gemini | model={self.model} | chars={len(content)}")
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=build_prompt(title, content),
                config=types.GenerateContentConfig(temperature=0.2),
            )
        except Exception as e:
            raise SummarizationError(f"GEMINI API call failed: {e}") from e

        if not response.text or not response.text.strip():
            raise SummarizationError("GEMINI: empty summary returned")
        return response.text.strip()
