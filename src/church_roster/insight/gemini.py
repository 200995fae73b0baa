from __future__ import annotations

from google import genai
from google.genai import types


class GeminiTextGenerator:
    """TextGenerator backed by the Gemini API."""

    def __init__(self, *, api_key: str, model: str):
        self._client = genai.Client(api_key=api_key)
        self._model = model

    def generate(self, prompt: str, *, json_output: bool = False) -> str:
        config = types.GenerateContentConfig(response_mime_type="application/json") if json_output else None
        response = self._client.models.generate_content(model=self._model, contents=prompt, config=config)
        return response.text or ""
