from __future__ import annotations

from typing import Protocol


class TextGenerationError(Exception):
    """The hosted text-generation service could not produce an answer."""


class TextGenerator(Protocol):
    def generate(self, prompt: str, *, json_output: bool = False) -> str:
        raise NotImplementedError


class UnavailableTextGenerator:
    """Used when no API key is configured; every call fails so fallbacks apply."""

    def generate(self, prompt: str, *, json_output: bool = False) -> str:
        raise TextGenerationError("text generation is not configured")
