"""Gemini text generation used to write study plans."""
import logging
import os
from typing import Optional

from google import genai
from google.genai import types

from learnify.settings import DEFAULT_MODEL, get_api_key
from learnify.tools.prompts import (
    DEFAULT_LANGUAGE,
    client_init_failure_message,
    missing_api_key_message,
)

logger = logging.getLogger(__name__)


class GeminiGenerator:
    """Callable wrapper: prompt in, generated text out."""

    def __init__(self, client, model_name: str = DEFAULT_MODEL, temperature: Optional[float] = None):
        self.client = client
        self.model_name = model_name
        self.temperature = temperature

    def __call__(self, prompt: str) -> str:
        """
        Send one prompt to Gemini and return the response text.

        Raises whatever the client raises on API or network failure, and
        ValueError when the model returns no text (e.g. blocked by safety filters).
        """
        logger.debug(f"Calling {self.model_name} with prompt of {len(prompt)} chars")
        config = None
        if self.temperature is not None:
            config = types.GenerateContentConfig(temperature=self.temperature)

        response = self.client.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=config,
        )

        text = response.text
        if not text:
            raise ValueError(f"Empty response from {self.model_name}")

        logger.debug(f"Response received, length: {len(text)} chars")
        return text


def init_generator(
    api_key: Optional[str] = None,
    model_name: Optional[str] = None,
    temperature: Optional[float] = None,
    language: str = DEFAULT_LANGUAGE,
) -> tuple[Optional[GeminiGenerator], Optional[str]]:
    """
    Check configuration and build the Gemini generator once per request.

    Returns:
        (GeminiGenerator, None) on success
        (None, error_message) when the API key is missing or the client
        cannot be constructed
    """
    api_key = api_key or get_api_key()
    if not api_key:
        logger.error("GOOGLE_API_KEY environment variable not set")
        return None, missing_api_key_message(language)

    try:
        client = genai.Client(api_key=api_key)
    except Exception as e:
        logger.error(f"Gemini client initialization failed: {e}")
        return None, client_init_failure_message(e, language)

    model_name = model_name or os.getenv("CHAT_MODEL", DEFAULT_MODEL)
    logger.info(f"Gemini generator ready (model={model_name})")
    return GeminiGenerator(client, model_name=model_name, temperature=temperature), None
