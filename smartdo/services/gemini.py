"""Gemini structured-output service: sends a rendered prompt and parses the JSON reply."""

import logging
from typing import TypeVar

from google import genai
from google.genai import types
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from smartdo.config import get_settings
from smartdo.exceptions import UpstreamError

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)

# Only high-severity dangerous content is blocked; other categories keep provider defaults.
REMINDER_SAFETY_SETTINGS = [
    types.SafetySetting(
        category=types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
        threshold=types.HarmBlockThreshold.BLOCK_ONLY_HIGH,
    ),
]


def _get_client() -> genai.Client:
    api_key = get_settings().gemini_api_key
    if not api_key:
        raise UpstreamError(
            "Gemini API key not configured. Get one at "
            "https://aistudio.google.com/apikey and set GEMINI_API_KEY in .env"
        )
    return genai.Client(api_key=api_key)


def generate_structured(
    prompt: str,
    output_model: type[OutputT],
    safety_settings: list[types.SafetySetting] | None = None,
    model: str | None = None,
) -> OutputT:
    """Ask Gemini for JSON shaped like output_model and validate the reply.

    Raises UpstreamError when the call fails, the reply is blocked or empty,
    or the JSON does not satisfy output_model.
    """
    client = _get_client()
    model = model or get_settings().gemini_model
    config = types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=output_model,
        safety_settings=safety_settings,
    )

    try:
        response = client.models.generate_content(
            model=model,
            contents=prompt,
            config=config,
        )
    except Exception as e:
        raise UpstreamError(f"Gemini request failed: {e}") from e

    text = response.text
    if not text:
        raise UpstreamError(f"Gemini returned no structured output (model {model})")

    try:
        return output_model.model_validate_json(text)
    except PydanticValidationError as e:
        logger.debug("Rejected Gemini reply: %s", text)
        raise UpstreamError(
            f"Gemini output does not match {output_model.__name__}: {e}"
        ) from e
