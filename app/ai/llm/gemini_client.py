"""
Google Gemini LLM Client (New SDK)

Integration with Google's Gemini API using the google-genai package.
Every call is a single round trip: no retries, no caching.
"""

import logging
from typing import Any, Dict, Optional

from google import genai
from google.genai import types

from app.core.config import settings

logger = logging.getLogger(__name__)


# ============================================================
# CLIENT INITIALIZATION
# ============================================================

_client: Optional[genai.Client] = None


def get_client() -> genai.Client:
    """Get or create the Gemini client."""
    global _client

    if _client is None:
        if not settings.GEMINI_API_KEY:
            raise ValueError(
                "GEMINI_API_KEY not set. "
                "Get your free key at https://aistudio.google.com/apikey"
            )

        _client = genai.Client(api_key=settings.GEMINI_API_KEY)
        logger.info(f"Gemini client initialized (model: {settings.GEMINI_MODEL})")

    return _client


# ============================================================
# SCHEMA-CONSTRAINED GENERATION
# ============================================================

async def generate_json(
    prompt: str,
    response_schema: Dict[str, Any],
    model: Optional[str] = None,
    temperature: Optional[float] = None,
) -> str:
    """
    Ask the model for JSON matching a schema.

    Args:
        prompt: Instruction text
        response_schema: OpenAPI-style schema the response must follow
        model: Model name (defaults to settings.GEMINI_MODEL)
        temperature: Creativity (0-2)

    Returns:
        The raw JSON text of the response (may be empty)
    """
    client = get_client()

    config = types.GenerateContentConfig(
        temperature=temperature if temperature is not None else settings.LLM_TEMPERATURE,
        response_mime_type="application/json",
        response_schema=response_schema,
    )

    try:
        response = await client.aio.models.generate_content(
            model=model or settings.GEMINI_MODEL,
            contents=prompt,
            config=config
        )
        return response.text or ""
    except Exception as e:
        logger.error(f"Gemini API error: {e}")
        raise


# ============================================================
# SIMPLE GENERATION
# ============================================================

async def simple_generate(prompt: str, model: Optional[str] = None) -> str:
    """Free-text generation without chat context."""
    client = get_client()

    try:
        response = await client.aio.models.generate_content(
            model=model or settings.GEMINI_MODEL,
            contents=prompt,
        )
        return response.text or ""
    except Exception as e:
        logger.error(f"Gemini generation error: {e}")
        raise
