"""
LLM Module

Language Model integrations for the study assistant.

Currently using Google Gemini.
"""

from app.ai.llm.gemini_client import (
    generate_json,
    simple_generate,
)

__all__ = [
    "generate_json",
    "simple_generate",
]
