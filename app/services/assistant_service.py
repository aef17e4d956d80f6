"""
Study Assistant Service

The narrow interface every AI feature goes through:
- quiz generation (schema-constrained)
- study plan generation (schema-constrained)
- concept explanation (free text)
- performance analysis (free text)

GeminiStudyAssistant is the production implementation. Routes receive
the assistant through the get_study_assistant dependency so tests can
substitute fixed fixtures.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Protocol

from pydantic import ValidationError

from app.ai.llm import gemini_client
from app.ai.prompts import (
    QUIZ_RESPONSE_SCHEMA,
    STUDY_PLAN_RESPONSE_SCHEMA,
    build_quiz_generation_prompt,
    build_study_plan_prompt,
    build_explain_prompt,
    build_performance_prompt,
)
from app.core.config import settings
from app.schemas.quiz import QuizQuestion
from app.schemas.study_plan import StudyPlanItem

logger = logging.getLogger(__name__)


class AssistantError(Exception):
    """The model call failed or produced unusable output."""
    pass


class StudyAssistant(Protocol):

    async def generate_quiz(self, subject: str, difficulty: str, count: int) -> List[QuizQuestion]:
        ...

    async def generate_study_plan(
        self, subjects: List[str], available_hours: float, goals: List[str]
    ) -> List[StudyPlanItem]:
        ...

    async def explain_concept(self, concept: str, context: str = "") -> str:
        ...

    async def analyze_performance(self, quiz_results: List[Dict[str, Any]], study_hours: float) -> str:
        ...


def parse_json_payload(raw_content: Optional[str]) -> Any:
    """Parse model JSON, tolerating a surrounding markdown fence."""
    if not raw_content or not raw_content.strip():
        raise AssistantError("Empty response from model")

    content = raw_content.strip()
    if content.startswith("```"):
        lines = content.split("\n")
        lines = lines[1:]  # remove opening fence
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        content = "\n".join(lines)

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse model JSON: {e}\nRaw: {content[:500]}")
        raise AssistantError("Model returned malformed JSON") from e


def parse_quiz_questions(raw_content: Optional[str], expected_count: int) -> List[QuizQuestion]:
    """
    Turn the model's JSON into exactly expected_count validated questions.

    Raises:
        AssistantError: empty/malformed JSON, a nonconforming item,
            or the wrong number of questions
    """
    data = parse_json_payload(raw_content)
    items = data.get("questions") if isinstance(data, dict) else None
    if not isinstance(items, list):
        raise AssistantError("Model response has no questions list")

    try:
        questions = [QuizQuestion.model_validate(item) for item in items]
    except ValidationError as e:
        raise AssistantError(f"Model returned a malformed question: {e.error_count()} error(s)") from e

    if len(questions) != expected_count:
        raise AssistantError(
            f"Model returned {len(questions)} questions, expected {expected_count}"
        )
    return questions


def parse_study_plan_items(raw_content: Optional[str]) -> List[StudyPlanItem]:
    data = parse_json_payload(raw_content)
    items = data.get("studyPlan") if isinstance(data, dict) else None
    if not isinstance(items, list) or not items:
        raise AssistantError("Model response has no study plan items")

    try:
        return [StudyPlanItem.model_validate(item) for item in items]
    except ValidationError as e:
        raise AssistantError(f"Model returned a malformed plan item: {e.error_count()} error(s)") from e


class GeminiStudyAssistant:
    """StudyAssistant backed by Google Gemini."""

    async def generate_quiz(self, subject: str, difficulty: str, count: int) -> List[QuizQuestion]:
        prompt = build_quiz_generation_prompt(subject, difficulty, count)
        raw = await self._call_json(prompt, QUIZ_RESPONSE_SCHEMA)
        return parse_quiz_questions(raw, count)

    async def generate_study_plan(
        self, subjects: List[str], available_hours: float, goals: List[str]
    ) -> List[StudyPlanItem]:
        prompt = build_study_plan_prompt(subjects, available_hours, goals)
        raw = await self._call_json(prompt, STUDY_PLAN_RESPONSE_SCHEMA)
        return parse_study_plan_items(raw)

    async def explain_concept(self, concept: str, context: str = "") -> str:
        text = await self._call_text(build_explain_prompt(concept, context), settings.GEMINI_FAST_MODEL)
        return text

    async def analyze_performance(self, quiz_results: List[Dict[str, Any]], study_hours: float) -> str:
        text = await self._call_text(build_performance_prompt(quiz_results, study_hours), settings.GEMINI_MODEL)
        return text

    async def _call_json(self, prompt: str, schema: Dict[str, Any]) -> str:
        try:
            return await gemini_client.generate_json(prompt, schema, model=settings.GEMINI_MODEL)
        except Exception as e:
            raise AssistantError(f"Gemini request failed: {e}") from e

    async def _call_text(self, prompt: str, model: str) -> str:
        try:
            text = await gemini_client.simple_generate(prompt, model=model)
        except Exception as e:
            raise AssistantError(f"Gemini request failed: {e}") from e
        if not text or not text.strip():
            raise AssistantError("Empty response from model")
        return text


_assistant: Optional[GeminiStudyAssistant] = None


def get_study_assistant() -> StudyAssistant:
    """Dependency returning the process-wide assistant."""
    global _assistant
    if _assistant is None:
        _assistant = GeminiStudyAssistant()
    return _assistant
