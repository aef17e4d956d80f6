"""AI Prompts Module"""

from app.ai.prompts.quiz_prompts import (
    QUIZ_RESPONSE_SCHEMA,
    build_quiz_generation_prompt,
)
from app.ai.prompts.study_plan_prompts import (
    STUDY_PLAN_RESPONSE_SCHEMA,
    build_study_plan_prompt,
)
from app.ai.prompts.tutor_prompts import (
    build_explain_prompt,
    build_performance_prompt,
)

__all__ = [
    "QUIZ_RESPONSE_SCHEMA",
    "build_quiz_generation_prompt",
    "STUDY_PLAN_RESPONSE_SCHEMA",
    "build_study_plan_prompt",
    "build_explain_prompt",
    "build_performance_prompt",
]
