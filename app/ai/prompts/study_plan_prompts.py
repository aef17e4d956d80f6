"""
Study Plan Prompts
"""

from typing import List


STUDY_PLAN_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "studyPlan": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": {"type": "string"},
                    "description": {"type": "string"},
                    "duration": {"type": "integer"},
                    "difficulty": {"type": "string", "enum": ["Low", "Medium", "High"]},
                    "priority": {"type": "integer"},
                },
                "required": ["title", "description", "duration", "difficulty", "priority"],
            },
        }
    },
    "required": ["studyPlan"],
}


def build_study_plan_prompt(
    subjects: List[str],
    available_hours: float,
    goals: List[str],
) -> str:
    goals_line = ", ".join(goals) if goals else "general understanding"
    return f"""Create a personalized study plan for the following subjects: {", ".join(subjects)}.
Available study time: {available_hours:g} hours per week.
Learning goals: {goals_line}.

Generate a structured study plan with specific tasks, most important first.
duration is in minutes; difficulty is one of Low, Medium, High; priority 1 is highest.

Respond with JSON in this format:
{{
  "studyPlan": [
    {{
      "title": "Task title",
      "description": "Detailed description of what to study",
      "duration": 60,
      "difficulty": "Medium",
      "priority": 1
    }}
  ]
}}"""
