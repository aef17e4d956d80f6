"""
Quiz Generation Prompts

Prompt text and the response schema for AI-powered quiz generation.
The model writes multiple-choice questions for a subject and level.
"""


QUIZ_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "questions": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "question": {"type": "string"},
                    "options": {"type": "array", "items": {"type": "string"}},
                    "correctAnswer": {"type": "integer"},
                    "explanation": {"type": "string"},
                },
                "required": ["question", "options", "correctAnswer", "explanation"],
            },
        }
    },
    "required": ["questions"],
}


def build_quiz_generation_prompt(
    subject: str,
    difficulty: str,
    num_questions: int = 5,
) -> str:
    return f"""You are an expert educational assessment creator.

Generate exactly {num_questions} multiple choice questions for {subject} at {difficulty} difficulty level.

REQUIREMENTS:
- Each question has exactly 4 options with only one correct answer
- correctAnswer is the zero-based index (0-3) of the correct option
- Explanations briefly say why the answer is correct
- Distractors should be plausible but clearly incorrect

Respond with JSON in this exact format:
{{
  "questions": [
    {{
      "question": "Question text here",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correctAnswer": 0,
      "explanation": "Brief explanation of why this is correct"
    }}
  ]
}}"""
