"""
Tutor Prompts

Free-text prompts for the learning buddy and the performance report.
"""

import json
from typing import Any, Dict, List


def build_explain_prompt(concept: str, context: str = "") -> str:
    """
    Build the prompt for explaining a single concept.

    Args:
        concept: What the student asked about
        context: Optional course or situation context
    """
    context_line = f"\nContext: {context}\n" if context else ""
    return f"""Explain the concept "{concept}" in a clear, educational way.
{context_line}
Make the explanation:
- Easy to understand for students
- Include relevant examples
- Break down complex ideas into simpler parts
- Highlight key points"""


def build_performance_prompt(quiz_results: List[Dict[str, Any]], study_hours: float) -> str:
    """
    Build the prompt for the study performance report.

    Args:
        quiz_results: Completed quizzes as {subject, score, totalQuestions}
        study_hours: Planned study time in hours
    """
    return f"""Analyze this student's performance and provide recommendations:

Quiz Results: {json.dumps(quiz_results)}
Weekly Study Hours: {study_hours:.1f}

Provide:
1. Performance analysis
2. Areas for improvement
3. Study strategies
4. Motivation tips"""
