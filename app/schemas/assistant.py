"""
Learning buddy, classroom and analytics schemas.
"""

from datetime import date
from typing import List

from pydantic import Field

from app.schemas.common import CamelModel


class ExplainRequest(CamelModel):
    concept: str = Field(..., min_length=1, max_length=500)
    context: str = Field(default="", max_length=5000)


class ExplanationResponse(CamelModel):
    explanation: str


class AnalysisResponse(CamelModel):
    analysis: str


class ClassroomAssignment(CamelModel):
    """A course work item that has a due date."""
    id: str
    title: str
    description: str = ""
    due_date: date
    course_name: str


class AssignmentListResponse(CamelModel):
    assignments: List[ClassroomAssignment]
