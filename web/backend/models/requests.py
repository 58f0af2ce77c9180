#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

from core.cache import AnswerResult
from core.scorer import (
    WorkerRequest, PlacementSubmission, PlacementRequest, QuestionAnswer
)


class WorkerRequestBody(BaseModel):
    """Candidate skills to recommend vacancies for."""
    name: str = Field(..., description="Candidate name")
    skills: List[str] = Field(default_factory=list, description="Skill names from the schema")

    def to_domain(self) -> WorkerRequest:
        return WorkerRequest(name=self.name, skills=list(self.skills))


class PlacementSubmissionBody(BaseModel):
    """A candidate's ranked vacancy preferences for one company role.

    The frontend also sends display fields (name, qualities, id). They
    are accepted but never reach scoring.
    """
    model_config = ConfigDict(extra="ignore")

    vacancies: List[str] = Field(..., description="Vacancy names, most preferred first")

    def to_domain(self) -> PlacementSubmission:
        return PlacementSubmission(vacancies=list(self.vacancies))


class PlacementRequestBody(BaseModel):
    """Placement submissions for one company, keyed by role name."""
    company_name: str
    placements: Dict[str, Optional[PlacementSubmissionBody]] = Field(default_factory=dict)

    def to_domain(self) -> PlacementRequest:
        return PlacementRequest(
            company_name=self.company_name,
            placements={
                role: submission.to_domain() if submission is not None else None
                for role, submission in self.placements.items()
            }
        )


class QuestionAnswerBody(BaseModel):
    """Answer contents selected for one question."""
    question_uuid: str
    answers: List[str] = Field(default_factory=list)

    def to_domain(self) -> QuestionAnswer:
        return QuestionAnswer(question_uuid=self.question_uuid, answers=list(self.answers))


class AnswerResultBody(BaseModel):
    question_uuid: str
    answer_result: bool

    def to_domain(self) -> AnswerResult:
        return AnswerResult(question_uuid=self.question_uuid, answer_result=self.answer_result)


class SaveResultsRequest(BaseModel):
    """Request to store a candidate's results in the results slot."""
    name: str = Field(..., description="Candidate name")
    test_results: Optional[List[AnswerResultBody]] = None
    vacancy_results: Optional[float] = Field(None, ge=0, description="Placement score")
