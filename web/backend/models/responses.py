#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class VacancyCoefficientModel(BaseModel):
    vacancy: str
    coefficient: int


class SkillResponse(BaseModel):
    """A skill with its per-vacancy coefficients."""
    name: str
    vacancies_coefficient: List[VacancyCoefficientModel]


class CompanyResponse(BaseModel):
    """A company and its role tree (role names only)."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Consulting",
                "tree": {
                    "label": "Managing partner",
                    "children": [{"label": "Business analyst"}]
                }
            }
        }
    )

    name: str
    tree: Dict[str, Any]


class AnswerVariantModel(BaseModel):
    content: str
    is_answer: bool


class QuestionResponse(BaseModel):
    uuid: str
    title: str
    variants: List[AnswerVariantModel]


class RankedVacancy(BaseModel):
    vacancy: str
    score: int


class WorkerRecommendationResponse(BaseModel):
    """Per-vacancy totals for one candidate, ordered by vacancy name."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Oleg",
                "vacancies": {"Analytic": 5, "Programmer": 3},
                "ranking": None
            }
        }
    )

    name: str
    vacancies: Dict[str, int]
    ranking: Optional[List[RankedVacancy]] = None


class ScoreResponse(BaseModel):
    success: bool = True
    score: float = Field(ge=0)


class AnswerResultModel(BaseModel):
    question_uuid: str
    answer_result: bool


class UserSaveResultModel(BaseModel):
    name: str
    test_results: Optional[List[AnswerResultModel]] = None
    vacancy_results: Optional[float] = None


class SavedResultsResponse(BaseModel):
    """Contents of the results slot."""
    success: bool = True
    results: List[UserSaveResultModel]
