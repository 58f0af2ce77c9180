#!/usr/bin/env python3
"""
Schema endpoints - read vacancies, skills, companies and questions.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends

from core.scorer import ScoringService
from ..dependencies import get_scoring_service
from ..models.responses import SkillResponse, CompanyResponse, QuestionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["schema"])


@router.get("/vacancies", response_model=List[str])
def get_vacancies(service: ScoringService = Depends(get_scoring_service)):
    """Get all vacancy names, sorted."""
    return [vacancy.name for vacancy in service.get_vacancies()]


@router.get("/skills", response_model=List[SkillResponse])
def get_skills(service: ScoringService = Depends(get_scoring_service)):
    """Get all skills with their per-vacancy coefficients."""
    return [SkillResponse(**skill.to_dict()) for skill in service.get_skills()]


@router.get("/companies", response_model=List[str])
def get_companies(service: ScoringService = Depends(get_scoring_service)):
    """Get all company names, sorted."""
    return service.get_company_names()


@router.get("/companies/{company_name}", response_model=CompanyResponse)
def get_current_company(
    company_name: str,
    service: ScoringService = Depends(get_scoring_service)
):
    """
    Get one company and its role tree.

    Only role names are returned; the vacancy each role maps to is the
    placement answer key.
    """
    return CompanyResponse(**service.get_current_company(company_name).to_dict())


@router.get("/questions", response_model=List[QuestionResponse])
def get_questions(service: ScoringService = Depends(get_scoring_service)):
    """Get all quiz questions."""
    return [QuestionResponse(**q.to_dict()) for q in service.get_questions()]


@router.get("/questions/{question_uuid}", response_model=QuestionResponse)
def get_question_by_uuid(
    question_uuid: str,
    service: ScoringService = Depends(get_scoring_service)
):
    """Get one quiz question by its uuid."""
    return QuestionResponse(**service.get_question_by_uuid(question_uuid).to_dict())
