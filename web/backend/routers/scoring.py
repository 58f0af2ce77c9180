#!/usr/bin/env python3
"""
Scoring endpoints - recommendations, placement checks and quiz answers.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, Query

from core.scorer import ScoringService
from ..dependencies import get_scoring_service
from ..models.requests import WorkerRequestBody, PlacementRequestBody, QuestionAnswerBody
from ..models.responses import WorkerRecommendationResponse, RankedVacancy, ScoreResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["scoring"])


@router.post("/recommendations", response_model=WorkerRecommendationResponse)
def recommend_vacancies(
    worker: WorkerRequestBody,
    ranked: bool = Query(default=False, description="Also return vacancies ordered by score"),
    service: ScoringService = Depends(get_scoring_service)
):
    """
    Recommend vacancies for a candidate's skills.

    Vacancy totals are ordered by vacancy name. Pass ``ranked=true`` to
    additionally get them ordered by score. Unknown skills return 404.
    """
    response = service.recommend(worker.to_domain(), ranked=ranked)

    ranking = None
    if response.ranking is not None:
        ranking = [RankedVacancy(vacancy=name, score=score) for name, score in response.ranking]

    return WorkerRecommendationResponse(
        name=response.name,
        vacancies=response.vacancies,
        ranking=ranking
    )


@router.post("/placements/check", response_model=ScoreResponse)
def check_placement(
    request: PlacementRequestBody,
    service: ScoringService = Depends(get_scoring_service)
):
    """
    Score a candidate's role placements against a company's role tree.

    Unknown companies and roles without submissions score neutrally.
    """
    return ScoreResponse(score=service.check_placement(request.to_domain()))


@router.post("/questions/answers", response_model=ScoreResponse)
def check_answers(
    answers: List[QuestionAnswerBody],
    service: ScoringService = Depends(get_scoring_service)
):
    """
    Score quiz answers.

    An empty answer list cannot be scored and returns 400.
    """
    return ScoreResponse(score=service.check_answers([a.to_domain() for a in answers]))
