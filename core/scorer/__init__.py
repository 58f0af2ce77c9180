#!/usr/bin/env python3
"""
Scoring Module - Recommendation, placement and quiz scoring.

Public API:
- ScoringService: Command-level orchestrator bound to one schema
- recommend_for_skills, score_placement, score_quiz: the engines

Focused, single-responsibility modules:

- models.py: Request/response structures and scoring errors
- recommendation.py: Skill coefficients -> per-vacancy totals
- placement.py: Company role tree vs candidate preferences
- quiz.py: Quiz answers vs answer variants
- service.py: ScoringService orchestrator
"""

from core.scorer.models import (
    WorkerRequest, WorkerResponse, PlacementSubmission, PlacementRequest,
    QuestionAnswer, ScoringError, EmptySubmissionError
)
from core.scorer.recommendation import recommend_for_skills, rank_vacancies
from core.scorer.placement import score_placement, PLACEMENT_WEIGHT
from core.scorer.quiz import score_quiz
from core.scorer.service import ScoringService

__all__ = [
    'ScoringService',
    'WorkerRequest', 'WorkerResponse', 'PlacementSubmission', 'PlacementRequest',
    'QuestionAnswer', 'ScoringError', 'EmptySubmissionError',
    'recommend_for_skills', 'rank_vacancies', 'score_placement',
    'PLACEMENT_WEIGHT', 'score_quiz'
]
