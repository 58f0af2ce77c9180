#!/usr/bin/env python3
"""
Scoring Service - Command-level operations over a loaded coefficient schema.

Wraps the three engines (recommendation, placement, quiz) and the schema
read accessors behind one object bound to a single schema:
- recommend: skills -> per-vacancy totals (WorkerResponse)
- check_placement: role preferences -> weighted correctness
- check_answers: quiz answers -> correctness ratio

The schema is read-only, so one service instance is safe to share
between concurrent requests.
"""

from typing import List, Optional
import logging

from core.schema import CoefficientSchema, Vacancy, Skill, Company, Question
from core.scorer.models import (
    WorkerRequest, WorkerResponse, PlacementRequest, QuestionAnswer
)
from core.scorer.recommendation import recommend_for_skills, rank_vacancies
from core.scorer.placement import score_placement
from core.scorer.quiz import score_quiz

logger = logging.getLogger(__name__)


class ScoringService:
    """
    Service exposing schema reads and scoring to the command surface.
    """

    def __init__(self, schema: CoefficientSchema):
        self.schema = schema

    def get_vacancies(self) -> List[Vacancy]:
        vacancies = sorted(self.schema.vacancies, key=lambda v: v.name)
        logger.info(f"Returned {len(vacancies)} vacancies")
        return vacancies

    def get_skills(self) -> List[Skill]:
        skills = sorted(self.schema.skills, key=lambda s: s.name)
        logger.info(f"Returned {len(skills)} skills")
        return skills

    def get_companies(self) -> List[Company]:
        return sorted(self.schema.companies, key=lambda c: c.name)

    def get_company_names(self) -> List[str]:
        names = [company.name for company in self.get_companies()]
        logger.info(f"Returned {len(names)} companies")
        return names

    def get_current_company(self, company_name: str) -> Company:
        """
        Raises:
            CompanyNotFound: If the company is not in the schema
        """
        company = self.schema.get_company(company_name)
        logger.info(f"Returned company {company.name!r}")
        return company

    def get_questions(self) -> List[Question]:
        return sorted(self.schema.questions, key=lambda q: q.uuid)

    def get_question_by_uuid(self, uuid: str) -> Question:
        return self.schema.get_question_by_uuid(uuid)

    def recommend(self, worker: WorkerRequest, ranked: bool = False) -> WorkerResponse:
        """
        Recommend vacancies for a candidate's skills.

        Args:
            worker: Candidate name and claimed skills
            ranked: Also return vacancies ordered by score (highest first)

        Returns:
            WorkerResponse with vacancy totals ordered by vacancy name

        Raises:
            SkillNotFound: If any skill is not in the schema
        """
        vacancies = recommend_for_skills(self.schema, worker.skills)
        ranking: Optional[list] = rank_vacancies(vacancies) if ranked else None

        logger.info(f"Returned vacancies for worker {worker.name!r}")
        logger.debug(f"Worker {worker.name!r} skills={worker.skills} -> {vacancies}")

        return WorkerResponse(name=worker.name, vacancies=vacancies, ranking=ranking)

    def check_placement(self, request: PlacementRequest) -> float:
        score = score_placement(self.schema, request.company_name, request.placements)
        logger.info(f"Placement score for company {request.company_name!r}: {score:.4f}")
        return score

    def check_answers(self, answers: List[QuestionAnswer]) -> float:
        """
        Raises:
            EmptySubmissionError: If no answers were submitted
        """
        score = score_quiz(self.schema, answers)
        logger.info(f"Quiz score over {len(answers)} answers: {score:.4f}")
        return score
