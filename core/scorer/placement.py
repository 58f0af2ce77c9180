#!/usr/bin/env python3
"""
Placement Scoring - Score a candidate's role preferences against a company tree.

Every role of the company tree maps to a target vacancy. For each role
the candidate submitted data for, matches of the target vacancy in the
candidate's ranked list earn 1 / (1 + rank). The sum is averaged over
the submitted roles and scaled by PLACEMENT_WEIGHT.
"""

from typing import Mapping, Optional
import logging

from core.schema import CoefficientSchema
from core.scorer.models import PlacementSubmission

logger = logging.getLogger(__name__)

# Share of the overall assessment carried by placement
PLACEMENT_WEIGHT = 0.25


def score_placement(
    schema: CoefficientSchema,
    company_name: str,
    placements: Mapping[str, Optional[PlacementSubmission]]
) -> float:
    """
    Calculate the weighted placement correctness for one company.

    Roles without a submission are skipped and do not count toward the
    average. An unknown company, or no overlap between the tree and the
    submitted roles, scores 0.0.

    Args:
        schema: Loaded coefficient schema
        company_name: Company whose role tree is the answer key
        placements: Role name -> candidate submission

    Returns:
        Weighted score; PLACEMENT_WEIGHT when every role is matched first
    """
    company = schema.find_company(company_name)
    if company is None:
        logger.info(f"Company {company_name!r} not found, placement scores 0.0")
        return 0.0

    correctness = 0.0
    all_percentage = 0

    for level in company.tree.iter_levels():
        submission = placements.get(level.role_name)
        if submission is None:
            logger.debug(f"Role {level.role_name!r} has no submitted placement, skipped")
            continue

        all_percentage += 1
        for rank, vacancy_name in enumerate(submission.vacancies):
            if vacancy_name == level.vacancy_name:
                correctness += 1.0 / (1 + rank)

        logger.debug(
            f"Role {level.role_name!r} -> target {level.vacancy_name!r}, "
            f"candidate top: {submission.vacancies}"
        )

    if all_percentage == 0:
        return 0.0

    logger.debug(f"Placement correctness {correctness} over {all_percentage} roles")
    return correctness * PLACEMENT_WEIGHT / all_percentage
