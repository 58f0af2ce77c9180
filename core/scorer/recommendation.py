#!/usr/bin/env python3
"""
Recommendation - Aggregate skill coefficients into per-vacancy scores.

A candidate's score for a vacancy is the integer sum of the coefficients
every requested skill carries toward it.
"""

from typing import Dict, Iterable, List, Tuple
import logging

from core.schema import CoefficientSchema

logger = logging.getLogger(__name__)


def recommend_for_skills(
    schema: CoefficientSchema,
    skill_names: Iterable[str]
) -> Dict[str, int]:
    """
    Sum skill coefficients per vacancy.

    Args:
        schema: Loaded coefficient schema
        skill_names: Skills the candidate claims; repeats are counted again

    Returns:
        Mapping vacancy name -> total score, ordered by vacancy name

    Raises:
        SkillNotFound: If any requested skill is not in the schema
    """
    totals: Dict[str, int] = {}

    for skill_name in skill_names:
        skill = schema.get_skill(skill_name)

        for vc in skill.vacancies_coefficient:
            totals[vc.vacancy_name] = totals.get(vc.vacancy_name, 0) + vc.coefficient

    return dict(sorted(totals.items()))


def rank_vacancies(scores: Dict[str, int]) -> List[Tuple[str, int]]:
    """Order vacancy scores by score descending, ties by name."""
    return sorted(scores.items(), key=lambda item: (-item[1], item[0]))
