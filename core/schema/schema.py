#!/usr/bin/env python3
"""
Coefficient Schema - Immutable container for the loaded schema.

Built once by the loader and shared read-only between all scoring
requests. Each accessor returns the full set; single items are looked
up by key.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping

from core.schema.errors import (
    SkillNotFound, CompanyNotFound, QuestionNotFound
)
from core.schema.models import Vacancy, Skill, Company, Question


class CoefficientSchema:
    """Vacancies, skills, companies and questions of one schema document."""

    def __init__(
        self,
        vacancies: Iterable[Vacancy],
        skills: Iterable[Skill],
        companies: Iterable[Company],
        questions: Iterable[Question]
    ):
        self._vacancies: Mapping[str, Vacancy] = _index(vacancies, 'name')
        self._skills: Mapping[str, Skill] = _index(skills, 'name')
        self._companies: Mapping[str, Company] = _index(companies, 'name')
        self._questions: Mapping[str, Question] = _index(questions, 'uuid')

    @property
    def vacancies(self) -> FrozenSet[Vacancy]:
        return frozenset(self._vacancies.values())

    @property
    def skills(self) -> FrozenSet[Skill]:
        return frozenset(self._skills.values())

    @property
    def companies(self) -> FrozenSet[Company]:
        return frozenset(self._companies.values())

    @property
    def questions(self) -> FrozenSet[Question]:
        return frozenset(self._questions.values())

    def get_skill(self, name: str) -> Skill:
        try:
            return self._skills[name]
        except KeyError:
            raise SkillNotFound(name) from None

    def find_company(self, name: str):
        """Return the company or None; placement scoring treats absence as neutral."""
        return self._companies.get(name)

    def get_company(self, name: str) -> Company:
        company = self.find_company(name)
        if company is None:
            raise CompanyNotFound(name)
        return company

    def find_question(self, uuid: str):
        return self._questions.get(uuid)

    def get_question_by_uuid(self, uuid: str) -> Question:
        question = self.find_question(uuid)
        if question is None:
            raise QuestionNotFound(uuid)
        return question

    def summary(self) -> Dict[str, int]:
        return {
            'vacancies': len(self._vacancies),
            'skills': len(self._skills),
            'companies': len(self._companies),
            'questions': len(self._questions)
        }

    def __repr__(self) -> str:
        counts = ', '.join(f"{k}={v}" for k, v in self.summary().items())
        return f"CoefficientSchema({counts})"


def _index(items: Iterable, key: str) -> Mapping:
    """Index items by attribute; first occurrence of a key wins."""
    index: Dict[str, object] = {}
    for item in items:
        index.setdefault(getattr(item, key), item)
    return MappingProxyType(index)
