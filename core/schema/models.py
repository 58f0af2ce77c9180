#!/usr/bin/env python3
"""
Schema Models - Immutable data structures for the coefficient schema.

Every entity is a frozen dataclass. Identity follows the lookup key:
- Vacancy: name
- Skill: name (coefficients excluded)
- Company: name
- Question: uuid
- AnswerVariant: content
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Tuple, Iterator


@dataclass(frozen=True)
class Vacancy:
    """A named target role archetype."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class VacancyCoefficient:
    """Weight a skill contributes toward one vacancy."""
    vacancy_name: str
    coefficient: int

    def to_dict(self) -> Dict[str, Any]:
        return {'vacancy': self.vacancy_name, 'coefficient': self.coefficient}


@dataclass(frozen=True)
class Skill:
    """A named competency carrying integer weights toward vacancies."""
    name: str
    vacancies_coefficient: Tuple[VacancyCoefficient, ...] = field(default=(), compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'vacancies_coefficient': [vc.to_dict() for vc in self.vacancies_coefficient]
        }


@dataclass(frozen=True)
class JobLevel:
    """One node of a company's role tree.

    Maps the company's own role name to the vacancy archetype it
    corresponds to. Children are ordered; a leaf has an empty tuple.
    """
    role_name: str
    vacancy_name: str
    children: Tuple['JobLevel', ...] = ()

    @property
    def label(self) -> Dict[str, str]:
        return {self.role_name: self.vacancy_name}

    def iter_levels(self) -> Iterator['JobLevel']:
        """Walk the tree in pre-order, root first."""
        stack: List[JobLevel] = [self]
        while stack:
            level = stack.pop()
            yield level
            stack.extend(reversed(level.children))

    def flatten(self) -> List['JobLevel']:
        return list(self.iter_levels())

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the frontend.

        Only the company role name is exposed; the target vacancy is the
        answer key for placement scoring and stays server side.
        """
        data: Dict[str, Any] = {'label': self.role_name}
        if self.children:
            data['children'] = [child.to_dict() for child in self.children]
        return data


@dataclass(frozen=True)
class Company:
    """An organization with a hierarchical role tree."""
    name: str
    tree: JobLevel = field(compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'tree': self.tree.to_dict()}


@dataclass(frozen=True)
class AnswerVariant:
    """A selectable answer, flagged correct or not."""
    content: str
    is_answer: bool = field(default=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {'content': self.content, 'is_answer': self.is_answer}


@dataclass(frozen=True)
class Question:
    """A quiz item. Hash and equality both use ``uuid``."""
    uuid: str
    title: str = field(compare=False)
    variants: Tuple[AnswerVariant, ...] = field(default=(), compare=False)
    _variants_by_content: Dict[str, AnswerVariant] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self):
        index: Dict[str, AnswerVariant] = {}
        for variant in self.variants:
            index.setdefault(variant.content, variant)
        object.__setattr__(self, '_variants_by_content', index)

    def get_variant(self, content: str) -> Optional[AnswerVariant]:
        return self._variants_by_content.get(content)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'uuid': self.uuid,
            'title': self.title,
            'variants': [v.to_dict() for v in self.variants]
        }
