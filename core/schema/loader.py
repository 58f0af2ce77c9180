#!/usr/bin/env python3
"""
Schema Loader - Build a CoefficientSchema from a parsed JSON document.

Parsing order: vacancies -> skills (resolved against vacancies) ->
companies -> questions. Any structural mismatch aborts the load with a
SchemaStructureError; a partially built schema is never returned.

Company trees and questions are validated with pydantic document models,
then converted into the frozen schema models.
"""

import json
import logging
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Union

from pydantic import BaseModel, Field, StrictBool, TypeAdapter, ValidationError, field_validator

from core.schema.errors import SchemaIOError, SchemaStructureError
from core.schema.models import (
    Vacancy, VacancyCoefficient, Skill, JobLevel, Company, AnswerVariant, Question
)
from core.schema.schema import CoefficientSchema

logger = logging.getLogger(__name__)


def _new_question_uuid() -> str:
    return str(uuid.uuid4())


class JobLevelDocument(BaseModel):
    """A JobLevel node as it appears in the document."""
    label: Dict[str, str]
    children: Optional[List['JobLevelDocument']] = None

    @field_validator('label')
    @classmethod
    def label_has_single_entry(cls, value: Dict[str, str]) -> Dict[str, str]:
        if len(value) != 1:
            raise ValueError(
                f"label must map exactly one role name to a vacancy, got {len(value)} entries"
            )
        return value

    def to_model(self) -> JobLevel:
        (role_name, vacancy_name), = self.label.items()
        return JobLevel(
            role_name=role_name,
            vacancy_name=vacancy_name,
            children=tuple(child.to_model() for child in self.children or [])
        )


JobLevelDocument.model_rebuild()


class AnswerVariantDocument(BaseModel):
    content: str
    is_answer: StrictBool


class QuestionDocument(BaseModel):
    uuid: str = Field(default_factory=_new_question_uuid)
    title: str
    variants: List[AnswerVariantDocument]

    def to_model(self) -> Question:
        return Question(
            uuid=self.uuid,
            title=self.title,
            variants=tuple(
                AnswerVariant(content=v.content, is_answer=v.is_answer)
                for v in _unique_by_content(self.variants)
            )
        )


_QUESTIONS_ADAPTER = TypeAdapter(List[QuestionDocument])


def _unique_by_content(variants: List[AnswerVariantDocument]) -> List[AnswerVariantDocument]:
    seen: Set[str] = set()
    unique = []
    for variant in variants:
        if variant.content in seen:
            logger.warning(f"Duplicate answer variant {variant.content!r} ignored")
            continue
        seen.add(variant.content)
        unique.append(variant)
    return unique


def parse_vacancies(value: Any) -> Set[Vacancy]:
    if not isinstance(value, list):
        raise SchemaStructureError(
            "vacancies_not_array",
            "Config does not contain an array in field 'vacancies'"
        )

    vacancies = set()
    for item in value:
        if not isinstance(item, str):
            raise SchemaStructureError(
                "vacancy_not_string",
                f"Vacancy entries must be strings, got {item!r}"
            )
        vacancies.add(Vacancy(item))
    return vacancies


def parse_skills(value: Any, vacancies: Set[Vacancy]) -> Set[Skill]:
    """Parse skills, resolving every coefficient against the vacancy set."""
    if not isinstance(value, dict):
        raise SchemaStructureError(
            "skills_not_object",
            "Config does not contain an object in field 'skills'"
        )

    vacancy_names = {v.name for v in vacancies}
    skills = set()

    for skill_name, coefficients in value.items():
        if not isinstance(coefficients, dict):
            raise SchemaStructureError(
                "skill_not_object",
                f"Skill {skill_name!r} must map vacancy names to coefficients"
            )

        vacancies_coefficient = []
        for vacancy_name, coefficient in coefficients.items():
            if vacancy_name not in vacancy_names:
                raise SchemaStructureError(
                    "vacancy_not_found",
                    f"Skill {skill_name!r} references unknown vacancy {vacancy_name!r}"
                )
            # bool is an int subclass in Python, JSON true/false is not a coefficient
            if isinstance(coefficient, bool) or not isinstance(coefficient, int):
                raise SchemaStructureError(
                    "coefficient_not_integer",
                    f"Coefficient of skill {skill_name!r} for {vacancy_name!r} "
                    f"must be an integer, got {coefficient!r}"
                )
            vacancies_coefficient.append(VacancyCoefficient(vacancy_name, coefficient))

        skills.add(Skill(name=skill_name, vacancies_coefficient=tuple(vacancies_coefficient)))

    return skills


def parse_companies(value: Any) -> Set[Company]:
    if not isinstance(value, dict):
        raise SchemaStructureError(
            "companies_not_object",
            "Config does not contain an object in field 'jobs.companies'"
        )

    companies = set()
    for company_name, tree in value.items():
        try:
            document = JobLevelDocument.model_validate(tree)
        except ValidationError as e:
            raise SchemaStructureError(
                "invalid_company_tree",
                f"Company {company_name!r} could not be parsed into a role tree: {e}"
            ) from e
        companies.add(Company(name=company_name, tree=document.to_model()))

    return companies


def parse_questions(value: Any) -> Set[Question]:
    try:
        documents = _QUESTIONS_ADAPTER.validate_python(value)
    except ValidationError as e:
        raise SchemaStructureError(
            "invalid_questions",
            f"Questions could not be parsed: {e}"
        ) from e

    questions = {}
    for document in documents:
        if document.uuid in questions:
            raise SchemaStructureError(
                "duplicate_question_uuid",
                f"Question uuid {document.uuid!r} is used more than once"
            )
        questions[document.uuid] = document.to_model()

    return set(questions.values())


def load_schema(document: Any) -> CoefficientSchema:
    """
    Build a CoefficientSchema from a parsed JSON document.

    Args:
        document: Parsed JSON (dict) with vacancies, skills, jobs.companies
            and questions.

    Returns:
        Fully built, immutable CoefficientSchema.

    Raises:
        SchemaStructureError: If any section does not match the expected shape
            or a skill references an unknown vacancy.
    """
    if not isinstance(document, dict):
        raise SchemaStructureError("document_not_object", "Config root must be a JSON object")

    vacancies = parse_vacancies(document.get('vacancies'))
    logger.info(f"Parsed {len(vacancies)} vacancies")

    skills = parse_skills(document.get('skills'), vacancies)
    logger.info(f"Parsed {len(skills)} skills")

    jobs = document.get('jobs')
    if jobs is None:
        companies_value: Any = {}
    elif isinstance(jobs, dict):
        companies_value = jobs.get('companies', {})
    else:
        raise SchemaStructureError("jobs_not_object", "Config field 'jobs' must be an object")
    companies = parse_companies(companies_value)
    logger.info(f"Parsed {len(companies)} companies")

    questions = parse_questions(document.get('questions', []))
    logger.info(f"Parsed {len(questions)} questions")

    return CoefficientSchema(
        vacancies=vacancies,
        skills=skills,
        companies=companies,
        questions=questions
    )


def load_schema_file(path: Union[str, Path]) -> CoefficientSchema:
    """Read and parse a schema JSON file, then build the schema from it."""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            document = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SchemaIOError(str(path), e) from e

    logger.debug(f"Loaded schema document from {path}")
    schema = load_schema(document)
    logger.info(f"Schema loaded from {path}: {schema.summary()}")
    return schema
