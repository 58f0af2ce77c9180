"""Schema Module - In-memory coefficient schema and its loader."""
from core.schema.models import (
    Vacancy, VacancyCoefficient, Skill, JobLevel, Company, AnswerVariant, Question
)
from core.schema.schema import CoefficientSchema
from core.schema.errors import (
    SchemaError, SchemaIOError, SchemaStructureError,
    SchemaLookupError, SkillNotFound, CompanyNotFound, QuestionNotFound
)
from core.schema.loader import load_schema, load_schema_file

__all__ = [
    'Vacancy', 'VacancyCoefficient', 'Skill', 'JobLevel', 'Company',
    'AnswerVariant', 'Question', 'CoefficientSchema',
    'SchemaError', 'SchemaIOError', 'SchemaStructureError',
    'SchemaLookupError', 'SkillNotFound',
    'CompanyNotFound', 'QuestionNotFound',
    'load_schema', 'load_schema_file'
]
