#!/usr/bin/env python3
"""
Schema Errors - Exception taxonomy for loading and querying the coefficient schema.

Two families:
- SchemaError: the schema could not be built (fatal at startup)
- SchemaLookupError: a requested skill/vacancy/company/question does not exist
"""

from typing import Optional


class SchemaError(Exception):
    """Base exception for coefficient schema load failures."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        super().__init__(f"{name}: {description}")


class SchemaIOError(SchemaError):
    """Raised when the schema file cannot be read or is not valid JSON."""

    def __init__(self, path: str, cause: Optional[Exception] = None):
        self.path = path
        self.cause = cause
        super().__init__("io_error", f"Could not read schema file {path}: {cause}")


class SchemaStructureError(SchemaError):
    """Raised when the document does not have the shape the model needs."""
    pass


class SchemaLookupError(LookupError):
    """Base exception for entities missing from a loaded schema."""

    kind = "entity"

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"{self.kind.capitalize()} not found in schema: {key!r}")


class SkillNotFound(SchemaLookupError):
    kind = "skill"


class CompanyNotFound(SchemaLookupError):
    kind = "company"


class QuestionNotFound(SchemaLookupError):
    kind = "question"
