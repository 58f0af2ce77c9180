#!/usr/bin/env python3
"""
Scoring Models - Request and result structures for the scoring engines.
"""

from typing import List, Dict, Optional, Tuple
from dataclasses import dataclass, field


class ScoringError(Exception):
    """Base exception for scoring input that cannot produce a defined score."""
    pass


class EmptySubmissionError(ScoringError):
    """Raised when a quiz is scored with no submissions at all."""

    def __init__(self, message: str = "Cannot score a quiz with no submitted answers"):
        super().__init__(message)


@dataclass
class WorkerRequest:
    """A candidate's name and the skills they claim."""
    name: str
    skills: List[str] = field(default_factory=list)


@dataclass
class WorkerResponse:
    """Per-vacancy recommendation totals for one candidate.

    ``vacancies`` is ordered by vacancy name. ``ranking`` is only filled
    when the caller explicitly asked for a score-ordered view.
    """
    name: str
    vacancies: Dict[str, int] = field(default_factory=dict)
    ranking: Optional[List[Tuple[str, int]]] = None


@dataclass
class PlacementSubmission:
    """A candidate's self-ranked vacancy preferences for one company role."""
    vacancies: List[str] = field(default_factory=list)


@dataclass
class PlacementRequest:
    """Placement submissions keyed by the company's role names."""
    company_name: str
    placements: Dict[str, Optional[PlacementSubmission]] = field(default_factory=dict)


@dataclass
class QuestionAnswer:
    """Answer contents a candidate selected for one question."""
    question_uuid: str
    answers: List[str] = field(default_factory=list)
