"""Business logic services."""

from .results_service import ResultsService
