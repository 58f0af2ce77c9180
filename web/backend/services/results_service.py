#!/usr/bin/env python3
"""
Results service - business logic for the saved results slot.
"""

import logging

from core.cache import ResultsCache, SavedResults
from ..models.requests import SaveResultsRequest
from ..models.responses import SavedResultsResponse, UserSaveResultModel
from ..exceptions import ResultsNotSavedException

logger = logging.getLogger(__name__)


class ResultsService:
    """Service for saving and reading the most recent submission."""

    def __init__(self, cache: ResultsCache):
        self.cache = cache

    def save(self, request: SaveResultsRequest) -> SavedResultsResponse:
        """
        Replace the saved results with this candidate's results.

        Args:
            request: Candidate name with optional quiz and placement results.

        Returns:
            The saved results.
        """
        test_results = None
        if request.test_results is not None:
            test_results = [r.to_domain() for r in request.test_results]

        saved = self.cache.save(
            name=request.name,
            test_results=test_results,
            vacancy_results=request.vacancy_results
        )
        return self._to_response(saved)

    def get_saved(self) -> SavedResultsResponse:
        """
        Get the most recently saved results.

        Raises:
            ResultsNotSavedException: If nothing has been saved yet.
        """
        saved = self.cache.get()
        if saved is None:
            raise ResultsNotSavedException("No results have been saved yet")
        return self._to_response(saved)

    def _to_response(self, saved: SavedResults) -> SavedResultsResponse:
        return SavedResultsResponse(
            success=True,
            results=[UserSaveResultModel(**entry.to_dict()) for entry in saved.results]
        )
