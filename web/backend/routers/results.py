#!/usr/bin/env python3
"""
Results endpoints - save and read the most recent submission.
"""

import logging
from fastapi import APIRouter, Depends

from core.cache import ResultsCache
from ..dependencies import get_results_cache
from ..services.results_service import ResultsService
from ..models.requests import SaveResultsRequest
from ..models.responses import SavedResultsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/results", tags=["results"])


@router.post("", response_model=SavedResultsResponse)
def save_results(
    request: SaveResultsRequest,
    cache: ResultsCache = Depends(get_results_cache)
):
    """Save a candidate's results, replacing whatever was saved before."""
    return ResultsService(cache).save(request)


@router.get("", response_model=SavedResultsResponse)
def get_saved_results(cache: ResultsCache = Depends(get_results_cache)):
    """Get the most recently saved results (404 if nothing was saved)."""
    return ResultsService(cache).get_saved()
