#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

The AppContext is attached to ``app.state.context`` when the application
is created (or at startup), and every route reaches its services through
these providers instead of module-level globals.
"""

from fastapi import Request

from core.app_context import AppContext
from core.cache import ResultsCache
from core.scorer import ScoringService


def get_app_context(request: Request) -> AppContext:
    """
    FastAPI dependency that returns the application context.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(context: AppContext = Depends(get_app_context)):
            ...
    """
    return request.app.state.context


def get_scoring_service(request: Request) -> ScoringService:
    return get_app_context(request).scoring_service


def get_results_cache(request: Request) -> ResultsCache:
    return get_app_context(request).results_cache
