#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.schema import SchemaLookupError
from core.scorer import ScoringError

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class ResultsNotSavedException(ServiceException):
    """Raised when saved results are requested before anything was saved."""
    pass


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    if isinstance(exc, ResultsNotSavedException):
        status_code = 404
        logger.info(f"No saved results for {request.url.path}")
    else:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)

    return _error_response(status_code, exc)


async def lookup_exception_handler(
    request: Request,
    exc: SchemaLookupError
) -> JSONResponse:
    """Map a missing skill, vacancy, company or question to 404."""
    logger.warning(f"Lookup failed in {request.url.path}: {exc}")
    return _error_response(404, exc)


async def scoring_exception_handler(
    request: Request,
    exc: ScoringError
) -> JSONResponse:
    """Map scoring input that cannot produce a defined score to 400."""
    logger.warning(f"Scoring rejected in {request.url.path}: {exc}")
    return _error_response(400, exc)


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.

    Args:
        request: The FastAPI request.
        exc: The HTTP exception.

    Returns:
        JSONResponse with error details.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Args:
        request: The FastAPI request.
        exc: The exception.

    Returns:
        JSONResponse with error details.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
