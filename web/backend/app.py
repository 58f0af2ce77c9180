#!/usr/bin/env python3
"""
Coefficient Schema API - FastAPI Application

Serves the schema reads and scoring operations to the frontend.

Usage:
    python main.py serve

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException

from core.app_context import AppContext
from core.config_loader import load_config
from core.schema import SchemaLookupError
from core.scorer import ScoringError
from .exceptions import (
    ServiceException,
    service_exception_handler,
    lookup_exception_handler,
    scoring_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    schema_router,
    scoring_router,
    results_router
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    # Schema load errors propagate here and abort startup
    if getattr(app.state, "context", None) is None:
        config = load_config()
        app.state.context = AppContext.build(config)
        logger.info(f"Loaded schema: {app.state.context.schema.summary()}")
    yield


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        context: Pre-built application context. When omitted, the context
            is built from configuration at startup.
    """
    app = FastAPI(
        title="Coefficient Schema API",
        description="Vacancy recommendations, placement and quiz scoring",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=_lifespan
    )
    app.state.context = context

    # Register exception handlers
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(SchemaLookupError, lookup_exception_handler)
    app.add_exception_handler(ScoringError, scoring_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    app.include_router(schema_router)
    app.include_router(scoring_router)
    app.include_router(results_router)

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "coefficient-schema-api"}

    return app


app = create_app()


def main(context: Optional[AppContext] = None):
    """Run the web server."""
    import uvicorn

    context = context or AppContext.build(load_config())
    web = context.config.web

    logger.info(f"Starting API server on {web.host}:{web.port}")
    logger.info(f"API Docs: http://{web.host}:{web.port}/docs")

    uvicorn.run(
        create_app(context),
        host=web.host,
        port=web.port,
        log_level=context.config.logging.level.lower()
    )


if __name__ == "__main__":
    main()
