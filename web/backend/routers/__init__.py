"""API route handlers."""

from .schema import router as schema_router
from .scoring import router as scoring_router
from .results import router as results_router
