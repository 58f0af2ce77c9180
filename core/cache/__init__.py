"""Cache Module - In-memory results slot."""
from core.cache.results_cache import (
    ResultsCache,
    SavedResults,
    UserSaveResult,
    AnswerResult
)

__all__ = [
    'ResultsCache',
    'SavedResults',
    'UserSaveResult',
    'AnswerResult'
]
