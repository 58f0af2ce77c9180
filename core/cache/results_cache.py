"""Results Cache - In-memory slot holding the most recently saved results."""
import logging
import threading
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

logger = logging.getLogger(__name__)


@dataclass
class AnswerResult:
    """Whether a candidate answered one question correctly."""
    question_uuid: str
    answer_result: bool


@dataclass
class UserSaveResult:
    """One candidate's saved quiz and placement outcome."""
    name: str
    test_results: Optional[List[AnswerResult]] = None
    vacancy_results: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "test_results": (
                [{"question_uuid": r.question_uuid, "answer_result": r.answer_result}
                 for r in self.test_results]
                if self.test_results is not None else None
            ),
            "vacancy_results": self.vacancy_results
        }


@dataclass
class SavedResults:
    """Contents of the results slot."""
    results: List[UserSaveResult] = field(default_factory=list)


class ResultsCache:
    """
    Single-slot cache for the most recent submission.

    Starts empty. Each save replaces the slot. The lock is held only for
    the duration of one read or write.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._saved: Optional[SavedResults] = None

    @property
    def is_empty(self) -> bool:
        with self._lock:
            return self._saved is None

    def save(
        self,
        name: str,
        test_results: Optional[List[AnswerResult]] = None,
        vacancy_results: Optional[float] = None
    ) -> SavedResults:
        """Replace the slot with a single candidate's results."""
        saved = SavedResults(results=[UserSaveResult(
            name=name,
            test_results=list(test_results) if test_results is not None else None,
            vacancy_results=vacancy_results
        )])

        with self._lock:
            self._saved = saved

        logger.info(f"Saved results for {name!r}")
        logger.debug(f"Test results: {test_results}, vacancy results: {vacancy_results}")
        return saved

    def get(self) -> Optional[SavedResults]:
        """Return the last saved results, or None if nothing was saved."""
        with self._lock:
            return self._saved

    def clear(self) -> None:
        with self._lock:
            self._saved = None
        logger.info("Results cache cleared")
