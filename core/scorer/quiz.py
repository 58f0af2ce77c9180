#!/usr/bin/env python3
"""
Quiz Scoring - Fraction of submitted questions answered correctly.
"""

from typing import Sequence
import logging

from core.schema import CoefficientSchema, Question
from core.scorer.models import QuestionAnswer, EmptySubmissionError

logger = logging.getLogger(__name__)


def is_answer_correct(question: Question, answers: Sequence[str]) -> bool:
    """
    Check that every selected content is a correct variant of the question.

    Selecting only some of the correct variants still counts as correct;
    the check is per selected answer, not against the full answer key.
    """
    for content in answers:
        variant = question.get_variant(content)
        if variant is None or not variant.is_answer:
            return False
    return True


def score_quiz(
    schema: CoefficientSchema,
    submissions: Sequence[QuestionAnswer]
) -> float:
    """
    Calculate the correctness ratio of a quiz submission.

    Answers to unknown questions count toward the total but never as
    correct.

    Returns:
        Score in [0.0, 1.0]

    Raises:
        EmptySubmissionError: If ``submissions`` is empty
    """
    total = len(submissions)
    if total == 0:
        raise EmptySubmissionError()

    correct_count = 0
    for submission in submissions:
        question = schema.find_question(submission.question_uuid)
        if question is None:
            logger.warning(f"Answer for unknown question {submission.question_uuid!r} skipped")
            continue

        result = is_answer_correct(question, submission.answers)
        logger.debug(f"Question {question.uuid!r} answered correctly: {result}")
        if result:
            correct_count += 1

    return correct_count / total
