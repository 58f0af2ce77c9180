#!/usr/bin/env python3
"""
Test suite for quiz scoring.
"""

import pytest

from core.schema import load_schema
from core.scorer.models import QuestionAnswer, EmptySubmissionError
from core.scorer.quiz import score_quiz, is_answer_correct
from tests.fixtures.schema_fixtures import valid_schema, QUESTION_ROLE_UUID, QUESTION_LEAD_UUID


@pytest.fixture
def schema():
    return load_schema(valid_schema())


class TestScoreQuiz:

    def test_all_correct(self, schema):
        answers = [
            QuestionAnswer(QUESTION_ROLE_UUID, ["QA engineer"]),
            QuestionAnswer(QUESTION_LEAD_UUID, ["Leadership", "Responsibility"]),
        ]

        assert score_quiz(schema, answers) == 1.0

    def test_one_incorrect_content_fails_question(self, schema):
        answers = [
            QuestionAnswer(QUESTION_ROLE_UUID, ["QA engineer"]),
            QuestionAnswer(QUESTION_LEAD_UUID, ["Leadership", "Shyness"]),
        ]

        assert score_quiz(schema, answers) == 0.5

    def test_unregistered_content_fails_question(self, schema):
        answers = [QuestionAnswer(QUESTION_ROLE_UUID, ["QA engineer", "Astronaut"])]

        assert score_quiz(schema, answers) == 0.0

    def test_subset_of_correct_answers_counts_as_correct(self, schema):
        answers = [QuestionAnswer(QUESTION_LEAD_UUID, ["Leadership"])]

        assert score_quiz(schema, answers) == 1.0

    def test_unknown_question_counted_in_total(self, schema):
        answers = [
            QuestionAnswer(QUESTION_ROLE_UUID, ["QA engineer"]),
            QuestionAnswer("no-such-question", ["QA engineer"]),
        ]

        assert score_quiz(schema, answers) == 0.5

    def test_empty_submission_raises(self, schema):
        with pytest.raises(EmptySubmissionError):
            score_quiz(schema, [])


class TestIsAnswerCorrect:

    def test_empty_selection_is_vacuously_correct(self, schema):
        question = schema.get_question_by_uuid(QUESTION_ROLE_UUID)

        assert is_answer_correct(question, []) is True

    def test_incorrect_variant(self, schema):
        question = schema.get_question_by_uuid(QUESTION_ROLE_UUID)

        assert is_answer_correct(question, ["HR manager"]) is False
