#!/usr/bin/env python3
"""
Test fixtures for coefficient schema documents.

VALID_SCHEMA covers every section; use ``valid_schema()`` to get a copy
that a test may mutate.
"""
import copy


QUESTION_ROLE_UUID = "q-role-0001"
QUESTION_LEAD_UUID = "q-lead-0002"


VALID_SCHEMA = {
    "vacancies": ["Analytic", "Manager", "Programmer", "QA_Engineer", "Team_Lead"],
    "skills": {
        "Attentiveness": {"QA_Engineer": 3, "Analytic": 2},
        "Leadership": {"Team_Lead": 3, "Manager": 2},
        "Diligence": {"Programmer": 2, "QA_Engineer": 1},
        "Punctuality": {"Manager": 1}
    },
    "jobs": {
        "companies": {
            "Consulting": {
                "label": {"Managing partner": "Manager"},
                "children": [
                    {"label": {"Business analyst": "Analytic"}},
                    {
                        "label": {"Lead programmer": "Team_Lead"},
                        "children": [
                            {"label": {"Programmer": "Programmer"}},
                            {"label": {"Tester": "QA_Engineer"}}
                        ]
                    }
                ]
            },
            "Solo": {
                "label": {"roleX": "Programmer"}
            }
        }
    },
    "questions": [
        {
            "uuid": QUESTION_ROLE_UUID,
            "title": "Who tests releases?",
            "variants": [
                {"content": "QA engineer", "is_answer": True},
                {"content": "HR manager", "is_answer": False}
            ]
        },
        {
            "uuid": QUESTION_LEAD_UUID,
            "title": "What does a team lead need?",
            "variants": [
                {"content": "Leadership", "is_answer": True},
                {"content": "Responsibility", "is_answer": True},
                {"content": "Shyness", "is_answer": False}
            ]
        }
    ]
}


def valid_schema() -> dict:
    """Return a deep copy of VALID_SCHEMA."""
    return copy.deepcopy(VALID_SCHEMA)


def minimal_schema(skills=None, vacancies=None, companies=None, questions=None) -> dict:
    """Build a small document from the given sections."""
    return {
        "vacancies": vacancies if vacancies is not None else [],
        "skills": skills if skills is not None else {},
        "jobs": {"companies": companies if companies is not None else {}},
        "questions": questions if questions is not None else []
    }
