#!/usr/bin/env python3
"""
Unit tests for the HTTP command surface.
"""

import unittest

import pytest
from fastapi.testclient import TestClient

from core.app_context import AppContext
from core.config_loader import AppConfig
from core.schema import load_schema
from web.backend.app import create_app
from web.backend.models.requests import PlacementRequestBody
from tests.fixtures.schema_fixtures import valid_schema, QUESTION_ROLE_UUID, QUESTION_LEAD_UUID

pytestmark = pytest.mark.api


class ApiTestCase(unittest.TestCase):

    def setUp(self):
        self.context = AppContext.from_schema(AppConfig(), load_schema(valid_schema()))
        self.app = create_app(self.context)
        self.client = TestClient(self.app, raise_server_exceptions=False)


class TestSchemaEndpoints(ApiTestCase):

    def test_health(self):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_get_vacancies(self):
        response = self.client.get("/api/vacancies")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), ["Analytic", "Manager", "Programmer", "QA_Engineer", "Team_Lead"])

    def test_get_skills(self):
        response = self.client.get("/api/skills")

        self.assertEqual(response.status_code, 200)
        skills = {s["name"]: s for s in response.json()}
        self.assertEqual(
            skills["Leadership"]["vacancies_coefficient"],
            [{"vacancy": "Team_Lead", "coefficient": 3}, {"vacancy": "Manager", "coefficient": 2}]
        )

    def test_get_companies(self):
        response = self.client.get("/api/companies")

        self.assertEqual(response.json(), ["Consulting", "Solo"])

    def test_get_current_company(self):
        response = self.client.get("/api/companies/Consulting")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["name"], "Consulting")
        self.assertEqual(data["tree"]["label"], "Managing partner")
        self.assertEqual([c["label"] for c in data["tree"]["children"]], ["Business analyst", "Lead programmer"])

    def test_get_current_company_missing(self):
        response = self.client.get("/api/companies/Nowhere")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "CompanyNotFound")
        self.assertFalse(response.json()["success"])

    def test_get_questions(self):
        response = self.client.get("/api/questions")

        self.assertEqual(response.status_code, 200)
        self.assertEqual({q["uuid"] for q in response.json()}, {QUESTION_ROLE_UUID, QUESTION_LEAD_UUID})

    def test_get_question_by_uuid(self):
        response = self.client.get(f"/api/questions/{QUESTION_ROLE_UUID}")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["title"], "Who tests releases?")

    def test_get_question_missing(self):
        response = self.client.get("/api/questions/missing")

        self.assertEqual(response.status_code, 404)


class TestScoringEndpoints(ApiTestCase):

    def test_recommendations(self):
        response = self.client.post("/api/recommendations", json={
            "name": "Oleg", "skills": ["Leadership", "Punctuality"]
        })

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["name"], "Oleg")
        self.assertEqual(data["vacancies"], {"Manager": 3, "Team_Lead": 3})
        self.assertIsNone(data["ranking"])

    def test_recommendations_ranked(self):
        response = self.client.post("/api/recommendations?ranked=true", json={
            "name": "Oleg", "skills": ["Attentiveness"]
        })

        self.assertEqual(response.json()["ranking"], [
            {"vacancy": "QA_Engineer", "score": 3},
            {"vacancy": "Analytic", "score": 2}
        ])

    def test_recommendations_unknown_skill(self):
        response = self.client.post("/api/recommendations", json={
            "name": "Oleg", "skills": ["Telepathy"]
        })

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "SkillNotFound")

    def test_check_placement(self):
        response = self.client.post("/api/placements/check", json={
            "company_name": "Solo",
            "placements": {
                "roleX": {"name": "jrwj", "qualities": ["Calmness"], "id": 4, "vacancies": ["Programmer"]}
            }
        })

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["score"], 0.25)

    def test_placement_display_fields_not_carried_into_domain(self):
        body = PlacementRequestBody.model_validate({
            "company_name": "Solo",
            "placements": {"roleX": {"name": "jrwj", "id": 4, "vacancies": ["Programmer"]}}
        })

        submission = body.to_domain().placements["roleX"]
        self.assertEqual(vars(submission), {"vacancies": ["Programmer"]})

    def test_check_placement_null_role(self):
        response = self.client.post("/api/placements/check", json={
            "company_name": "Consulting",
            "placements": {"Tester": None}
        })

        self.assertEqual(response.json()["score"], 0.0)

    def test_check_placement_unknown_company(self):
        response = self.client.post("/api/placements/check", json={
            "company_name": "Nowhere", "placements": {}
        })

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["score"], 0.0)

    def test_check_placement_requires_vacancies(self):
        response = self.client.post("/api/placements/check", json={
            "company_name": "Solo", "placements": {"roleX": {"name": "jrwj"}}
        })

        self.assertEqual(response.status_code, 422)

    def test_check_answers(self):
        response = self.client.post("/api/questions/answers", json=[
            {"question_uuid": QUESTION_ROLE_UUID, "answers": ["QA engineer"]},
            {"question_uuid": QUESTION_LEAD_UUID, "answers": ["Shyness"]}
        ])

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["score"], 0.5)

    def test_check_answers_empty(self):
        response = self.client.post("/api/questions/answers", json=[])

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["type"], "EmptySubmissionError")


class TestResultsEndpoints(ApiTestCase):

    def test_get_before_save(self):
        response = self.client.get("/api/results")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "ResultsNotSavedException")

    def test_save_then_get(self):
        payload = {
            "name": "Oleg",
            "test_results": [{"question_uuid": QUESTION_ROLE_UUID, "answer_result": True}],
            "vacancy_results": 0.2
        }

        saved = self.client.post("/api/results", json=payload)
        fetched = self.client.get("/api/results")

        self.assertEqual(saved.status_code, 200)
        self.assertEqual(fetched.status_code, 200)
        self.assertEqual(fetched.json()["results"], [payload])
        self.assertEqual(self.context.results_cache.get().results[0].name, "Oleg")

    def test_save_replaces_previous(self):
        self.client.post("/api/results", json={"name": "First"})
        self.client.post("/api/results", json={"name": "Second", "vacancy_results": 0.1})

        results = self.client.get("/api/results").json()["results"]

        self.assertEqual(len(results), 1)
        self.assertEqual(results[0]["name"], "Second")
        self.assertIsNone(results[0]["test_results"])


if __name__ == '__main__':
    unittest.main()
