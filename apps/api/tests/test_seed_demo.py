"""Tests for demo data seeding."""

from apps.api.models import Customer, SurveyResponse
from apps.api.scripts.seed_demo import DEMO_SURVEYS, seed_demo_surveys


def test_seed_inserts_demo_surveys(test_db):
    inserted = seed_demo_surveys(test_db)
    test_db.commit()

    assert inserted == len(DEMO_SURVEYS)
    assert test_db.query(Customer).count() == len(DEMO_SURVEYS)
    assert test_db.query(SurveyResponse).count() == len(DEMO_SURVEYS)


def test_seed_is_idempotent(test_db):
    seed_demo_surveys(test_db)
    test_db.commit()

    assert seed_demo_surveys(test_db) == 0
    assert test_db.query(Customer).count() == len(DEMO_SURVEYS)


def test_seeded_data_is_listed(client, test_db):
    seed_demo_surveys(test_db)
    test_db.commit()

    responses = client.get("/api/survey/responses").json()
    summary = client.get("/api/survey/summary", params={"location": "Downtown"}).json()

    assert len(responses) == len(DEMO_SURVEYS)
    assert summary["totalResponses"] == 2
