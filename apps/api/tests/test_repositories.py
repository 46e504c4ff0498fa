"""Tests for the CRUD repositories."""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError

from apps.api.models import Customer, SurveyResponse
from apps.api.repositories import CustomerRepository, SurveyResponseRepository


def make_customer(name="Jane Doe", location="Downtown"):
    return Customer(customer_name=name, location=location)


def make_survey(customer, rating="4.0"):
    return SurveyResponse(
        customer=customer,
        food_quality="Satisfied",
        service_speed="Satisfied",
        staff_friendliness="Neutral",
        cleanliness="Satisfied",
        value_for_money="Dissatisfied",
        ambiance="Highly Satisfied",
        overall_rating=Decimal(rating),
    )


class TestCustomerRepository:
    """Customer persistence."""

    def test_save_assigns_generated_columns(self, test_db):
        customer = CustomerRepository(test_db).save(make_customer())

        assert customer.id is not None
        assert customer.created_at is not None
        assert customer.visit_date == date.today()

    def test_find_all_in_id_order(self, test_db):
        repository = CustomerRepository(test_db)
        for name in ("Ann", "Bob", "Cy"):
            repository.save(make_customer(name=name))

        assert [c.customer_name for c in repository.find_all()] == ["Ann", "Bob", "Cy"]
        assert repository.count() == 3

    def test_find_by_id(self, test_db):
        repository = CustomerRepository(test_db)
        saved = repository.save(make_customer())

        assert repository.find_by_id(saved.id) is saved
        assert repository.find_by_id(saved.id + 100) is None


class TestSurveyResponseRepository:
    """Survey response persistence."""

    def test_save_links_customer(self, test_db):
        customer = CustomerRepository(test_db).save(make_customer())
        survey = SurveyResponseRepository(test_db).save(make_survey(customer))
        test_db.commit()

        assert survey.customer_id == customer.id
        assert survey.created_at is not None
        assert customer.survey_responses == [survey]
        assert survey.ratings()["ambiance"] == "Highly Satisfied"

    def test_response_requires_customer(self, test_db):
        survey = make_survey(None)

        with pytest.raises(IntegrityError):
            SurveyResponseRepository(test_db).save(survey)
        test_db.rollback()

    def test_find_all_by_location(self, test_db):
        customers = CustomerRepository(test_db)
        surveys = SurveyResponseRepository(test_db)
        for name, location in (("Ann", "Downtown"), ("Bob", "Uptown"), ("Cy", "DOWNTOWN")):
            surveys.save(make_survey(customers.save(make_customer(name, location))))
        test_db.commit()

        matched = surveys.find_all_by_location(" downtown ")

        assert [s.customer.customer_name for s in matched] == ["Ann", "Cy"]
        assert surveys.count() == 3
        assert len(surveys.find_all()) == 3

    def test_listings_share_ordering_and_loaded_customer(self, test_db):
        """Filtered and unfiltered listings return the same rows the same way."""
        customers = CustomerRepository(test_db)
        surveys = SurveyResponseRepository(test_db)
        for name in ("Ann", "Bob", "Cy"):
            surveys.save(make_survey(customers.save(make_customer(name, "Uptown"))))
        test_db.commit()
        test_db.expunge_all()

        filtered = surveys.find_all_by_location("Uptown")
        everything = surveys.find_all()

        assert [s.id for s in filtered] == [s.id for s in everything]
        assert [s.id for s in filtered] == sorted(s.id for s in filtered)
        for survey in filtered + everything:
            assert "customer" not in inspect(survey).unloaded
