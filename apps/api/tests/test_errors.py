"""Tests for collapsing validation errors into the error body."""

from apps.api.core.errors import ErrorResponse, field_errors


def test_field_errors_use_field_name():
    errors = [
        {"loc": ("body", "customerName"), "msg": "must not be blank", "type": "blank"},
        {"loc": ("query", "location"), "msg": "Field required", "type": "missing"},
    ]

    assert field_errors(errors) == {
        "customerName": "must not be blank",
        "location": "Field required",
    }


def test_field_errors_keep_first_message_per_field():
    errors = [
        {"loc": ("body", "overallRating"), "msg": "first", "type": "x"},
        {"loc": ("body", "overallRating"), "msg": "second", "type": "y"},
    ]

    assert field_errors(errors) == {"overallRating": "first"}


def test_field_errors_without_field_fall_back_to_location():
    errors = [
        {"loc": ("body", 7), "msg": "JSON decode error", "type": "json_invalid"},
        {"loc": ("path",), "msg": "Field required", "type": "missing"},
    ]

    assert field_errors(errors) == {"body": "JSON decode error", "path": "Field required"}


def test_field_errors_nested_location():
    errors = [{"loc": ("body", "items", 0, "name"), "msg": "bad", "type": "x"}]

    assert field_errors(errors) == {"items.0.name": "bad"}


def test_error_response_defaults_errors_to_none():
    body = ErrorResponse(status=500, message="boom")

    assert body.model_dump() == {"status": 500, "message": "boom", "errors": None}
