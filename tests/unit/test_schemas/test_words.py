"""Tests for reverse-word schemas and common models."""

import pytest
from pydantic import ValidationError

from core.models.common import ErrorResponse
from services.api.schemas import ReverseWordRequest, ReverseWordResponse


class TestReverseWordRequest:
    """Test cases for ReverseWordRequest."""

    def test_word_is_optional(self):
        """Test that an empty object is valid."""
        request = ReverseWordRequest.model_validate({})

        assert request.word is None

    def test_word_value(self):
        """Test a supplied word."""
        request = ReverseWordRequest.model_validate({"word": "hello"})

        assert request.word == "hello"

    def test_unknown_fields_ignored(self):
        """Test that extra keys do not fail validation."""
        request = ReverseWordRequest.model_validate({"word": "hi", "lang": "en"})

        assert request.word == "hi"

    @pytest.mark.parametrize("value", [5, 1.5, True, ["a"], {"a": 1}])
    def test_non_text_word_rejected(self, value):
        """Test that a non-string word is a validation error."""
        with pytest.raises(ValidationError):
            ReverseWordRequest.model_validate({"word": value})


class TestReverseWordResponse:
    """Test cases for ReverseWordResponse."""

    def test_serializes_reverse_word(self):
        """Test the JSON field name."""
        response = ReverseWordResponse(reverse_word="olleh")

        assert response.model_dump_json(exclude_none=True) == '{"reverse_word":"olleh"}'

    def test_unset_field_omitted(self):
        """Test that an unset reverse_word is left out of the body."""
        assert ReverseWordResponse().model_dump_json(exclude_none=True) == "{}"


class TestErrorResponse:
    """Test cases for ErrorResponse model."""

    def test_error_response_valid(self):
        """Test ErrorResponse with valid data."""
        error = ErrorResponse(
            error="malformed_body",
            message="Request body must be empty or a JSON object",
        )

        assert error.error == "malformed_body"
        assert error.detail is None
        assert error.timestamp is not None

    def test_error_response_missing_fields(self):
        """Test ErrorResponse with missing required fields."""
        with pytest.raises(ValidationError):
            ErrorResponse(error="malformed_body")
