"""Unit tests for structured validation results and error types."""

import pytest

from src.press.core.exceptions import (
    AppException,
    InvalidProjectError,
    NotFoundError,
    ProjectNotFoundError,
)
from src.press.core.validation import ErrorCode, ValidationResult

pytestmark = pytest.mark.unit


def test_empty_result_is_valid():
    assert ValidationResult().is_valid


def test_errors_kept_in_order():
    result = ValidationResult()
    result.add("vcs_url", ErrorCode.REQUIRED, "A VCS URL is required.")
    result.add("producer_name", ErrorCode.REQUIRED, "A producer name is required.")

    assert not result.is_valid
    assert [e.field for e in result.errors] == ["vcs_url", "producer_name"]
    assert result.to_list()[0] == {
        "field": "vcs_url",
        "code": "required",
        "message": "A VCS URL is required.",
    }


def test_has_error_by_code():
    result = ValidationResult()
    result.add("vcs_url", ErrorCode.INVALID_FORMAT, "Invalid VCS URL.")

    assert result.has_error("vcs_url")
    assert result.has_error("vcs_url", ErrorCode.INVALID_FORMAT)
    assert not result.has_error("vcs_url", ErrorCode.REQUIRED)
    assert not result.has_error("producer_name")


def test_aggregate_error_exposes_every_field_error():
    result = ValidationResult()
    result.add("vcs_url", ErrorCode.REQUIRED, "A VCS URL is required.")
    result.add("producer_name", ErrorCode.REQUIRED, "A producer name is required.")

    error = InvalidProjectError(result)

    assert error.errors == result.errors
    assert error.message == "Project is invalid"


def test_not_found_hierarchy():
    assert issubclass(ProjectNotFoundError, NotFoundError)
    assert ProjectNotFoundError().message == "Project not found"


def test_app_exception_message():
    assert AppException("GitHub down").message == "GitHub down"
