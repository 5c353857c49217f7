import logging
from unittest.mock import Mock

from rest_framework import exceptions, status

from apps.catalog.domain.exceptions import DuplicateCode, NotFound
from apps.exchange.domain.exceptions import RateUnavailable
from core.exceptions import PROBLEM_CONTENT_TYPE, problem_details_handler


def context(path="/api/v1/catalog/products/"):
    return {"request": Mock(path=path)}


class TestProblemDetailsHandler:
    """Tests for the DRF exception handler."""

    def test_duplicate_code(self):
        response = problem_details_handler(DuplicateCode("ABC1234567"), context())

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.content_type == PROBLEM_CONTENT_TYPE
        assert response.data["type"] == "about:blank"
        assert response.data["title"] == "Product Service Error"
        assert response.data["status"] == 409
        assert response.data["instance"] == "/api/v1/catalog/products/"
        assert "timestamp" in response.data

    def test_not_found(self):
        response = problem_details_handler(NotFound(7), context("/api/v1/catalog/products/7/"))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["detail"] == "Product with ID: 7 not found."

    def test_rate_unavailable(self):
        response = problem_details_handler(RateUnavailable("USD"), context())

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE

    def test_validation_error(self):
        exc = exceptions.ValidationError({"code": ["Product code must be exact 10 characters long"]})

        response = problem_details_handler(exc, context())

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["errors"] == {"code": "Product code must be exact 10 characters long"}

    def test_non_field_validation_error(self):
        response = problem_details_handler(exceptions.ValidationError("bad input"), context())

        assert response.data["errors"] == {"non_field_errors": "bad input"}

    def test_other_api_exception(self):
        response = problem_details_handler(exceptions.NotAuthenticated(), context())

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data["title"] == "Unauthorized"

    def test_unexpected_error(self, caplog):
        with caplog.at_level(logging.ERROR, logger="core.exceptions"):
            response = problem_details_handler(RuntimeError("boom"), context())

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data["detail"] == "An unexpected error occurred. Please try again later."
        assert "boom" not in response.data["detail"]
        assert "timestamp" not in response.data
        assert any(r.exc_info for r in caplog.records)
