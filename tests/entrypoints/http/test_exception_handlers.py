"""Tests for FastAPI exception handlers."""

import pytest
from fastapi import FastAPI, Query
from fastapi.testclient import TestClient
from pydantic import BaseModel

from la_motors.domain.errors import (
    DomainError,
    InternalError,
    NotFoundError,
    PersistenceError,
    TransientReadFailure,
    UnauthorizedError,
    ValidationError,
)
from la_motors.entrypoints.http.exception_handlers import register_exception_handlers


class _UnmappedError(DomainError):
    error_code = "SOMETHING_ELSE"


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("Update must include at least one field")

    @test_app.get("/validation-error-with-fields")
    def raise_validation_error_with_fields() -> None:
        raise ValidationError(
            errors=[
                {"field": "make", "message": "Must not be empty", "code": "REQUIRED"},
                {"field": "price", "message": "Must be greater than 0", "code": "OUT_OF_RANGE"},
            ]
        )

    @test_app.get("/not-found-error")
    def raise_not_found_error() -> None:
        raise NotFoundError("Vehicle", "123")

    @test_app.get("/unauthorized-error")
    def raise_unauthorized_error() -> None:
        raise UnauthorizedError("Admin password required")

    @test_app.get("/persistence-error")
    def raise_persistence_error() -> None:
        raise PersistenceError("create vehicle", 'violates check constraint "price_positive"')

    @test_app.get("/transient-read-failure")
    def raise_transient_read_failure() -> None:
        raise TransientReadFailure("list vehicles", "connection refused")

    @test_app.get("/internal-error")
    def raise_internal_error() -> None:
        raise InternalError("Could not resolve a public URL for the image")

    @test_app.get("/unmapped-error")
    def raise_unmapped_error() -> None:
        raise _UnmappedError("Odd")

    @test_app.get("/value-error")
    def raise_value_error() -> None:
        raise ValueError("invalid literal for int()")

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> None:
        raise RuntimeError("Something went wrong")

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


class TestDomainErrorMapping:
    """Domain error codes map to HTTP status codes."""

    @pytest.mark.parametrize(
        ("path", "status_code", "body"),
        [
            (
                "/validation-error",
                422,
                {"detail": "Update must include at least one field", "code": "VALIDATION_ERROR"},
            ),
            (
                "/not-found-error",
                404,
                {"detail": "Vehicle with identifier '123' not found", "code": "NOT_FOUND"},
            ),
            (
                "/unauthorized-error",
                401,
                {"detail": "Admin password required", "code": "UNAUTHORIZED"},
            ),
            (
                "/persistence-error",
                502,
                {
                    "detail": 'Failed to create vehicle: violates check constraint "price_positive"',
                    "code": "PERSISTENCE_ERROR",
                },
            ),
            (
                "/transient-read-failure",
                503,
                {
                    "detail": "Failed to list vehicles: connection refused",
                    "code": "TRANSIENT_READ_FAILURE",
                },
            ),
            (
                "/internal-error",
                500,
                {
                    "detail": "Could not resolve a public URL for the image",
                    "code": "INTERNAL_ERROR",
                },
            ),
            ("/unmapped-error", 400, {"detail": "Odd", "code": "SOMETHING_ELSE"}),
        ],
    )
    def test_status_and_body(
        self, client: TestClient, path: str, status_code: int, body: dict
    ) -> None:
        response = client.get(path)

        assert response.status_code == status_code
        assert response.json() == body

    def test_validation_error_with_field_errors(self, client: TestClient) -> None:
        """ValidationError with field errors returns the errors array."""
        response = client.get("/validation-error-with-fields")

        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == "Validation failed"
        assert [e["field"] for e in data["errors"]] == ["make", "price"]
        assert data["errors"][1]["code"] == "OUT_OF_RANGE"


class TestValueErrorHandler:
    """Tests for ValueError exception handler."""

    def test_value_error_returns_422(self, client: TestClient) -> None:
        response = client.get("/value-error")

        assert response.status_code == 422
        assert response.json() == {"detail": "invalid literal for int()", "code": "INVALID_VALUE"}


class TestUnexpectedErrorHandler:
    """Tests for unexpected exception handler."""

    def test_unexpected_error_returns_500(self, client: TestClient) -> None:
        """Unexpected errors return 500 with generic message."""
        response = client.get("/unexpected-error")

        assert response.status_code == 500
        # Note: TestClient may return empty response for 500 errors
        # Just verify status code is correct


class TestPydanticValidationErrors:
    """Tests for Pydantic/FastAPI validation error handling."""

    def test_query_validation_error_strips_location_prefix(self) -> None:
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/test")
        def test_route(year: int = Query(default=2020)) -> dict:
            return {"year": year}

        response = TestClient(app, raise_server_exceptions=False).get("/test?year=abc")

        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == "Invalid request parameters"
        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"][0]["field"] == "year"

    def test_body_missing_required_field(self) -> None:
        app = FastAPI()
        register_exception_handlers(app)

        class RequestBody(BaseModel):
            make: str

        @app.post("/test")
        def test_route(body: RequestBody) -> dict:
            return {"make": body.make}

        response = TestClient(app, raise_server_exceptions=False).post("/test", json={})

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "make"
