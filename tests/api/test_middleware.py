"""Tests for API middleware."""

import pytest

from product_management.api.middleware import REQUEST_ID_HEADER


class TestApiKeyMiddleware:
    """Tests for API key authentication."""

    @pytest.mark.asyncio
    async def test_missing_header(self, client) -> None:
        response = await client.get("/product-forms/new")

        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_wrong_scheme(self, client) -> None:
        response = await client.get(
            "/product-forms/new", headers={"Authorization": "Basic dXNlcjpwYXNz"}
        )

        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"

    @pytest.mark.asyncio
    async def test_invalid_key(self, client) -> None:
        response = await client.get(
            "/product-forms/new", headers={"Authorization": "Bearer not-the-key"}
        )

        assert response.status_code == 401
        assert response.json()["error_code"] == "INVALID_API_KEY"

    @pytest.mark.asyncio
    async def test_public_paths(self, client) -> None:
        response = await client.get("/health")
        assert response.status_code == 200


class TestRequestIdMiddleware:
    """Tests for request ID correlation."""

    @pytest.mark.asyncio
    async def test_echoes_request_id(self, client) -> None:
        response = await client.get("/health", headers={REQUEST_ID_HEADER: "req-123"})
        assert response.headers[REQUEST_ID_HEADER] == "req-123"

    @pytest.mark.asyncio
    async def test_generates_request_id(self, client) -> None:
        response = await client.get("/health")
        assert response.headers[REQUEST_ID_HEADER]

    @pytest.mark.asyncio
    async def test_request_id_in_error_body(self, client) -> None:
        response = await client.get("/product-forms/new", headers={REQUEST_ID_HEADER: "req-456"})

        assert response.status_code == 401
        assert response.json()["request_id"] == "req-456"
