"""Tests for the error body of errors raised outside the routers."""

import pytest


@pytest.mark.asyncio
async def test_unknown_path(auth_client) -> None:
    response = await auth_client.get("/catalog", headers={"X-Request-ID": "req-404"})

    assert response.status_code == 404
    assert response.json() == {
        "error_code": "NOT_FOUND",
        "message": "Not Found",
        "details": [],
        "request_id": "req-404",
    }


@pytest.mark.asyncio
async def test_method_not_allowed(auth_client) -> None:
    response = await auth_client.delete("/product-forms/new")

    assert response.status_code == 405
    data = response.json()
    assert data["error_code"] == "METHOD_NOT_ALLOWED"
    assert data["request_id"]


@pytest.mark.asyncio
async def test_malformed_body(auth_client, demo_data) -> None:
    response = await auth_client.post("/product-forms/validate", json={"sku": ["a", "b"]})

    assert response.status_code == 422
    data = response.json()
    assert data["error_code"] == "VALIDATION_ERROR"
    assert data["details"][0]["field"] == "sku"
