"""Shared fixtures for API tests."""

import httpx
import pytest_asyncio
from sqlalchemy import select

from product_management.attribute.models import AttributeModel, LocaleModel
from product_management.infrastructure.config import settings
from product_management.infrastructure.database import get_session
from product_management.main import app


@pytest_asyncio.fixture
async def client(session_factory):
    """Unauthenticated client with the database swapped for the test one."""

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def auth_client(client):
    """Client with valid API key authentication."""
    client.headers["Authorization"] = f"Bearer {settings.api_key}"
    return client


@pytest_asyncio.fixture
async def demo_ids(session, demo_data) -> dict[str, int]:
    """IDs of the demo locales and attributes, keyed by name."""
    locales = await session.execute(select(LocaleModel.locale_name, LocaleModel.id))
    attributes = await session.execute(select(AttributeModel.key, AttributeModel.id))
    return {**dict(locales.all()), **dict(attributes.all())}
