"""
Shared pytest fixtures and configuration.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from insurance.api.app import create_app
from insurance.catalog.store import CatalogStore, Policy


def make_policies() -> list[Policy]:
    return [
        Policy(1, "Home Basic", "home", 100, 50000),
        Policy(2, "Auto Plus", "auto", 200, 20000),
        Policy(3, "Home Plus", "home", 150, 80000),
    ]


@pytest.fixture()
def policies():
    return make_policies()


@pytest.fixture()
def store(policies):
    return CatalogStore(policies)


@pytest.fixture()
def app(store):
    """Create a fresh app instance wired to the three-policy catalog."""
    return create_app(store)


@pytest_asyncio.fixture()
async def client(app):
    """Async HTTP client wired directly to the ASGI app (no server needed)."""
    async with app.router.lifespan_context(app):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            yield ac
