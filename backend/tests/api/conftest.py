"""Route test fixtures — FastAPI test client with a mocked upstream translator.

Invariants:
    - get_translator_client is overridden with a client on httpx.MockTransport
    - The lifespan does not run (ASGITransport sends no lifespan events)
    - dependency_overrides cleared after every test
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from gateway.api.dependencies import get_translator_client
from gateway.config import get_settings
from gateway.infrastructure.translator_client import TranslatorClient
from gateway.main import app
from tests.api.mock_translator import MockTranslator


@pytest.fixture
def upstream():
    return MockTranslator()


@pytest.fixture
async def translator_client(upstream):
    client = TranslatorClient(
        get_settings(), transport=httpx.MockTransport(upstream),
    )
    yield client
    await client.aclose()


@pytest.fixture
async def client(translator_client):
    """Gateway test client wired to the mocked upstream."""
    app.dependency_overrides[get_translator_client] = lambda: translator_client
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
