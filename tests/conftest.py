"""Root conftest: shared fixtures for interpreter tests.

Provides:
- A small in-memory emoji catalog
- An EmojiInterpreter wired to a mocked Anthropic client
- An API client with dependency overrides (no real provider, no startup I/O)
- Autouse reset of the in-memory usage limiter
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.rate_limit import usage_limiter
from app.services.interpreter import CatalogEmoji, EmojiCatalog, EmojiInterpreter
from tests.helpers.mock_factories import (
    FAMILY,
    make_mock_anthropic_client,
    make_model_response_text,
)


@pytest.fixture
def catalog() -> EmojiCatalog:
    """Catalog with a handful of known emojis (🙃 is deliberately missing)."""
    return EmojiCatalog(
        [
            CatalogEmoji(character="🙂", slug="slightly-smiling-face", name="Slightly Smiling Face"),
            CatalogEmoji(character="😀", slug="grinning-face", name="Grinning Face"),
            CatalogEmoji(character="👋", slug="waving-hand", name="Waving Hand"),
            CatalogEmoji(character="💀", slug="skull", name="Skull"),
            CatalogEmoji(character=FAMILY, slug="family-man-woman-girl-boy", name="Family"),
        ]
    )


@pytest.fixture
def mock_client() -> MagicMock:
    """Anthropic client returning a valid interpretation."""
    return make_mock_anthropic_client(response_text=make_model_response_text())


@pytest.fixture
def interpreter(catalog: EmojiCatalog, mock_client: MagicMock) -> EmojiInterpreter:
    """Configured interpreter that talks to the mocked client."""
    interpreter = EmojiInterpreter(catalog, api_key="sk-ant-test", enabled=True)
    interpreter._client = mock_client
    return interpreter


@pytest.fixture(autouse=True)
def reset_usage_limiter():
    """Each test starts with a fresh daily allowance."""
    usage_limiter.reset()
    yield
    usage_limiter.reset()


@pytest.fixture
async def api_client(catalog: EmojiCatalog, interpreter: EmojiInterpreter):
    """HTTP client with the catalog and interpreter swapped for test doubles.

    The lifespan is not run, so nothing is read from disk and no real
    Anthropic client is created.
    """
    from app.api.deps import get_catalog, get_interpreter
    from app.main import app

    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_interpreter] = lambda: interpreter

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
