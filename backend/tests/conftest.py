"""
Basic Resource — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.

Fixtures (function-scoped):
    ├── templates_dir: Temporary templates directory with a `hello.html`
    ├── engine: TemplateEngine rooted at templates_dir
    ├── fresh_app: A new FastAPI app from create_app()
    └── test_client: HTTPX AsyncClient for API endpoint testing
"""

import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DEFAULT_NAME"] = "micmine"
os.environ.pop("TEMPLATES_DIR", None)


HELLO_TEMPLATE = "<p>Hello {{ name }}!</p>{% if sufix is defined %}<i>{{ sufix }}</i>{% endif %}"


@pytest.fixture
def templates_dir(tmp_path):
    """A fresh templates directory holding a minimal hello.html."""
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "hello.html").write_text(HELLO_TEMPLATE, encoding="utf-8")
    return directory


@pytest.fixture
def engine(templates_dir):
    from app.services.template_service import TemplateEngine
    return TemplateEngine(str(templates_dir))


@pytest.fixture
def fresh_app():
    from app.main import create_app
    return create_app()


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient talking to the module-level app through ASGITransport.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
