"""
Pytest configuration and fixtures for ContentAudit tests.
"""
from typing import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

from contentaudit.services.audit_config import AuditConfig
from contentaudit.services.auditor import PageMetadata
from tests.fixtures.sample_pages import (
    GOOD_DESCRIPTION,
    GOOD_STRUCTURED_DATA,
    GOOD_TITLE,
    PERFECT_PAGE_HTML,
    POOR_PAGE_HTML,
)


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def audit_config() -> AuditConfig:
    """Default documentation-site configuration, independent of env settings."""
    return AuditConfig()


@pytest.fixture
def good_page() -> PageMetadata:
    """Page metadata that passes title, description and structured data checks."""
    return PageMetadata(
        title=GOOD_TITLE,
        description=GOOD_DESCRIPTION,
        content='<p>Mifty docs</p><a href="/docs/cli">Mifty CLI reference</a>',
        keywords=["mifty"],
        structured_data=dict(GOOD_STRUCTURED_DATA),
    )


@pytest.fixture
def poor_page() -> PageMetadata:
    """Page metadata that triggers every recommendation category."""
    return PageMetadata(
        title="Hi",
        description="",
        content='<p>nothing to see</p><a href="/docs/intro">click here</a>',
        keywords=["mifty"],
        structured_data=None,
    )


@pytest.fixture
def perfect_page_html() -> str:
    return PERFECT_PAGE_HTML


@pytest.fixture
def poor_page_html() -> str:
    return POOR_PAGE_HTML


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
    """A built site with one complete and one bare page."""
    (tmp_path / "docs").mkdir()
    (tmp_path / "index.html").write_text(PERFECT_PAGE_HTML, encoding="utf-8")
    (tmp_path / "docs" / "intro.html").write_text(POOR_PAGE_HTML, encoding="utf-8")
    (tmp_path / "assets.css").write_text("body { margin: 0; }", encoding="utf-8")
    return tmp_path


# ============================================================================
# FastAPI App Fixtures
# ============================================================================

@pytest.fixture(scope="function")
def app() -> FastAPI:
    """FastAPI application with dependency overrides cleared after each test."""
    from contentaudit.core.deps import get_audit_config
    from contentaudit.main import app as main_app

    main_app.dependency_overrides[get_audit_config] = lambda: AuditConfig()

    yield main_app

    main_app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(app: FastAPI) -> TestClient:
    """Create synchronous test client."""
    return TestClient(app)


@pytest_asyncio.fixture(scope="function")
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
