"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from isam_gateway.config import Settings
from isam_gateway.core.maintenance import (
    MAINTENANCE_BOOLEAN_KEYS,
    MAINTENANCE_CONTACT_EMAIL_KEYS,
    MAINTENANCE_HEADLINE_KEYS,
    MAINTENANCE_MESSAGE_KEYS,
)
from isam_gateway.main import create_app

INDEX_HTML = """<!doctype html>
<html lang="en" dir="ltr">
  <head>
    <meta charset="utf-8" />
    <title>ISAM</title>
    <meta name="description" content="placeholder" />
    <link rel="canonical" href="https://isam-tech.com/" />
  </head>
  <body><div id="root"></div></body>
</html>
"""

HASHED_ASSET = "/assets/index-B4x9kQ2a.js"


@pytest.fixture(autouse=True)
def clean_maintenance_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with maintenance mode unset."""
    for key in (
        *MAINTENANCE_BOOLEAN_KEYS,
        *MAINTENANCE_HEADLINE_KEYS,
        *MAINTENANCE_MESSAGE_KEYS,
        *MAINTENANCE_CONTACT_EMAIL_KEYS,
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def doc_root(tmp_path: Path) -> Path:
    """Create a built site under a temporary document root.

    Returns:
        Path of the document root
    """
    root = tmp_path / "frontend" / "dist"
    (root / "assets").mkdir(parents=True)
    (root / "img").mkdir()
    (root / "docs").mkdir()
    (root / "empty").mkdir()

    (root / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (root / "style.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    (root / HASHED_ASSET.lstrip("/")).write_text("console.log('isam');\n")
    (root / "assets" / "logo.svg").write_text("<svg></svg>")
    (root / "img" / "isam-logo.png").write_bytes(b"\x89PNG\r\n\x1a\nlogo")
    (root / "docs" / "index.html").write_text("<p>docs</p>", encoding="utf-8")
    (root / "robots.bin").write_bytes(b"\x00\x01")
    return root


@pytest.fixture
def settings(doc_root: Path, tmp_path: Path) -> Settings:
    """Settings pointing the gateway at the temporary document root."""
    return Settings(
        _env_file=None,
        doc_root=str(doc_root),
        app_root=tmp_path,
        app_env="test",
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Gateway application bound to the temporary document root."""
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    """In-process HTTP client for the gateway.

    Yields:
        httpx client talking to the ASGI app
    """
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as http_client:
        yield http_client


@pytest.fixture
def index_html() -> str:
    """Contents of the SPA shell written by ``doc_root``."""
    return INDEX_HTML
