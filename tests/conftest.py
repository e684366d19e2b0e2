from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from asset_server.config import get_settings
from asset_server.main import app


INDEX_HTML = b"<!doctype html><html><body><div id=\"root\"></div></body></html>"


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
    root = tmp_path / "build"
    (root / "static" / "js").mkdir(parents=True)
    (root / "static" / "css").mkdir(parents=True)
    (root / "index.html").write_bytes(INDEX_HTML)
    (root / "static" / "js" / "main.js").write_bytes(b"console.log('todo');")
    (root / "static" / "css" / "main.css").write_bytes(b"body { margin: 0; }")
    (root / "manifest.json").write_bytes(b'{"short_name": "Todo"}')
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "photo.jpg").write_bytes(b"\xff\xd8\xff\xe0")
    (root / "robots.txt").write_bytes(b"User-agent: *")
    return root


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch, build_dir: Path) -> Iterator[None]:
    monkeypatch.setenv("BUILD_DIR", str(build_dir))
    monkeypatch.delenv("ENABLE_METRICS_ENDPOINT", raising=False)
    for name in ("INDEX_FILE", "HOST", "PORT", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
async def api_client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
