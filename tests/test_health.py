from datetime import datetime


async def test_health_returns_healthy_status(api_client) -> None:
    resp = await api_client.get("/health")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")

    payload = resp.json()
    assert payload["status"] == "healthy"
    assert isinstance(payload["uptime"], float)
    assert payload["uptime"] >= 0


async def test_health_timestamp_is_iso8601_utc(api_client) -> None:
    payload = (await api_client.get("/health")).json()

    assert payload["timestamp"].endswith("Z")
    parsed = datetime.fromisoformat(payload["timestamp"].replace("Z", "+00:00"))
    assert parsed.utcoffset().total_seconds() == 0


async def test_health_ignores_query_string(api_client) -> None:
    resp = await api_client.get("/health?probe=k8s")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


async def test_health_does_not_need_build_dir(api_client, build_dir, monkeypatch) -> None:
    from asset_server.config import get_settings

    monkeypatch.setenv("BUILD_DIR", str(build_dir / "missing"))
    get_settings.cache_clear()

    resp = await api_client.get("/health")
    assert resp.status_code == 200


async def test_responses_include_x_request_id(api_client) -> None:
    health = await api_client.get("/health")
    page = await api_client.get("/")
    assert health.headers.get("x-request-id")
    assert page.headers.get("x-request-id")
    assert health.headers["x-request-id"] != page.headers["x-request-id"]


async def test_head_health(api_client) -> None:
    resp = await api_client.head("/health")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
