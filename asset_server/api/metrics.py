from __future__ import annotations

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse

from asset_server.api.static import serve_static
from asset_server.config import get_settings
from asset_server.observability.metrics import CONTENT_TYPE, render_process_metrics
from asset_server.services.process_info import snapshot


router = APIRouter(tags=["metrics"])


@router.api_route("/metrics", methods=["GET", "HEAD"], response_class=PlainTextResponse)
async def metrics(request: Request) -> Response:
    settings = get_settings()
    if not settings.enable_metrics_endpoint:
        # Disabled: /metrics is just another path for the static responder.
        return await serve_static(request)
    return Response(content=render_process_metrics(snapshot()), headers={"Content-Type": CONTENT_TYPE})
