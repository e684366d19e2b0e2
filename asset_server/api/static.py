from __future__ import annotations

from fastapi import APIRouter, Request, Response

from asset_server.config import get_settings
from asset_server.services.static_files import load_asset


router = APIRouter(tags=["static"])


@router.api_route("/{asset_path:path}", methods=["GET", "HEAD"], include_in_schema=False)
async def serve_static(request: Request) -> Response:
    settings = get_settings()
    asset = await load_asset(
        request.url.path,
        build_path=settings.build_path,
        index_file=settings.index_file,
    )
    # Content-Type is set explicitly so Starlette doesn't append a charset.
    return Response(
        content=asset.body,
        status_code=asset.status_code,
        headers={"Content-Type": asset.content_type},
    )
