from __future__ import annotations

from fastapi import APIRouter

from asset_server.models.schemas import HealthResponse
from asset_server.services.process_info import process_uptime, utc_timestamp


router = APIRouter(tags=["health"])


@router.api_route("/health", methods=["GET", "HEAD"], response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="healthy", timestamp=utc_timestamp(), uptime=process_uptime())
