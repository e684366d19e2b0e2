from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    timestamp: str
    uptime: float = Field(ge=0)


class MemoryUsage(BaseModel):
    rss: int
    heap_total: int
    heap_used: int
    external: int


class ProcessSnapshot(BaseModel):
    uptime_seconds: float = Field(ge=0)
    memory: MemoryUsage
