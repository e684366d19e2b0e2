from __future__ import annotations

import time
from datetime import datetime, timezone

import psutil

from asset_server.models.schemas import MemoryUsage, ProcessSnapshot


def _process() -> psutil.Process:
    return psutil.Process()


def process_uptime() -> float:
    """Seconds since this process was started, as reported by the OS."""

    elapsed = time.time() - _process().create_time()
    # create_time() has coarse resolution on some platforms.
    return max(0.0, elapsed)


def memory_usage() -> MemoryUsage:
    info = _process().memory_info()
    return MemoryUsage(
        rss=int(info.rss),
        heap_total=int(info.vms),
        # `data` and `shared` only exist on some platforms (Linux, BSD).
        heap_used=int(getattr(info, "data", info.rss)),
        external=int(getattr(info, "shared", 0)),
    )


def snapshot() -> ProcessSnapshot:
    return ProcessSnapshot(uptime_seconds=process_uptime(), memory=memory_usage())


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""

    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
