from __future__ import annotations

import uuid
from time import perf_counter
from typing import Any, Callable

import structlog
from starlette.datastructures import MutableHeaders


class RequestContextMiddleware:
    """Tags each request with an X-Request-ID and writes one access log line for it.

    The access line carries what uvicorn's own access log would, plus the
    response content type and the number of body bytes sent, so SPA fallbacks
    and asset sizes show up in the logs.
    """

    def __init__(self, app: Callable[..., Any]) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid.uuid4())
        client = scope.get("client")

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=scope.get("path"),
            method=scope.get("method"),
            client=f"{client[0]}:{client[1]}" if client else None,
        )

        start = perf_counter()
        status_code: int = 500
        content_type: str | None = None
        bytes_sent = 0

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal status_code, content_type, bytes_sent

            if message["type"] == "http.response.start":
                status_code = int(message.get("status", 500))
                headers = MutableHeaders(scope=message)
                headers["X-Request-ID"] = request_id
                content_type = headers.get("content-type")
            elif message["type"] == "http.response.body":
                bytes_sent += len(message.get("body", b""))

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            structlog.get_logger("access").info(
                "http_request",
                status_code=status_code,
                content_type=content_type,
                bytes_sent=bytes_sent,
                elapsed_ms=round((perf_counter() - start) * 1000.0, 2),
            )
            structlog.contextvars.clear_contextvars()
