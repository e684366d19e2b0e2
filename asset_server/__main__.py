from __future__ import annotations

import argparse

import uvicorn

from asset_server.config import get_settings
from asset_server.observability.logging import configure_logging


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Serve a built web bundle with health and metrics endpoints")
    parser.add_argument("--host", default=settings.host, help="Interface to bind (env HOST)")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on (env PORT)")
    parser.add_argument("--build-dir", default=settings.build_dir, help="Directory holding the bundle (env BUILD_DIR)")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level (env LOG_LEVEL)")
    parser.add_argument("--log-format", choices=["json", "console"], default=settings.log_format, help="Log renderer (env LOG_FORMAT)")
    args = parser.parse_args()

    # Flags win over the environment; the app reads the same cached settings object.
    settings.host = args.host
    settings.port = args.port
    settings.build_dir = args.build_dir
    settings.log_level = args.log_level
    settings.log_format = args.log_format

    configure_logging(settings.log_level, settings.log_format)
    uvicorn.run(
        "asset_server.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
