from __future__ import annotations

import errno
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

import anyio
import structlog


CONTENT_TYPES: dict[str, str] = {
    ".js": "text/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpg",
}
DEFAULT_CONTENT_TYPE = "text/html"

SERVER_ERROR_BODY = b"Server Error"

logger = structlog.get_logger("static")


@dataclass(frozen=True)
class StaticAsset:
    status_code: int
    content_type: str
    body: bytes
    fallback: bool = False


def content_type_for(path: str) -> str:
    """Map a file extension to a Content-Type; unknown extensions are served as HTML."""

    return CONTENT_TYPES.get(PurePosixPath(path).suffix, DEFAULT_CONTENT_TYPE)


def relative_asset_path(request_path: str, index_file: str = "index.html") -> str:
    if request_path in ("", "/"):
        return index_file
    return request_path.lstrip("/")


async def resolve_asset_path(build_path: Path, relative: str) -> anyio.Path | None:
    """
    Join `relative` onto the build directory and resolve it.

    Returns None when the resolved path lands outside the build directory
    (`..` segments, symlinks pointing elsewhere) or cannot be represented
    as a filesystem path at all. Symlink loops raise OSError (ELOOP).
    """
    if "\x00" in relative:
        return None

    try:
        base = await anyio.Path(build_path).resolve()
        target = await (base / relative).resolve()
    except RuntimeError as exc:
        # pathlib before 3.13 reports symlink loops as RuntimeError
        raise OSError(errno.ELOOP, str(exc), relative) from exc

    if target != base and base not in target.parents:
        return None
    return target


def server_error() -> StaticAsset:
    return StaticAsset(status_code=500, content_type="text/plain", body=SERVER_ERROR_BODY)


async def _load_fallback(build_path: Path, index_file: str) -> StaticAsset:
    try:
        body = await anyio.Path(build_path, index_file).read_bytes()
    except OSError as exc:
        logger.warning("static_read_failed", path=index_file, error=str(exc), fallback=True)
        return server_error()
    return StaticAsset(status_code=200, content_type=DEFAULT_CONTENT_TYPE, body=body, fallback=True)


async def load_asset(request_path: str, *, build_path: Path, index_file: str = "index.html") -> StaticAsset:
    """
    Read the file behind `request_path` from the build directory.

    Missing files are answered with the index file (SPA fallback) so that
    client-side routes survive a page reload. Any other filesystem error,
    or a missing index file, becomes a 500.
    """
    relative = relative_asset_path(request_path, index_file)

    try:
        target = await resolve_asset_path(build_path, relative)
        if target is None:
            raise FileNotFoundError(relative)
        body = await target.read_bytes()
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("static_fallback", path=request_path)
        return await _load_fallback(build_path, index_file)
    except OSError as exc:
        logger.warning("static_read_failed", path=request_path, error=str(exc))
        return server_error()

    return StaticAsset(status_code=200, content_type=content_type_for(relative), body=body)
