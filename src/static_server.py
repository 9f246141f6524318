"""Standalone static file server for the profile site.

Runs as its own process, independent of the API. Content types come from a
fixed extension table rather than the platform's mimetypes database.
"""

from pathlib import Path

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from core.config import settings
from core.logging import setup_logging

logger = structlog.get_logger()

setup_logging()

MIME_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".pdf": "application/pdf",
    ".ico": "image/x-icon",
}
DEFAULT_MIME_TYPE = "text/plain"
CACHE_CONTROL = "public, max-age=3600"


def content_type_for(path: str | Path) -> str:
    return MIME_TYPES.get(Path(path).suffix, DEFAULT_MIME_TYPE)


def resolve_request_path(url_path: str, public_dir: str | Path) -> Path | None:
    """Map a URL path to a file under ``public_dir``.

    ``/`` serves ``index.html``; a leading ``/public/`` segment is accepted
    and stripped. Returns None when the path escapes the document root.
    """
    if url_path in ("", "/"):
        url_path = "/index.html"
    if url_path.startswith("/public/"):
        url_path = url_path[len("/public"):]

    root = Path(public_dir).resolve()
    candidate = (root / url_path.lstrip("/")).resolve()
    if candidate != root and root not in candidate.parents:
        return None
    return candidate


def create_static_app(public_dir: str | Path | None = None) -> FastAPI:
    """Create the static asset server app."""
    document_root = Path(public_dir if public_dir is not None else settings.public_dir)

    app = FastAPI(
        title=f"{settings.app_name} (static)",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/{url_path:path}")
    def serve(request: Request, url_path: str) -> Response:
        path = resolve_request_path(request.url.path, document_root)
        if path is None or not path.is_file():
            return PlainTextResponse("File not found", status_code=404)

        try:
            body = path.read_bytes()
        except OSError as exc:
            logger.error("static_read_failed", path=str(path), error=str(exc))
            return PlainTextResponse("Internal server error", status_code=500)

        return Response(
            content=body,
            media_type=content_type_for(path),
            headers={"Cache-Control": CACHE_CONTROL},
        )

    return app


app = create_static_app()


def run() -> None:
    """Run the static server with uvicorn."""
    import uvicorn

    logger.info(
        "static_server_starting",
        url=f"http://localhost:{settings.static_port}",
        public_dir=settings.public_dir,
    )
    uvicorn.run(app, host=settings.static_host, port=settings.static_port)


if __name__ == "__main__":
    run()
