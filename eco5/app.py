"""
FastAPI application entry point for the Eco5 backend.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from eco5.config import Settings, get_settings
from eco5.errors import NotFound, install_error_handlers
from eco5.routes import router

logger = logging.getLogger("eco5.access")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _add_request_logging(app: FastAPI) -> None:
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


def _build_file(dist_dir: Path, full_path: str) -> Path | None:
    """Return the file under ``dist_dir`` named by ``full_path``, if any."""
    try:
        candidate = (dist_dir / full_path).resolve()
        # Never serve anything outside the build directory.
        if candidate.is_relative_to(dist_dir) and candidate.is_file():
            return candidate
    except (OSError, ValueError):
        # NUL bytes, over-long names and the like.
        return None
    return None


def _add_spa_fallback(app: FastAPI, settings: Settings) -> None:
    """
    Serve the built single-page app for every GET outside the API prefix.

    The route also claims the other verbs so an unmatched path is a 404
    envelope rather than a 405.
    """
    dist_dir = Path(settings.frontend_dist_dir).resolve()
    api_root = settings.api_prefix.strip("/")

    @app.api_route(
        "/{full_path:path}",
        methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        include_in_schema=False,
    )
    def spa_fallback(full_path: str, request: Request):
        in_api = api_root and (
            full_path == api_root or full_path.startswith(api_root + "/")
        )
        if in_api or request.method != "GET":
            raise NotFound("Not found")

        if full_path:
            candidate = _build_file(dist_dir, full_path)
            if candidate is not None:
                return FileResponse(candidate)

        index = dist_dir / "index.html"
        if not index.is_file():
            raise NotFound("Frontend build not found")
        return FileResponse(index)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(title="Eco5 Backend (FastAPI)", version="0.1.0")
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _add_request_logging(app)
    install_error_handlers(app)
    app.include_router(router, prefix=settings.api_prefix)
    _add_spa_fallback(app, settings)
    return app


app = create_app()
