"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from symbology.config import settings
from symbology.exceptions import LegendFetchError, MalformedInputError, ResourceFetchError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.symbology_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Symbology",
        description="ESRI renderer symbology: SVG legend icons and feature icon lookup",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)

    from symbology.api.router import api_router

    app.include_router(api_router)

    return app


def _register_error_handlers(app: FastAPI) -> None:
    """Map the symbology error taxonomy onto HTTP status codes."""

    @app.exception_handler(MalformedInputError)
    async def malformed_input(request: Request, exc: MalformedInputError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(ResourceFetchError)
    async def resource_fetch_failed(request: Request, exc: ResourceFetchError) -> JSONResponse:
        logger.warning("Upstream resource failed for %s: %s", request.url.path, exc)
        content = {"detail": str(exc)}
        if isinstance(exc, LegendFetchError) and exc.server_error is not None:
            content["server_error"] = exc.server_error
        return JSONResponse(status_code=502, content=content)


app = create_app()
