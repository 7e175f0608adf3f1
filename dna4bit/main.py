# dna4bit/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import Dict, Optional, Tuple, Type

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from dna4bit import __version__
from dna4bit.core.config import get_settings
from dna4bit.genome import DatabaseError, DnaError, FormatError, LocationError
from dna4bit.schemas.common import APIError, ErrorResponse
from dna4bit.services.sequence_service import get_reader

logger = logging.getLogger("dna4bit")

# error kind -> (status, code, log level); None level = not logged
_DNA_ERRORS: Dict[Type[DnaError], Tuple[int, str, Optional[int]]] = {
    LocationError: (400, "INVALID_LOCATION", None),
    DatabaseError: (404, "SEQUENCE_NOT_FOUND", logging.WARNING),
    FormatError: (500, "FORMAT_ERROR", logging.ERROR),
}


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _error_json(
    *,
    status_code: int,
    code: str,
    message: str,
    detail: Optional[dict] = None,
) -> JSONResponse:
    body = ErrorResponse(error=APIError(code=code, message=message, detail=detail)).model_dump()
    return JSONResponse(status_code=status_code, content=body)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings

    if settings.check_dna_dir_on_startup:
        try:
            names = get_reader().chromosomes()
        except DatabaseError:
            logger.exception("Packed genome startup check failed")
            raise
        if not names:
            logger.warning("No *.dna.4bit files in %s", settings.dna_dir)
        logger.info("Packed genome startup check: %d chromosome(s) in %s", len(names), settings.dna_dir)

    yield


def create_app() -> FastAPI:
    settings = get_settings()
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
        max_age=600,
    )

    # -------------------------
    # Global exception handlers
    # -------------------------
    @app.exception_handler(DnaError)
    async def _handle_dna_error(request: Request, exc: DnaError):
        status, code, level = _DNA_ERRORS.get(type(exc), (500, "DNA_ERROR", logging.ERROR))
        if level is not None:
            logger.log(level, "%s on %s: %s", type(exc).__name__, request.url.path, exc)

        # file paths stay out of the response outside debug
        if isinstance(exc, DatabaseError) and not settings.debug:
            return _error_json(status_code=status, code=code, message="Sequence not available for requested location")
        return _error_json(status_code=status, code=code, message=str(exc))

    @app.exception_handler(RequestValidationError)
    async def _handle_validation_error(request: Request, exc: RequestValidationError):
        return _error_json(
            status_code=422,
            code="VALIDATION_ERROR",
            message="Request validation failed",
            detail={"errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_exception(request: Request, exc: StarletteHTTPException):
        # unknown routes (404) and non-GET methods (405)
        try:
            code = HTTPStatus(exc.status_code).name
        except ValueError:
            code = "HTTP_ERROR"
        return _error_json(status_code=exc.status_code, code=code, message=str(exc.detail))

    @app.exception_handler(Exception)
    async def _handle_unknown(request: Request, exc: Exception):
        logger.exception("Unhandled exception")
        msg = str(exc) if settings.debug else "Internal server error"
        return _error_json(status_code=500, code="INTERNAL_SERVER_ERROR", message=msg)

    # ---- system routes ----
    @app.get("/healthz", tags=["system"])
    def healthz():
        return {"status": "ok", "env": settings.env}

    @app.get("/", tags=["system"])
    def root():
        return {"service": settings.app_name, "version": __version__, "env": settings.env}

    # ---- API Router include ----
    from dna4bit.api.router import router as api_router

    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_app()
