"""
FastAPI application setup and configuration.
Defines the app factory, middleware, exception handlers, and route registration.
"""

import time
import uuid
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import Lifespan

from core.config import settings
from core.constants import ErrorCode
from core.errors import AppError
from core.logger import logger
from models.schemas.base import error_content

REQUEST_ID_HEADER = "X-Request-ID"

_STATUS_CODES = {
    400: ErrorCode.VALIDATION_ERROR,
    404: ErrorCode.NOT_FOUND,
    503: ErrorCode.SERVICE_UNAVAILABLE,
}


def flatten_validation_errors(errors: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Group pydantic errors by dotted field path, body-level ones under formErrors."""
    field_errors: Dict[str, List[str]] = {}
    form_errors: List[str] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query")]
        if loc:
            field_errors.setdefault(".".join(loc), []).append(error.get("msg", "Invalid value"))
        else:
            form_errors.append(error.get("msg", "Invalid value"))
    return {"formErrors": form_errors, "fieldErrors": field_errors}


def register_middlewares(app: FastAPI) -> None:
    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log incoming requests and responses."""
        request_id = getattr(request.state, "request_id", "unknown")
        start_time = time.perf_counter()

        logger.info(
            f"Request {request_id}: {request.method} {request.url.path} "
            f"from {request.client.host if request.client else 'unknown'}"
        )

        response = await call_next(request)

        duration = (time.perf_counter() - start_time) * 1000
        logger.info(f"Response {request_id}: {response.status_code} ({duration:.1f}ms)")
        return response

    # Registered last so it wraps the logging middleware
    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        """Add request ID to each request for tracing."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        with logger.trace_context(request_id=request_id):
            response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=error_content(
                "Invalid request data",
                400,
                ErrorCode.VALIDATION_ERROR.value,
                flatten_validation_errors(exc.errors()),
            ),
        )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"Request failed: {exc.message}", extra={"code": exc.code})
        return JSONResponse(
            status_code=exc.status_code,
            content=error_content(exc.message, exc.status_code, exc.code, exc.details or None),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        code = _STATUS_CODES.get(exc.status_code, ErrorCode.INTERNAL_ERROR)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_content(str(exc.detail), exc.status_code, code.value),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for standardized error responses."""
        request_id = getattr(request.state, "request_id", None)
        logger.exception(f"Unhandled exception in request {request_id}: {exc}")
        return JSONResponse(
            status_code=500,
            content=error_content(
                "Internal server error",
                500,
                ErrorCode.INTERNAL_ERROR.value,
                {"requestId": request_id} if request_id else None,
            ),
        )


def register_routes(app: FastAPI) -> None:
    from internal.api.routes import assets, expand, health, search, simulate, taste

    prefix = settings.api_prefix
    app.include_router(health.router, tags=["health"])
    app.include_router(expand.router, prefix=f"{prefix}/expand", tags=["expand"])
    app.include_router(taste.router, prefix=f"{prefix}/taste", tags=["taste"])
    app.include_router(assets.router, prefix=f"{prefix}/assets", tags=["assets"])
    app.include_router(search.router, prefix=f"{prefix}/search", tags=["search"])
    app.include_router(simulate.router, prefix=f"{prefix}/simulate", tags=["simulate"])


def create_app(lifespan: Optional[Lifespan] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        lifespan: Startup/shutdown context that populates ``app.state``.
            Tests omit it and assign fakes to ``app.state`` directly.
    """
    app = FastAPI(
        title="Cultural Arbitrage Signal Engine API",
        description="Discover crypto tokens and NFT collections aligned with emerging cultural trends",
        version=settings.service_version,
        docs_url="/swagger/index.html",
        redoc_url=None,
        openapi_url="/openapi.json",
        root_path=settings.api_root_path or "",
        lifespan=lifespan,
    )
    app.state.started_at = time.time()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api_cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    register_middlewares(app)
    register_exception_handlers(app)
    register_routes(app)
    return app


__all__ = ["create_app", "flatten_validation_errors"]
