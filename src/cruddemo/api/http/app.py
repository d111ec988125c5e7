"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.routing import APIRoute
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import PlainTextResponse

from src.cruddemo.api.http.app_data import ApplicationDependencies
from src.cruddemo.api.http.deps import authorize_request
from src.cruddemo.api.http.errors import register_exception_handlers
from src.cruddemo.api.http.routers import employees, health, students
from src.cruddemo.api.utils.app_startup import configure_logging
from src.cruddemo.core.services import DbManageService
from src.cruddemo.runtime.config.config_data import ConfigData
from src.cruddemo.runtime.context import get_config


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        app_deps: ApplicationDependencies = request.app.state.app_dependencies
        if app_deps.config.app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return response


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()

    with logger.contextualize(
        request_id=request_id, method=request.method, path=request.url.path
    ):
        logger.info("request.start {} {}", request.method, request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.exception(
                "request.error {} {} ({:.1f} ms)",
                request.method,
                request.url.path,
                duration_ms,
            )
            return PlainTextResponse(
                "Internal Server Error",
                status_code=500,
                headers={"X-Request-ID": request_id},
            )

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "request.end {} {} -> {} ({:.1f} ms)",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        response.headers.setdefault("X-Request-ID", request_id)
        return response


# --- Lifecycle hooks ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    app_deps: ApplicationDependencies = app.state.app_dependencies
    config = app_deps.config
    logger.info("Starting up application in {} environment", config.app.environment)

    db_manage = DbManageService(app_deps.database_service)
    db_manage.create_all()
    if config.database.seed:
        db_manage.seed()

    try:
        yield
    finally:
        logger.info("Shutting down application")
        app_deps.database_service.dispose()


def _check_route_coverage(app: FastAPI, app_deps: ApplicationDependencies) -> None:
    """Refuse to build an app whose state-changing routes no access rule covers."""
    routes = [
        (method, route.path)
        for route in app.routes
        if isinstance(route, APIRoute)
        for method in sorted(route.methods)
    ]
    unprotected = app_deps.access_policy.unprotected(routes)
    if unprotected:
        listing = ", ".join(f"{method} {path}" for method, path in unprotected)
        raise RuntimeError(f"No access rule covers: {listing}")


def create_app(
    config: ConfigData | None = None,
    dependencies: ApplicationDependencies | None = None,
) -> FastAPI:
    """Build the application around ``config`` (the active context by default)."""
    config = config or get_config()
    app_deps = dependencies or ApplicationDependencies.from_config(config)
    is_production = config.app.environment == "production"

    app = FastAPI(
        title="Employee Directory API",
        lifespan=lifespan,
        dependencies=[Depends(authorize_request)],
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )
    app.state.app_dependencies = app_deps

    app.add_middleware(SecurityHeadersMiddleware)
    app.middleware("http")(log_requests)
    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(employees.router, prefix=config.app.api_prefix)
    app.include_router(students.router, prefix=config.app.api_prefix)
    _check_route_coverage(app, app_deps)
    return app


configure_logging()

app = create_app()

__all__ = ["app", "create_app", "lifespan"]
