"""Map domain exceptions to plain-text HTTP responses."""

from fastapi import FastAPI, Request
from loguru import logger
from starlette.responses import PlainTextResponse

from src.cruddemo.core.exceptions import (
    IdentityModificationError,
    NotFoundError,
    PatchFieldError,
)


def _app_config(request: Request):
    return request.app.state.app_dependencies.config.app


async def not_found_handler(request: Request, exc: NotFoundError) -> PlainTextResponse:
    logger.info("Not found: {}", exc)
    return PlainTextResponse(str(exc), status_code=_app_config(request).not_found_status)


async def identity_modification_handler(
    request: Request, exc: IdentityModificationError
) -> PlainTextResponse:
    logger.warning("Rejected identity change: {}", exc)
    return PlainTextResponse(
        str(exc), status_code=_app_config(request).identity_violation_status
    )


async def patch_field_handler(request: Request, exc: PatchFieldError) -> PlainTextResponse:
    logger.warning("Rejected patch: {}", exc)
    return PlainTextResponse(str(exc), status_code=422)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(IdentityModificationError, identity_modification_handler)
    app.add_exception_handler(PatchFieldError, patch_field_handler)
