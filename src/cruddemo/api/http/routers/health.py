"""Health check endpoints for liveness and readiness checks."""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from src.cruddemo.api.http.app_data import ApplicationDependencies
from src.cruddemo.api.http.deps import get_app_dependencies

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness: 200 as long as the process is serving requests."""
    return {"status": "healthy"}


@router.get("/ready", response_model=None)
def readiness(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> dict[str, Any] | JSONResponse:
    """Readiness: 200 when the database answers, 503 otherwise."""
    if app_deps.database_service.health_check():
        return {"status": "ready"}
    return JSONResponse(status_code=503, content={"status": "not_ready"})
