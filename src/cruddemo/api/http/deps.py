"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from loguru import logger
from sqlmodel import Session

from src.cruddemo.api.http.app_data import ApplicationDependencies
from src.cruddemo.core.security import Principal
from src.cruddemo.core.services import EmployeeService
from src.cruddemo.entities.service.student import StudentRoster

basic_auth = HTTPBasic(auto_error=False)


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(request: Request) -> Iterator[Session]:
    """Open a database session for the duration of one request."""
    app_deps = get_app_dependencies(request)
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_employee_service(db: Session = Depends(get_db_session)) -> EmployeeService:
    return EmployeeService(db)


def get_student_roster(request: Request) -> StudentRoster:
    """Get the student roster instance."""
    return get_app_dependencies(request).student_roster


def _challenge(realm: str) -> HTTPException:
    return HTTPException(
        status_code=401,
        detail="Not authenticated",
        headers={"WWW-Authenticate": f'Basic realm="{realm}"'},
    )


async def authorize_request(
    request: Request,
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> Principal | None:
    """Enforce the access policy for the current request.

    Requests the policy leaves unrestricted pass through without credentials.
    Restricted requests need valid Basic credentials (401 otherwise) whose
    principal the policy allows (403 otherwise).
    """
    app_deps = get_app_dependencies(request)
    method, path = request.method, request.url.path

    required_role = app_deps.access_policy.required_role(method, path)
    if required_role is None:
        return None

    realm = app_deps.config.security.realm
    if credentials is None:
        raise _challenge(realm)

    principal = app_deps.credential_store.authenticate(
        credentials.username, credentials.password
    )
    if principal is None:
        logger.info("Rejected credentials for user '{}'", credentials.username)
        raise _challenge(realm)

    if not app_deps.access_policy.is_allowed(principal, method, path):
        logger.info(
            "User '{}' lacks role {} for {} {}",
            principal.username,
            required_role,
            method,
            path,
        )
        raise HTTPException(
            status_code=403, detail=f"Missing required role: {required_role}"
        )

    return principal
