"""Exception handlers translating domain errors to HTTP responses.

The body is ``{"detail": message, "kind": error kind}``. Stack traces never
reach the client.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from vidtube.domain.error import (
    CascadeIncompleteError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
    CascadeIncompleteError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error, 400 for unmapped kinds."""
    for error_type in type(error).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_400_BAD_REQUEST


def _server_detail(exc: DomainError) -> str:
    """Client-facing message for a 5xx domain error, without internals."""
    if isinstance(exc, CascadeIncompleteError) and exc.rolled_back:
        return "Dependent content could not be removed; the delete was rolled back"
    if isinstance(exc, CascadeIncompleteError):
        return "Deleted, but dependent content was not fully removed"
    return "Internal error"


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as JSON."""
    status_code = status_for(exc)

    if status_code >= 500:
        logfire.error(
            "Domain error",
            kind=exc.kind,
            path=request.url.path,
            error=str(exc),
            cause=repr(exc.__cause__) if exc.__cause__ else None,
            rolled_back=getattr(exc, "rolled_back", None),
        )
        detail = _server_detail(exc)
    else:
        logfire.info("Domain error", kind=exc.kind, path=request.url.path)
        detail = str(exc)

    return JSONResponse(
        status_code=status_code, content={"detail": detail, "kind": exc.kind}
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register domain error handlers on the application."""
    app.add_exception_handler(DomainError, domain_error_handler)
