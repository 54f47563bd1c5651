"""Request helpers shared by the comment routes."""

import logfire
from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from colloquy.domain.error import (
    DomainError,
    ForbiddenError,
    InvalidTransitionError,
    NotFoundError,
    StoreUnavailableError,
    ValidationFailedError,
)
from colloquy.domain.model.caller import Caller
from colloquy.domain.service import IdentityService

UNKNOWN = "unknown"


def extract_token(request: Request) -> str | None:
    """Read the caller's JWT from the auth_token cookie or a Bearer header."""
    token = request.cookies.get("auth_token")
    if token:
        return token

    authorization = request.headers.get("authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


def resolve_caller(request: Request, identity_service: IdentityService) -> Caller:
    """Resolve the caller identity of a request."""
    return identity_service.resolve(extract_token(request))


def client_ip(request: Request) -> str:
    """Client IP for the audit trail.

    Prefers the first X-Forwarded-For hop, then X-Real-IP, then the socket
    peer.
    """
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first

    real_ip = request.headers.get("x-real-ip")
    if real_ip and real_ip.strip():
        return real_ip.strip()

    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN


def client_user_agent(request: Request) -> str:
    """User agent for the audit trail."""
    return request.headers.get("user-agent") or UNKNOWN


def http_error(error: DomainError) -> HTTPException:
    """Translate a domain error into an HTTP error response.

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, ValidationFailedError):
        logfire.warn("Comment validation failed", error=str(error))
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": "Validation failed",
                "errors": [e.model_dump() for e in error.errors],
            },
        )
    if isinstance(error, InvalidTransitionError):
        logfire.warn("Invalid moderation status", requested=error.requested)
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(error),
        )
    if isinstance(error, ForbiddenError):
        logfire.warn("Comment operation forbidden", operation=error.operation)
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(error),
        )
    if isinstance(error, NotFoundError):
        logfire.warn("Resource not found", resource=error.resource)
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(error),
        )
    if isinstance(error, StoreUnavailableError):
        logfire.error("Comment store unavailable", operation=error.operation)
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Comment store temporarily unavailable, please retry",
            headers={"Retry-After": "1"},
        )

    logfire.error("Unhandled domain error", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal error",
    )


async def request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies in the same 400 shape as http_error.

    Args:
        request: Offending request
        exc: FastAPI body or parameter validation error
    """
    errors = [
        {"field": str(err["loc"][-1]), "reason": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]
    logfire.warn(
        "Malformed request",
        path=request.url.path,
        fields=[e["field"] for e in errors],
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"message": "Validation failed", "errors": errors}},
    )
