"""Error response builder for RFC 7807 Problem Details.

Converts DomainError values (the Failure side of every Result) into HTTP
responses. This is the only place that maps error kinds to status codes.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
    DomainHTTPException: HTTPException carrying a DomainError (for dependencies)
"""

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from authgate.core.enums import ErrorCode
from authgate.core.errors import DomainError
from authgate.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)
from authgate.presentation.routers.api.middleware.trace_middleware import (
    get_request_trace_id,
)

DEFAULT_PROBLEM_BASE_URL = "https://errors.authgate.local"

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.MISSING_SESSION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SESSION_NOT_FOUND: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_INVALID_SIGNATURE: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_MALFORMED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.USER_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.STORE_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.HASHING_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.ISSUE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_TITLE_BY_CODE: dict[ErrorCode, str] = {
    ErrorCode.VALIDATION_FAILED: "Validation Failed",
    ErrorCode.INVALID_CREDENTIALS: "Invalid Credentials",
    ErrorCode.UNAUTHENTICATED: "Authentication Required",
    ErrorCode.FORBIDDEN: "Access Denied",
    ErrorCode.MISSING_SESSION: "Missing Session",
    ErrorCode.SESSION_NOT_FOUND: "Session Not Found",
    ErrorCode.TOKEN_EXPIRED: "Token Expired",
    ErrorCode.TOKEN_INVALID_SIGNATURE: "Invalid Token",
    ErrorCode.TOKEN_MALFORMED: "Invalid Token",
    ErrorCode.USER_ALREADY_EXISTS: "Resource Conflict",
    ErrorCode.STORE_ERROR: "Service Unavailable",
    ErrorCode.HASHING_ERROR: "Internal Server Error",
    ErrorCode.ISSUE_ERROR: "Internal Server Error",
}

# Internal failures never echo collaborator messages to callers.
_INTERNAL_DETAIL = "A required service failed. Please retry later."


def problem_base_url(request: Request) -> str:
    """Base URL for problem `type` URIs, taken from the app's settings."""
    container = getattr(request.app.state, "container", None)
    if container is None:
        return DEFAULT_PROBLEM_BASE_URL
    return container.settings.problem_base_url


class DomainHTTPException(HTTPException):
    """HTTPException raised by dependencies to abort with a DomainError."""

    def __init__(self, error: DomainError) -> None:
        status_code = ErrorResponseBuilder.status_code(error.code)
        super().__init__(
            status_code=status_code,
            detail=error.message,
            headers=ErrorResponseBuilder.headers(status_code),
        )
        self.error = error


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> match await engine.refresh(command):
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(error, request)
    """

    @staticmethod
    def from_domain_error(error: DomainError, request: Request) -> JSONResponse:
        """Convert a DomainError to an RFC 7807 JSON response."""
        status_code = ErrorResponseBuilder.status_code(error.code)
        detail = _INTERNAL_DETAIL if error.is_internal else error.message

        problem = ProblemDetails(
            type=f"{problem_base_url(request)}/{error.code.value}",
            title=_TITLE_BY_CODE.get(error.code, "Error"),
            status=status_code,
            detail=detail,
            instance=str(request.url.path),
            code=error.code.value,
            trace_id=get_request_trace_id(request),
        )

        field = getattr(error, "field", None)
        if field:
            problem.errors = [
                ErrorDetail(field=field, code=error.code.value, message=error.message)
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers=ErrorResponseBuilder.headers(status_code),
        )

    @staticmethod
    def status_code(code: ErrorCode) -> int:
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def headers(status_code: int) -> dict[str, str] | None:
        if status_code == status.HTTP_401_UNAUTHORIZED:
            return {"WWW-Authenticate": "Bearer"}
        return None
