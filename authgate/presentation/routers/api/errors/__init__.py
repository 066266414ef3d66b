"""RFC 7807 error responses."""

from authgate.presentation.routers.api.errors.error_response_builder import (
    DomainHTTPException,
    ErrorResponseBuilder,
)
from authgate.presentation.routers.api.errors.exception_handlers import (
    register_exception_handlers,
)
from authgate.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "DomainHTTPException",
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
