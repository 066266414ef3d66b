"""Auth router: sign-up, sign-in, refresh and logout.

Endpoints:
    POST /sign-up  - Create user
    POST /sign-in  - Verify password, issue tokens, set cookies
    POST /refresh  - Rotate the session identified by the session cookie
    GET  /logout   - End the session and clear cookies (POST also accepted)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from authgate.application.commands import LogOut, RefreshSession, RegisterUser, SignIn
from authgate.container import Container
from authgate.core.enums import ErrorCode
from authgate.core.errors import ValidationError
from authgate.core.result import Failure, Success
from authgate.domain.entities import User
from authgate.domain.enums import UserRole
from authgate.presentation.routers.api.cookies import clear_auth_cookies, set_auth_cookies
from authgate.presentation.routers.api.errors import ErrorResponseBuilder, ProblemDetails
from authgate.presentation.routers.api.middleware.auth_dependencies import (
    get_container,
    get_current_user,
)
from authgate.schemas.auth_schemas import (
    SignInRequest,
    SignUpRequest,
    StatusResponse,
    TokenResponse,
    UserEnvelope,
    UserResponse,
)

router = APIRouter(tags=["Auth"])

_AUTH_ERRORS: dict[int | str, dict] = {
    401: {"description": "Not authenticated", "model": ProblemDetails},
    503: {"description": "Credential store unavailable", "model": ProblemDetails},
}


@router.post(
    "/sign-up",
    status_code=status.HTTP_201_CREATED,
    response_model=UserEnvelope,
    responses={
        400: {"description": "Validation failed", "model": ProblemDetails},
        409: {"description": "Email already registered", "model": ProblemDetails},
    },
    summary="Register user",
)
async def sign_up(
    request: Request,
    data: SignUpRequest,
    container: Annotated[Container, Depends(get_container)],
) -> UserEnvelope | JSONResponse:
    if data.password != data.password_confirm:
        return ErrorResponseBuilder.from_domain_error(
            ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message="Passwords do not match",
                field="password_confirm",
            ),
            request,
        )
    if data.role is not UserRole.USER:
        return ErrorResponseBuilder.from_domain_error(
            ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message="Self registration may only request the 'user' role",
                field="role",
            ),
            request,
        )

    result = await container.directory.register(
        RegisterUser(name=data.name, email=str(data.email), password=data.password)
    )
    match result:
        case Success(value=user):
            return UserEnvelope(user=UserResponse.from_entity(user))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.post(
    "/sign-in",
    response_model=TokenResponse,
    responses=_AUTH_ERRORS,
    summary="Sign in",
    description="Verify credentials, issue access and refresh tokens and open a session.",
)
async def sign_in(
    request: Request,
    response: Response,
    data: SignInRequest,
    container: Annotated[Container, Depends(get_container)],
) -> TokenResponse | JSONResponse:
    result = await container.engine.sign_in(
        SignIn(login=data.email, password=data.password)
    )
    match result:
        case Success(value=tokens):
            set_auth_cookies(response, tokens, container.settings)
            return TokenResponse(
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
                expires_in=tokens.access_expires_in,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.post(
    "/refresh",
    response_model=TokenResponse,
    responses={
        400: {"description": "Session cookie missing", "model": ProblemDetails},
        **_AUTH_ERRORS,
    },
    summary="Rotate session",
    description=(
        "Requires a valid access token. Consumes the session cookie and issues "
        "new tokens under a new session identifier."
    ),
)
async def refresh(
    request: Request,
    response: Response,
    user: Annotated[User, Depends(get_current_user)],
    container: Annotated[Container, Depends(get_container)],
) -> TokenResponse | JSONResponse:
    session_id = request.cookies.get(container.settings.session_cookie_name)
    result = await container.engine.refresh(
        RefreshSession(session_id=session_id, subject=user.id)
    )
    match result:
        case Success(value=tokens):
            set_auth_cookies(response, tokens, container.settings)
            return TokenResponse(
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
                expires_in=tokens.access_expires_in,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.api_route(
    "/logout",
    methods=["GET", "POST"],
    response_model=StatusResponse,
    responses={401: _AUTH_ERRORS[401]},
    summary="Log out",
)
async def log_out(
    request: Request,
    response: Response,
    user: Annotated[User, Depends(get_current_user)],
    container: Annotated[Container, Depends(get_container)],
) -> StatusResponse:
    session_id = request.cookies.get(container.settings.session_cookie_name)
    await container.engine.log_out(LogOut(session_id=session_id))
    clear_auth_cookies(response, container.settings)
    return StatusResponse()
