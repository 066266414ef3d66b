"""Users router.

Endpoints:
    GET /users/me  - Current user (any authenticated role)
    GET /users/    - Paged user listing (admin, moderator)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from authgate.container import Container
from authgate.core.result import Failure, Success
from authgate.domain.entities import User
from authgate.domain.enums import UserRole
from authgate.presentation.routers.api.errors import ErrorResponseBuilder, ProblemDetails
from authgate.presentation.routers.api.middleware.auth_dependencies import (
    get_container,
    get_current_user,
    require_roles,
)
from authgate.schemas.auth_schemas import UserEnvelope, UserListResponse, UserResponse

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "/me",
    response_model=UserEnvelope,
    responses={401: {"description": "Not authenticated", "model": ProblemDetails}},
)
async def get_me(user: Annotated[User, Depends(get_current_user)]) -> UserEnvelope:
    return UserEnvelope(user=UserResponse.from_entity(user))


@router.get(
    "/",
    response_model=UserListResponse,
    responses={
        401: {"description": "Not authenticated", "model": ProblemDetails},
        403: {"description": "Role not allowed", "model": ProblemDetails},
    },
    summary="List users",
)
async def list_users(
    request: Request,
    user: Annotated[User, Depends(require_roles(UserRole.ADMIN, UserRole.MODERATOR))],
    container: Annotated[Container, Depends(get_container)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
) -> UserListResponse | JSONResponse:
    result = await container.directory.list_page(page, limit)
    match result:
        case Success(value=users):
            return UserListResponse(
                results=len(users),
                users=[UserResponse.from_entity(u) for u in users],
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
