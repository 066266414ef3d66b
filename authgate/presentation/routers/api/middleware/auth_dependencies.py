"""Authentication and role dependencies.

FastAPI dependencies that run the access guard in front of protected routes.
The authenticated User is returned by the dependency and handed to the route
as a parameter; nothing is stashed on the request.

Usage:
    # Protected route (requires auth)
    @router.get("/users/me")
    async def me(user: Annotated[User, Depends(get_current_user)]):
        ...

    # Role-restricted route
    @router.get("/users/")
    async def list_users(
        user: Annotated[User, Depends(require_roles(UserRole.ADMIN, UserRole.MODERATOR))],
    ):
        ...
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from authgate.container import Container
from authgate.core.result import Failure
from authgate.domain.entities import User
from authgate.domain.enums import UserRole
from authgate.presentation.routers.api.errors.error_response_builder import (
    DomainHTTPException,
)

# auto_error=False: a missing header falls back to the access token cookie
bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> Container:
    """Return the container the app factory attached to this application."""
    return request.app.state.container


def extract_access_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
    cookie_name: str,
) -> str | None:
    """Bearer header first, then the access token cookie."""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(cookie_name) or None


async def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    container: Annotated[Container, Depends(get_container)],
) -> User:
    """Authenticate the caller and return their User.

    Raises:
        DomainHTTPException 401: If the token is missing, invalid or expired,
            or the subject no longer exists.
    """
    token = extract_access_token(
        request, credentials, container.settings.access_cookie_name
    )
    result = await container.guard.authenticate(token)
    if isinstance(result, Failure):
        raise DomainHTTPException(result.error)
    return result.value


def require_roles(*roles: UserRole) -> Callable[..., Awaitable[User]]:
    """Create a dependency that authenticates and then requires one of roles.

    Returns:
        Dependency returning the authorized User.

    Raises:
        DomainHTTPException 403: If the user's role is not allowed.
    """
    allowed = frozenset(roles)

    async def role_checker(
        user: Annotated[User, Depends(get_current_user)],
        container: Annotated[Container, Depends(get_container)],
    ) -> User:
        result = container.guard.authorize(user, allowed)
        if isinstance(result, Failure):
            raise DomainHTTPException(result.error)
        return user

    return role_checker
