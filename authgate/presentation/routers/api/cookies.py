"""Cookie transport for issued credentials.

Both cookies are HTTP-only with path "/". The session cookie always lives as
long as the refresh token (and the credential store entry it points to).
"""

from fastapi import Response

from authgate.application.commands import IssuedTokens
from authgate.core.config import Settings


def set_auth_cookies(response: Response, tokens: IssuedTokens, settings: Settings) -> None:
    response.set_cookie(
        key=settings.access_cookie_name,
        value=tokens.access_token,
        max_age=tokens.access_expires_in,
        path="/",
        secure=settings.cookie_secure,
        httponly=True,
        samesite=settings.cookie_samesite,
    )
    response.set_cookie(
        key=settings.session_cookie_name,
        value=tokens.session_id,
        max_age=tokens.refresh_expires_in,
        path="/",
        secure=settings.cookie_secure,
        httponly=True,
        samesite=settings.cookie_samesite,
    )


def clear_auth_cookies(response: Response, settings: Settings) -> None:
    """Replace both cookies with immediately-expiring empty values."""
    for name in (settings.access_cookie_name, settings.session_cookie_name):
        response.delete_cookie(
            key=name,
            path="/",
            secure=settings.cookie_secure,
            httponly=True,
            samesite=settings.cookie_samesite,
        )
