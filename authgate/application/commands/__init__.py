"""Application commands."""

from authgate.application.commands.auth_commands import (
    IssuedTokens,
    LogOut,
    RefreshSession,
    RegisterUser,
    SignIn,
)

__all__ = ["IssuedTokens", "LogOut", "RefreshSession", "RegisterUser", "SignIn"]
