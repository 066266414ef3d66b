"""Auth and user routes."""

from fastapi import APIRouter

from authgate.presentation.routers.api.v1.auth import router as auth_router
from authgate.presentation.routers.api.v1.users import router as users_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(users_router)

__all__ = ["api_router"]
