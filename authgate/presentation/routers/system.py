"""System endpoints (unversioned, no authentication)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from authgate.container import Container
from authgate.core.result import Success
from authgate.presentation.routers.api.middleware.auth_dependencies import get_container
from authgate.schemas.auth_schemas import HealthResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health(
    container: Annotated[Container, Depends(get_container)],
) -> HealthResponse | JSONResponse:
    """Report healthy only when the credential store answers."""
    result = await container.cache.ping()
    if isinstance(result, Success):
        return HealthResponse(status="healthy", cache="ok")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=HealthResponse(status="unhealthy", cache="unavailable").model_dump(),
    )
