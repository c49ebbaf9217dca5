"""
Endpoints de Health Check.
"""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from datetime import datetime

from app.config import settings
from app.core.database import check_database_health

router = APIRouter(
    prefix="/health",
    tags=["health"],
    responses={
        200: {"description": "Sistema saludable"},
        503: {"description": "Sistema no disponible"}
    }
)


@router.get(
    "",
    summary="Health Check General",
    description="Verifica el estado general de la aplicación",
    response_model=None
)
async def health_check() -> JSONResponse:
    """Retorna 200 si la aplicación está corriendo."""
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "version": settings.APP_VERSION,
            "environment": settings.APP_ENV
        }
    )


@router.get(
    "/readiness",
    summary="Readiness Probe",
    description="Verifica que la base de datos responde",
    response_model=None
)
def readiness_probe() -> JSONResponse:
    db_health = check_database_health()
    listo = db_health.get("status") == "healthy"

    return JSONResponse(
        status_code=status.HTTP_200_OK if listo else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if listo else "not_ready",
            "timestamp": datetime.now().isoformat(),
            "components": {"database": db_health}
        }
    )
