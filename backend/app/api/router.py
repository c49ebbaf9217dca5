"""
Router principal que agrupa todos los sub-routers.
"""
from fastapi import APIRouter

from app.api import health
from app.api import pacientes
from app.api import busqueda
from app.api.auth_router import router as auth_router

api_router = APIRouter()

# ============================================
# INCLUIR TODOS LOS ROUTERS
# ============================================

# Health Check (sin autenticación para load balancers)
api_router.include_router(health.router)

api_router.include_router(auth_router)

api_router.include_router(
    pacientes.router,
    prefix="/pacientes",
    tags=["Pacientes"]
)

api_router.include_router(
    busqueda.router,
    prefix="/busqueda",
    tags=["Búsqueda"]
)
