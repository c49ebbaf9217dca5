"""
Endpoints de autorización.
Exponen el rol efectivo y las capacidades del usuario autenticado.
"""
from fastapi import APIRouter, Depends, Query

from app.core.auth_dependencies import get_contexto_sesion
from app.core.contexto import ContextoSesion
from app.schemas.auth_schemas import AccesoRutaResponse, PermisosResponse

router = APIRouter(prefix="/auth", tags=["Autenticación"])


@router.get("/permisos", response_model=PermisosResponse)
async def obtener_permisos(contexto: ContextoSesion = Depends(get_contexto_sesion)):
    """
    Rol efectivo y objeto de capacidades.

    El objeto siempre contiene todas las capacidades conocidas, con valor
    booleano, sin importar el rol.
    """
    return PermisosResponse(
        usuario_id=contexto.usuario_id,
        rol=contexto.rol,
        permisos=contexto.permisos,
        tutoriales_vistos=sorted(contexto.tutoriales_vistos),
        tema=contexto.tema,
    )


@router.get("/acceso", response_model=AccesoRutaResponse)
async def verificar_acceso(
    ruta: str = Query(..., min_length=1, description="Ruta de la aplicación, ej: /pacientes/123"),
    contexto: ContextoSesion = Depends(get_contexto_sesion),
):
    """Indica si el usuario puede navegar a la ruta. Rutas desconocidas: denegado."""
    return AccesoRutaResponse(ruta=ruta, permitido=contexto.puede_acceder_ruta(ruta))
