"""
Endpoint de búsqueda global.
"""
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import Optional

from app.core.auth_dependencies import get_current_user
from app.core.database import get_session
from app.models.usuario import UsuarioSesion
from app.schemas.busqueda import ResultadoBusquedaResponse
from app.services.busqueda_service import BusquedaService

router = APIRouter()


@router.get("", response_model=ResultadoBusquedaResponse)
def buscar(
    q: Optional[str] = Query(default=None, description="Texto a buscar"),
    session: Session = Depends(get_session),
    current_user: UsuarioSesion = Depends(get_current_user),
):
    """
    Busca en pacientes, tratamientos, odontogramas, consentimientos,
    promociones y páginas de la aplicación.

    Los grupos vienen en orden de prioridad; todos salvo pacientes y páginas
    se recortan a los primeros resultados. Una consulta vacía devuelve
    `mostrar_panel=false` sin grupos.
    """
    resultado = BusquedaService(session).buscar(q)
    return resultado.to_dict()
