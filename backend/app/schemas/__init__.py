"""
Schemas Pydantic para validación y serialización.
"""
from app.schemas.paciente import (
    PacienteFormulario,
    PacienteCreate,
    PacienteUpdate,
    PacienteResponse,
    ClasificacionPacienteResponse,
)
from app.schemas.auth_schemas import (
    TokenPayload,
    PermisosResponse,
    AccesoRutaResponse,
)
from app.schemas.busqueda import ResultadoBusquedaResponse

__all__ = [
    # Paciente
    "PacienteFormulario",
    "PacienteCreate",
    "PacienteUpdate",
    "PacienteResponse",
    "ClasificacionPacienteResponse",
    # Auth
    "TokenPayload",
    "PermisosResponse",
    "AccesoRutaResponse",
    # Búsqueda
    "ResultadoBusquedaResponse",
]
