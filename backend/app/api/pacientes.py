"""
Endpoints de Pacientes.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import List
import logging

from app.core.auth_dependencies import require_permissions, require_route_access
from app.core.database import get_session
from app.models.usuario import PermisoEnum, UsuarioSesion
from app.schemas.paciente import (
    PacienteCreate,
    PacienteUpdate,
    PacienteResponse,
    ClasificacionPacienteResponse,
)
from app.services.paciente_service import PacienteService
from app.utils.helpers import crear_paciente_response

router = APIRouter()
logger = logging.getLogger("clinica_dental.api.pacientes")


@router.get("", response_model=List[PacienteResponse])
def listar_pacientes(
    session: Session = Depends(get_session),
    current_user: UsuarioSesion = Depends(require_permissions(PermisoEnum.PACIENTE_VER)),
):
    """Lista todos los pacientes con el estado de embarazo al día."""
    service = PacienteService(session)
    return [crear_paciente_response(p) for p in service.listar()]


@router.post("", response_model=PacienteResponse, status_code=201)
def crear_paciente(
    paciente_data: PacienteCreate,
    session: Session = Depends(get_session),
    current_user: UsuarioSesion = Depends(require_permissions(PermisoEnum.PACIENTE_CREAR)),
):
    """Registra una nueva historia clínica."""
    service = PacienteService(session)
    paciente = service.crear(paciente_data)
    logger.info(f"Paciente {paciente.paciente_id} creado por {current_user.id}")
    return crear_paciente_response(paciente)


@router.get("/{paciente_id}", response_model=PacienteResponse)
def obtener_paciente(
    paciente_id: str,
    session: Session = Depends(get_session),
    current_user: UsuarioSesion = Depends(require_permissions(PermisoEnum.PACIENTE_VER)),
):
    """Obtiene un paciente por ID."""
    service = PacienteService(session)
    return crear_paciente_response(service.obtener(paciente_id))


@router.patch("/{paciente_id}", response_model=PacienteResponse)
def actualizar_paciente(
    paciente_id: str,
    paciente_data: PacienteUpdate,
    session: Session = Depends(get_session),
    current_user: UsuarioSesion = Depends(require_permissions(PermisoEnum.PACIENTE_CREAR)),
):
    """
    Actualiza los campos enviados de la historia clínica.

    `embarazo_activo` y `embarazo_fecha_fin` se recalculan siempre.
    """
    service = PacienteService(session)
    return crear_paciente_response(service.actualizar(paciente_id, paciente_data))


@router.get("/{paciente_id}/clasificacion", response_model=ClasificacionPacienteResponse)
def clasificar_paciente(
    paciente_id: str,
    session: Session = Depends(get_session),
    current_user: UsuarioSesion = Depends(require_route_access("/patient-preview")),
):
    """Tipo por edad, severidad, categoría de registro y estado de embarazo."""
    service = PacienteService(session)
    return service.clasificar(paciente_id)
