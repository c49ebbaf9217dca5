"""
Modelos de datos del sistema.
Re-exporta todos los modelos para imports simplificados.
"""
from app.models.enums import (
    SexoEnum,
    EmbarazoEnum,
    CategoriaPacienteEnum,
    NivelSeveridadEnum,
    CategoriaRegistroEnum,
    EstadoConsentimientoEnum,
)

from app.models.paciente import Paciente
from app.models.tratamiento import Tratamiento, TratamientoCompletado, Promocion
from app.models.odontograma import Odontograma, Consentimiento
from app.models.usuario import UsuarioSesion, RolEnum, PermisoEnum, PERMISOS_POR_ROL

__all__ = [
    # Enums
    "SexoEnum",
    "EmbarazoEnum",
    "CategoriaPacienteEnum",
    "NivelSeveridadEnum",
    "CategoriaRegistroEnum",
    "EstadoConsentimientoEnum",
    "RolEnum",
    "PermisoEnum",
    "PERMISOS_POR_ROL",
    # Models
    "Paciente",
    "Tratamiento",
    "TratamientoCompletado",
    "Promocion",
    "Odontograma",
    "Consentimiento",
    "UsuarioSesion",
]
