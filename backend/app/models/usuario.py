"""
Roles, permisos y usuario autenticado.

La identidad la administra un proveedor externo; aquí solo se modela el rol
que viaja en el token y la tabla estática de capacidades por rol.
"""

from typing import Optional, List
from enum import Enum
from pydantic import BaseModel


# ============================================
# ENUMS
# ============================================

class RolEnum(str, Enum):
    """
    Roles disponibles en el sistema.

    - ADMIN: acceso total, incluida la gestión de usuarios
    - DOCTOR: acceso clínico completo, sin gestión de usuarios
    - STAFF: recepción; rol por defecto y de menor privilegio
    """
    ADMIN = "admin"
    DOCTOR = "doctor"
    STAFF = "staff"


class PermisoEnum(str, Enum):
    """Capacidades por rol. Los valores son las claves que consume el frontend."""

    # Paneles
    DASHBOARD_VER = "canViewDashboard"
    MENU_NAVEGACION_VER = "canViewMenuNavegacion"

    # Pacientes
    PACIENTE_VER = "canViewPatients"
    PACIENTE_CREAR = "canCreatePatients"
    PACIENTE_PREVIEW_VER = "canViewPatientPreview"

    # Clínica
    ODONTOGRAMA_VER = "canViewOdontogram"
    TRATAMIENTO_VER = "canViewTreatments"
    TRATAMIENTO_COMPLETADO_VER = "canViewCompletedTreatments"
    CONSENTIMIENTO_VER = "canViewConsentimientos"

    # Agenda
    CALENDARIO_VER = "canViewCalendar"

    # Administración
    DOCTORES_GESTIONAR = "canManageDoctores"
    USUARIOS_GESTIONAR = "canManageUsers"


# ============================================
# PERMISOS POR ROL
# ============================================

PERMISOS_POR_ROL: dict[RolEnum, frozenset[PermisoEnum]] = {
    # Administración: todos los permisos
    RolEnum.ADMIN: frozenset(PermisoEnum),

    # Doctor: todo excepto la gestión de usuarios
    RolEnum.DOCTOR: frozenset(PermisoEnum) - {PermisoEnum.USUARIOS_GESTIONAR},

    # Staff: sin dashboard, sin crear pacientes, sin odontograma,
    # catálogo de tratamientos ni consentimientos
    RolEnum.STAFF: frozenset({
        PermisoEnum.PACIENTE_VER,
        PermisoEnum.PACIENTE_PREVIEW_VER,
        PermisoEnum.TRATAMIENTO_COMPLETADO_VER,
        PermisoEnum.CALENDARIO_VER,
        PermisoEnum.MENU_NAVEGACION_VER,
        PermisoEnum.DOCTORES_GESTIONAR,
    }),
}


# ============================================
# USUARIO AUTENTICADO
# ============================================

class UsuarioSesion(BaseModel):
    """Usuario tal como lo describe el token del proveedor de identidad."""

    id: str
    email: Optional[str] = None
    nombre_completo: Optional[str] = None
    rol: RolEnum = RolEnum.STAFF

    @property
    def permisos(self) -> frozenset[PermisoEnum]:
        """Obtiene los permisos basados en el rol."""
        return PERMISOS_POR_ROL.get(self.rol, PERMISOS_POR_ROL[RolEnum.STAFF])

    def tiene_permiso(self, permiso: PermisoEnum) -> bool:
        """Verifica si el usuario tiene un permiso específico."""
        return permiso in self.permisos

    def tiene_todos_permisos(self, permisos: List[PermisoEnum]) -> bool:
        """Verifica si el usuario tiene todos los permisos."""
        return set(permisos).issubset(self.permisos)
