"""
Servicio RBAC (Role-Based Access Control).
Resuelve las capacidades de un rol y autoriza rutas del frontend.

Es una consulta pura sobre tablas estáticas: no bloquea la navegación,
solo responde si algo está permitido. La aplicación de la regla vive en
las dependencies de `app.core.auth_dependencies`.
"""
from typing import Dict, Optional, Union

from app.config import settings
from app.models.usuario import RolEnum, PermisoEnum, PERMISOS_POR_ROL
from app.utils.logger import get_logger

logger = get_logger("rbac")


# ============================================
# MAPEO DE RUTAS A PERMISOS
# ============================================

# El orden importa: en la coincidencia por prefijo gana la primera entrada.
RUTAS_PERMISOS: tuple[tuple[str, PermisoEnum], ...] = (
    ("/dashboard", PermisoEnum.DASHBOARD_VER),
    ("/pacientes", PermisoEnum.PACIENTE_VER),
    ("/patient-form", PermisoEnum.PACIENTE_CREAR),
    ("/patient-preview", PermisoEnum.PACIENTE_PREVIEW_VER),
    ("/odontogram", PermisoEnum.ODONTOGRAMA_VER),
    ("/tratamientos", PermisoEnum.TRATAMIENTO_VER),
    ("/tratamientos-completados", PermisoEnum.TRATAMIENTO_COMPLETADO_VER),
    ("/consentimientos", PermisoEnum.CONSENTIMIENTO_VER),
    ("/calendario", PermisoEnum.CALENDARIO_VER),
    ("/menu-navegacion", PermisoEnum.MENU_NAVEGACION_VER),
    ("/doctores", PermisoEnum.DOCTORES_GESTIONAR),
    ("/admin", PermisoEnum.USUARIOS_GESTIONAR),
    ("/admin/users", PermisoEnum.USUARIOS_GESTIONAR),
)

_RUTAS_EXACTAS: Dict[str, PermisoEnum] = dict(RUTAS_PERMISOS)


# ============================================
# FUNCIONES DE AUTORIZACIÓN
# ============================================

class RBACService:
    """Servicio de autorización por rol."""

    @staticmethod
    def normalizar_rol(rol: Union[RolEnum, str, None]) -> RolEnum:
        """
        Convierte el rol recibido del proveedor de identidad a `RolEnum`.

        Un rol desconocido o ausente cae al rol por defecto (staff, el de
        menor privilegio).
        """
        if isinstance(rol, RolEnum):
            return rol

        por_defecto = RolEnum(settings.ROL_POR_DEFECTO)
        if not isinstance(rol, str):
            return por_defecto

        try:
            return RolEnum(rol.strip().lower())
        except ValueError:
            logger.debug(f"Rol desconocido '{rol}', se usa '{por_defecto.value}'")
            return por_defecto

    @staticmethod
    def permisos_de_rol(rol: Union[RolEnum, str, None]) -> frozenset[PermisoEnum]:
        """Conjunto de permisos del rol."""
        return PERMISOS_POR_ROL[RBACService.normalizar_rol(rol)]

    @staticmethod
    def resolver_permisos(rol: Union[RolEnum, str, None]) -> Dict[str, bool]:
        """
        Resuelve las capacidades de un rol como objeto de forma fija.

        Returns:
            Diccionario con cada permiso existente como clave y un booleano
        """
        permisos = RBACService.permisos_de_rol(rol)
        return {permiso.value: permiso in permisos for permiso in PermisoEnum}

    @staticmethod
    def tiene_permiso(rol: Union[RolEnum, str, None], permiso: PermisoEnum) -> bool:
        """Verifica si un rol tiene un permiso."""
        return permiso in RBACService.permisos_de_rol(rol)

    @staticmethod
    def permiso_para_ruta(ruta: str) -> Optional[PermisoEnum]:
        """
        Busca el permiso que protege una ruta.

        Primero coincidencia exacta; luego por prefijo con separador `/`
        (así `/admin` no cubre `/administration`), ganando la primera
        entrada de la tabla.
        """
        if not isinstance(ruta, str) or not ruta:
            return None

        if ruta in _RUTAS_EXACTAS:
            return _RUTAS_EXACTAS[ruta]

        for prefijo, permiso in RUTAS_PERMISOS:
            if ruta.startswith(prefijo + "/"):
                return permiso

        return None

    @staticmethod
    def puede_acceder_ruta(rol: Union[RolEnum, str, None], ruta: str) -> bool:
        """
        Verifica si un rol puede acceder a una ruta.

        - admin: siempre
        - resto: según el permiso de la ruta; ruta no mapeada se niega
        """
        rol_normalizado = RBACService.normalizar_rol(rol)
        if rol_normalizado == RolEnum.ADMIN:
            return True

        permiso = RBACService.permiso_para_ruta(ruta)
        if permiso is None:
            return False

        return permiso in PERMISOS_POR_ROL[rol_normalizado]


# ============================================
# INSTANCIA SINGLETON
# ============================================

rbac_service = RBACService()
