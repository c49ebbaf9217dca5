"""
Dependencies de autenticación para FastAPI.
Provee dependencies para proteger endpoints por permiso o por ruta.
"""
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.contexto import ContextoSesion
from app.core.rbac_service import rbac_service
from app.models.usuario import PermisoEnum, UsuarioSesion
from app.schemas.auth_schemas import TokenPayload
from app.services.auth_service import auth_service


# Esquema de seguridad Bearer
security = HTTPBearer(auto_error=False)


class AuthError(HTTPException):
    """Excepción personalizada de autenticación."""
    def __init__(self, detail: str, status_code: int = status.HTTP_401_UNAUTHORIZED):
        super().__init__(
            status_code=status_code,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class PermissionError(HTTPException):
    """Excepción de permisos insuficientes."""
    def __init__(self, detail: str = "No tienes permisos para realizar esta acción"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


# ============================================
# DEPENDENCIES BÁSICAS
# ============================================

async def get_token_payload(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenPayload:
    """Valida el bearer token. Lanza 401 si falta o no es válido."""
    if not credentials:
        raise AuthError("No se proporcionó token de autenticación")

    payload = auth_service.decode_token(credentials.credentials)

    if not payload:
        raise AuthError("Token inválido o expirado")

    if payload.type != "access":
        raise AuthError("Tipo de token inválido")

    return payload


async def get_current_user(
    payload: TokenPayload = Depends(get_token_payload),
) -> UsuarioSesion:
    """Obtiene el usuario actual autenticado."""
    return auth_service.usuario_desde_payload(payload)


async def get_contexto_sesion(
    payload: TokenPayload = Depends(get_token_payload),
) -> ContextoSesion:
    """
    Contexto de sesión del request: rol efectivo, capacidades y
    preferencias de interfaz (claims `tutoriales_vistos` y `tema`).
    """
    usuario = auth_service.usuario_desde_payload(payload)
    extras = payload.model_extra or {}
    tutoriales = extras.get("tutoriales_vistos")

    return ContextoSesion.desde_usuario(
        usuario,
        tutoriales_vistos=tutoriales if isinstance(tutoriales, list) else None,
        tema=extras.get("tema"),
    )


# ============================================
# DEPENDENCY FACTORIES PARA PERMISOS
# ============================================

def require_permissions(*permisos: PermisoEnum):
    """
    Factory que crea una dependency que requiere ciertos permisos.
    El usuario debe tener TODOS los permisos especificados.

    Uso:
        @router.post("/", dependencies=[Depends(require_permissions(PermisoEnum.PACIENTE_CREAR))])
        def crear():
            ...
    """
    async def permission_checker(
        current_user: UsuarioSesion = Depends(get_current_user)
    ) -> UsuarioSesion:
        if not current_user.tiene_todos_permisos(list(permisos)):
            raise PermissionError(
                f"Permisos requeridos: {', '.join(p.value for p in permisos)}"
            )
        return current_user

    return permission_checker


def require_route_access(ruta: str):
    """
    Factory que crea una dependency que exige acceso a una ruta de la
    aplicación según la tabla de rutas del RBAC.
    """
    async def route_checker(
        current_user: UsuarioSesion = Depends(get_current_user)
    ) -> UsuarioSesion:
        if not rbac_service.puede_acceder_ruta(current_user.rol, ruta):
            raise PermissionError(f"No tienes acceso a la ruta: {ruta}")
        return current_user

    return route_checker
