"""
Schemas de autenticación.
Payload del token del proveedor de identidad y respuestas de permisos.
"""
from pydantic import BaseModel, ConfigDict
from typing import Dict, List, Optional

from app.models.usuario import RolEnum


# ============================================
# TOKEN
# ============================================

class TokenPayload(BaseModel):
    """
    Claims del access token.

    El rol viaja en el claim configurado en `settings.JWT_CLAIM_ROL`, por lo
    que se permiten claims adicionales.
    """
    model_config = ConfigDict(extra="allow")

    sub: str
    email: Optional[str] = None
    nombre_completo: Optional[str] = None
    exp: Optional[int] = None
    iat: Optional[int] = None
    type: str = "access"


# ============================================
# RESPONSE SCHEMAS
# ============================================

class PermisosResponse(BaseModel):
    """Rol efectivo y capacidades del usuario autenticado."""
    usuario_id: str
    rol: RolEnum
    permisos: Dict[str, bool]
    tutoriales_vistos: List[str] = []
    tema: str = "light"


class AccesoRutaResponse(BaseModel):
    ruta: str
    permitido: bool
