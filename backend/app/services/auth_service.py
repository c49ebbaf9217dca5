"""
Servicio de Autenticación.
Emisión y validación de JWT. Los usuarios viven en el proveedor de
identidad; aquí solo se interpreta el token que este emite.
"""
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Union

from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError

from app.config import settings
from app.core.rbac_service import rbac_service
from app.models.usuario import RolEnum, UsuarioSesion
from app.schemas.auth_schemas import TokenPayload
from app.utils.logger import get_logger

logger = get_logger("auth")


class AuthService:
    """Servicio de autenticación."""

    def __init__(self):
        self.secret_key = settings.JWT_SECRET_KEY
        self.algorithm = settings.JWT_ALGORITHM
        self.access_token_expire = timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

    # ============================================
    # JWT TOKENS
    # ============================================

    def create_access_token(
        self,
        usuario_id: str,
        rol: Union[RolEnum, str, None] = None,
        email: Optional[str] = None,
        nombre_completo: Optional[str] = None,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """Crea un access token JWT (herramientas locales y tests)."""
        ahora = datetime.utcnow()
        payload: Dict[str, Any] = {
            "sub": usuario_id,
            "email": email,
            "nombre_completo": nombre_completo,
            "exp": ahora + (expires_delta or self.access_token_expire),
            "iat": ahora,
            "type": "access",
        }
        if rol is not None:
            payload[settings.JWT_CLAIM_ROL] = rol.value if isinstance(rol, RolEnum) else rol

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Optional[TokenPayload]:
        """Decodifica y valida un JWT token."""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm]
            )
            return TokenPayload(**payload)
        except JWTError as e:
            logger.debug(f"Token rechazado: {e}")
            return None
        except PydanticValidationError:
            logger.debug("Token con claims incompletos")
            return None

    # ============================================
    # USUARIO
    # ============================================

    def usuario_desde_payload(self, payload: TokenPayload) -> UsuarioSesion:
        """
        Construye el usuario de sesión a partir de los claims.

        El rol es una etiqueta opaca del proveedor: se normaliza y, si falta o
        no se reconoce, se usa el rol por defecto.
        """
        extras = payload.model_extra or {}
        rol = extras.get(settings.JWT_CLAIM_ROL)

        return UsuarioSesion(
            id=payload.sub,
            email=payload.email,
            nombre_completo=payload.nombre_completo,
            rol=rbac_service.normalizar_rol(rol),
        )


# Instancia global del servicio
auth_service = AuthService()
