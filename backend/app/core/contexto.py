"""
Contexto de sesión por request.

Reúne el usuario autenticado, su rol efectivo, las capacidades resueltas y
las preferencias de interfaz. Se construye en cada request a partir del
token; no hay estado global compartido entre usuarios.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Set

from app.core.rbac_service import rbac_service
from app.models.usuario import PermisoEnum, RolEnum, UsuarioSesion


TEMAS_VALIDOS = ("light", "dark")


@dataclass
class ContextoSesion:
    usuario_id: str
    rol: RolEnum
    permisos: Dict[str, bool]
    tutoriales_vistos: Set[str] = field(default_factory=set)
    tema: str = "light"

    @classmethod
    def desde_usuario(
        cls,
        usuario: UsuarioSesion,
        tutoriales_vistos: Optional[Iterable[str]] = None,
        tema: Optional[str] = None,
    ) -> "ContextoSesion":
        return cls(
            usuario_id=usuario.id,
            rol=usuario.rol,
            permisos=rbac_service.resolver_permisos(usuario.rol),
            tutoriales_vistos=set(tutoriales_vistos or ()),
            tema=tema if tema in TEMAS_VALIDOS else "light",
        )

    def tiene_permiso(self, permiso: PermisoEnum) -> bool:
        return self.permisos.get(permiso.value, False)

    def puede_acceder_ruta(self, ruta: str) -> bool:
        return rbac_service.puede_acceder_ruta(self.rol, ruta)

    def marcar_tutorial_visto(self, nombre: str) -> None:
        self.tutoriales_vistos.add(nombre)

    def tutorial_visto(self, nombre: str) -> bool:
        return nombre in self.tutoriales_vistos
