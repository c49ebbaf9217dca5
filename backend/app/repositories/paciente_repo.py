"""
Repository de Paciente.
"""
from typing import Optional, List
from sqlmodel import Session, select

from app.repositories.base import BaseRepository
from app.models.paciente import Paciente


class PacienteRepository(BaseRepository[Paciente]):
    """Repository para operaciones de pacientes."""

    def __init__(self, session: Session):
        super().__init__(session, Paciente)

    def obtener_todos(self) -> List[Paciente]:
        """Obtiene todos los pacientes ordenados por nombre."""
        query = select(Paciente).order_by(Paciente.nombre_completo)
        return list(self.session.exec(query).all())

    def obtener_por_numero_identidad(self, numero_identidad: str) -> Optional[Paciente]:
        """
        Obtiene un paciente por su número de identidad.

        Args:
            numero_identidad: Documento de identidad

        Returns:
            El paciente o None
        """
        query = select(Paciente).where(Paciente.numero_identidad == numero_identidad)
        return self.session.exec(query).first()
