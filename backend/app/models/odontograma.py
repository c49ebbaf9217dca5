"""
Modelos de Odontograma y Consentimiento.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import date, datetime
import uuid

from app.models.enums import EstadoConsentimientoEnum


class Odontograma(SQLModel, table=True):
    """Diagrama dental de un paciente."""
    __tablename__ = "odontogramas"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    paciente_id: str = Field(foreign_key="pacientes.paciente_id", index=True)
    datos: Optional[str] = Field(default=None)  # JSON con el estado por pieza
    notas: Optional[str] = Field(default=None)
    creado_por: Optional[str] = Field(default=None)
    activo: bool = Field(default=True)
    fecha_actualizacion: datetime = Field(default_factory=datetime.utcnow)


class Consentimiento(SQLModel, table=True):
    """Consentimiento informado firmado (o pendiente) por un paciente."""
    __tablename__ = "consentimientos"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    paciente_id: str = Field(foreign_key="pacientes.paciente_id", index=True)
    tipo_consentimiento: Optional[str] = Field(default=None)
    nombre_consentimiento: Optional[str] = Field(default=None)
    descripcion: Optional[str] = Field(default=None)
    estado: EstadoConsentimientoEnum = Field(default=EstadoConsentimientoEnum.PENDIENTE)
    fecha_consentimiento: Optional[date] = Field(default=None)
    firma_url: Optional[str] = Field(default=None)
