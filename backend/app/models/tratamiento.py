"""
Modelos de Tratamiento, Tratamiento Completado y Promoción.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import date, datetime
import uuid


class Tratamiento(SQLModel, table=True):
    """Tratamiento del catálogo de la clínica."""
    __tablename__ = "tratamientos"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    nombre: str = Field(index=True)
    codigo: Optional[str] = Field(default=None, index=True)
    especialidad: Optional[str] = Field(default=None)
    precio: float = Field(default=0.0)
    veces_realizado: int = Field(default=0)
    activo: bool = Field(default=True)


class Promocion(SQLModel, table=True):
    """Promoción u oferta vigente."""
    __tablename__ = "promociones"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    titulo: str
    descripcion: Optional[str] = Field(default=None)
    descuento: Optional[str] = Field(default=None)
    tipo: Optional[str] = Field(default=None)
    codigo: Optional[str] = Field(default=None)
    fecha_inicio: Optional[date] = Field(default=None)
    fecha_fin: Optional[date] = Field(default=None)
    activa: bool = Field(default=True)


class TratamientoCompletado(SQLModel, table=True):
    """
    Tratamiento realizado a un paciente.

    Para la búsqueda se expone con el paciente, el tratamiento y la promoción
    embebidos (ver `TratamientoCompletadoRepository.obtener_todos_expandidos`).
    """
    __tablename__ = "tratamientos_completados"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    paciente_id: str = Field(foreign_key="pacientes.paciente_id", index=True)
    tratamiento_id: Optional[str] = Field(default=None, foreign_key="tratamientos.id")
    promocion_id: Optional[str] = Field(default=None, foreign_key="promociones.id")
    notas: Optional[str] = Field(default=None)
    monto: float = Field(default=0.0)
    fecha_completado: Optional[date] = Field(default=None)
    firma_url: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=datetime.utcnow)
