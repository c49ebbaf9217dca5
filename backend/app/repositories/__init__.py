"""
Repositories de acceso a datos.
"""
from app.repositories.base import BaseRepository
from app.repositories.paciente_repo import PacienteRepository
from app.repositories.clinica_repo import (
    TratamientoRepository,
    PromocionRepository,
    TratamientoCompletadoRepository,
    OdontogramaRepository,
    ConsentimientoRepository,
)

__all__ = [
    "BaseRepository",
    "PacienteRepository",
    "TratamientoRepository",
    "PromocionRepository",
    "TratamientoCompletadoRepository",
    "OdontogramaRepository",
    "ConsentimientoRepository",
]
