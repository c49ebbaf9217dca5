"""
Services de lógica de negocio.
Contienen la lógica principal del sistema.
"""
from app.services.embarazo_service import (
    EstadoEmbarazo,
    calcular_estado_embarazo,
    actualizar_estado_embarazo,
    debe_mostrar_categoria_embarazo,
)
from app.services.busqueda_service import BusquedaService, buscar, buscar_global
from app.services.paciente_service import PacienteService

__all__ = [
    "EstadoEmbarazo",
    "calcular_estado_embarazo",
    "actualizar_estado_embarazo",
    "debe_mostrar_categoria_embarazo",
    "BusquedaService",
    "buscar",
    "buscar_global",
    "PacienteService",
]
