"""
Schemas de la búsqueda global.
"""
from pydantic import BaseModel
from typing import Any, List


class GrupoBusquedaResponse(BaseModel):
    """Grupo de resultados. `total` cuenta todas las coincidencias, `items` las mostradas."""
    nombre: str
    total: int
    items: List[Any]


class ResultadoBusquedaResponse(BaseModel):
    mostrar_panel: bool
    total: int
    grupos: List[GrupoBusquedaResponse] = []
