"""
Categoría de la historia clínica: histórica, activa o archivada.

Una historia es histórica cuando la consulta inicial es anterior al
lanzamiento de la aplicación (transcrita de un registro físico). Se archiva
cuando el último tratamiento tiene más de `ANIOS_ARCHIVO` años.
"""
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from app.config import settings
from app.models.enums import CategoriaRegistroEnum
from app.services.embarazo_service import parsear_fecha


@dataclass(frozen=True)
class CategoriaRegistro:
    es_historico: bool
    esta_archivado: bool
    categoria: CategoriaRegistroEnum


def _restar_anios(fecha: date, anios: int) -> date:
    try:
        return fecha.replace(year=fecha.year - anios)
    except ValueError:
        # 29 de febrero en un año no bisiesto
        return fecha.replace(year=fecha.year - anios, day=28)


def es_registro_historico(
    fecha_inicio_consulta: Any,
    fecha_lanzamiento: Optional[date] = None,
    habilitado: Optional[bool] = None,
) -> bool:
    """Consulta estrictamente anterior al lanzamiento. Fecha faltante o inválida: False."""
    if habilitado is None:
        habilitado = settings.HISTORICO_HABILITADO
    if not habilitado:
        return False

    fecha_consulta = parsear_fecha(fecha_inicio_consulta)
    if fecha_consulta is None:
        return False

    if fecha_lanzamiento is None:
        fecha_lanzamiento = settings.FECHA_LANZAMIENTO_APP
    return fecha_consulta < fecha_lanzamiento


def debe_archivarse(fecha_ultimo_tratamiento: Any, hoy: Optional[date] = None) -> bool:
    """Último tratamiento hace más de `settings.ANIOS_ARCHIVO` años."""
    ultimo = parsear_fecha(fecha_ultimo_tratamiento)
    if ultimo is None:
        return False
    if hoy is None:
        hoy = date.today()
    return ultimo < _restar_anios(hoy, settings.ANIOS_ARCHIVO)


def obtener_categoria_registro(
    fecha_inicio_consulta: Any,
    fecha_ultimo_tratamiento: Any = None,
    hoy: Optional[date] = None,
) -> CategoriaRegistro:
    """Histórica tiene prioridad sobre archivada; si no es ninguna, activa."""
    es_historico = es_registro_historico(fecha_inicio_consulta)
    esta_archivado = debe_archivarse(fecha_ultimo_tratamiento, hoy=hoy)

    if es_historico:
        categoria = CategoriaRegistroEnum.HISTORICAL
    elif esta_archivado:
        categoria = CategoriaRegistroEnum.ARCHIVED
    else:
        categoria = CategoriaRegistroEnum.ACTIVE

    return CategoriaRegistro(
        es_historico=es_historico,
        esta_archivado=esta_archivado,
        categoria=categoria,
    )
