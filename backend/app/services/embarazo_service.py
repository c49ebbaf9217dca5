"""
Servicio de estado de embarazo.

Calcula la semana gestacional actual, la fecha estimada de término y si el
embarazo sigue activo a partir de la fecha de inicio de consulta y las
semanas de embarazo reportadas en esa consulta.

Todas las funciones son puras respecto de `hoy`: con la misma fecha y los
mismos datos devuelven siempre el mismo resultado. Entradas inválidas o
incompletas producen un estado inactivo en cero, nunca una excepción.
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Mapping, Optional, Union

from app.config import settings
from app.models.enums import EmbarazoEnum, SexoEnum


FechaEntrada = Union[str, date, datetime, None]


@dataclass(frozen=True)
class EstadoEmbarazo:
    """Resultado del cálculo de estado de embarazo."""
    fecha_fin: str = ""
    semanas_restantes: int = 0
    esta_activo: bool = False
    semanas_transcurridas: int = 0

    def to_dict(self) -> dict:
        """Forma externa que consume el frontend."""
        return {
            "fechaFin": self.fecha_fin,
            "semanasRestantes": self.semanas_restantes,
            "estaActivo": self.esta_activo,
            "semanasTranscurridas": self.semanas_transcurridas,
        }


ESTADO_INACTIVO = EstadoEmbarazo()


# ============================================
# NORMALIZACIÓN DE ENTRADAS
# ============================================

def parsear_fecha(valor: FechaEntrada) -> Optional[date]:
    """
    Convierte la entrada a una fecha de calendario (sin hora).

    Acepta `date`, `datetime` (se trunca al día) o string ISO
    (`YYYY-MM-DD` o un datetime ISO, del que se toma la fecha).

    Returns:
        La fecha, o None si la entrada falta o no se puede interpretar
    """
    if valor is None:
        return None
    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date):
        return valor
    if not isinstance(valor, str):
        return None

    texto = valor.strip()
    if not texto:
        return None
    try:
        return date.fromisoformat(texto[:10])
    except ValueError:
        return None


def parsear_semanas(valor: Any) -> int:
    """Convierte las semanas a entero; cualquier valor inválido cuenta como 0."""
    if valor is None or isinstance(valor, bool):
        return 0
    if isinstance(valor, int):
        return valor
    if not isinstance(valor, (float, str)):
        return 0
    try:
        return int(float(valor))
    except (ValueError, OverflowError):
        return 0


# ============================================
# CÁLCULO
# ============================================

def calcular_estado_embarazo(
    fecha_inicio: FechaEntrada,
    semanas_embarazo: Any,
    hoy: Optional[date] = None,
) -> EstadoEmbarazo:
    """
    Calcula el estado del embarazo.

    La concepción se estima retrocediendo `semanas_embarazo` semanas desde la
    fecha de consulta; el término es la concepción más 40 semanas. La semana
    actual es la de la consulta más las semanas completas transcurridas
    desde entonces.

    Args:
        fecha_inicio: Fecha de inicio de consulta
        semanas_embarazo: Semanas de embarazo al momento de la consulta
        hoy: Fecha de referencia (por defecto, la fecha local actual)

    Returns:
        EstadoEmbarazo; inactivo en cero si falta la fecha o semanas <= 0

    Examples:
        >>> calcular_estado_embarazo("2024-01-01", 10, hoy=date(2024, 1, 1))
        EstadoEmbarazo(fecha_fin='2024-07-29', semanas_restantes=30, esta_activo=True, semanas_transcurridas=10)
    """
    fecha_consulta = parsear_fecha(fecha_inicio)
    semanas = parsear_semanas(semanas_embarazo)

    if fecha_consulta is None or semanas <= 0:
        return ESTADO_INACTIVO

    if hoy is None:
        hoy = date.today()
    elif isinstance(hoy, datetime):
        hoy = hoy.date()

    total_semanas = settings.SEMANAS_GESTACION_TOTAL

    dias_transcurridos = (hoy - fecha_consulta).days
    semanas_desde_consulta = dias_transcurridos // 7
    semana_actual = semanas + semanas_desde_consulta

    fecha_concepcion = fecha_consulta - timedelta(weeks=semanas)
    fecha_fin = fecha_concepcion + timedelta(weeks=total_semanas)

    return EstadoEmbarazo(
        fecha_fin=fecha_fin.isoformat(),
        semanas_restantes=max(0, total_semanas - semana_actual),
        esta_activo=semana_actual < total_semanas and hoy <= fecha_fin,
        semanas_transcurridas=semana_actual,
    )


def _embarazo_declarado(datos: Mapping[str, Any]) -> bool:
    valor = datos.get("embarazo")
    if isinstance(valor, EmbarazoEnum):
        valor = valor.value
    return valor == EmbarazoEnum.SI.value


def actualizar_estado_embarazo(
    datos: Mapping[str, Any],
    hoy: Optional[date] = None,
) -> dict:
    """
    Recalcula los campos derivados de embarazo sobre un registro de paciente.

    Devuelve un diccionario nuevo; el original no se modifica. Debe
    ejecutarse cada vez que cambia `embarazo`, `fecha_inicio` o
    `semanas_embarazo`.

    Args:
        datos: Registro del paciente (o datos del formulario)
        hoy: Fecha de referencia

    Returns:
        Copia de `datos` con `embarazo_activo` y `embarazo_fecha_fin` sobrescritos
    """
    actualizado = dict(datos)

    if (
        not _embarazo_declarado(datos)
        or not datos.get("fecha_inicio")
        or not datos.get("semanas_embarazo")
    ):
        actualizado["embarazo_activo"] = False
        actualizado["embarazo_fecha_fin"] = None
        return actualizado

    estado = calcular_estado_embarazo(
        datos.get("fecha_inicio"),
        datos.get("semanas_embarazo"),
        hoy=hoy,
    )
    actualizado["embarazo_fecha_fin"] = estado.fecha_fin
    actualizado["embarazo_activo"] = estado.esta_activo
    return actualizado


def aplicar_estado_embarazo(paciente, hoy: Optional[date] = None):
    """
    Recalcula en sitio los campos derivados de un modelo `Paciente`.

    Returns:
        El mismo paciente, para encadenar
    """
    fuente = {
        "embarazo": paciente.embarazo,
        "fecha_inicio": paciente.fecha_inicio,
        "semanas_embarazo": paciente.semanas_embarazo,
    }
    derivado = actualizar_estado_embarazo(fuente, hoy=hoy)

    paciente.embarazo_activo = derivado["embarazo_activo"]
    paciente.embarazo_fecha_fin = parsear_fecha(derivado["embarazo_fecha_fin"])
    return paciente


def debe_mostrar_categoria_embarazo(paciente: Any) -> bool:
    """Indica si el paciente debe mostrarse en la categoría de embarazo."""
    if isinstance(paciente, Mapping):
        obtener = paciente.get
    else:
        def obtener(campo):
            return getattr(paciente, campo, None)

    embarazo = obtener("embarazo")
    sexo = obtener("sexo")
    if isinstance(embarazo, EmbarazoEnum):
        embarazo = embarazo.value
    if isinstance(sexo, SexoEnum):
        sexo = sexo.value

    return (
        embarazo == EmbarazoEnum.SI.value
        and obtener("embarazo_activo") is True
        and sexo == SexoEnum.FEMENINO.value
    )
