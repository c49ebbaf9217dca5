"""
Servicio de clasificación de pacientes.

Categoría por edad (menor, adulto, 3ra y 4ta edad) y nivel de severidad
de las condiciones médicas para advertencias en la ficha del paciente.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Mapping, Optional

from app.models.enums import (
    CategoriaPacienteEnum,
    EmbarazoEnum,
    NivelSeveridadEnum,
    SexoEnum,
)
from app.services.embarazo_service import parsear_fecha
from app.utils.constants import (
    ALERGIAS_SEVERAS,
    ENFERMEDADES_CRITICAS,
    ENFERMEDADES_RIESGO_VITAL,
    UMBRALES_SEVERIDAD,
)


ETIQUETAS_CATEGORIA = {
    CategoriaPacienteEnum.MENOR: "Menor",
    CategoriaPacienteEnum.ADULTO: "Adulto",
    CategoriaPacienteEnum.TERCERA: "3ra",
    CategoriaPacienteEnum.CUARTA: "4ta",
}

# Condiciones registradas en SeveridadInfo.condiciones
CONDICION_CRITICA = "critical"
CONDICION_ALERGIA = "severe-allergy"
CONDICION_MEDICAMENTOS = "multiple-meds"
CONDICION_EMBARAZO = "pregnancy"


@dataclass(frozen=True)
class TipoPacienteInfo:
    categoria: CategoriaPacienteEnum
    etiqueta: str
    sexo: str
    edad: Optional[int] = None


@dataclass(frozen=True)
class SeveridadInfo:
    nivel: NivelSeveridadEnum
    puntaje: int = 0
    condiciones: List[str] = field(default_factory=list)


def _campo(paciente: Any, nombre: str) -> Any:
    if isinstance(paciente, Mapping):
        return paciente.get(nombre)
    return getattr(paciente, nombre, None)


def _texto_minusculas(valor: Any) -> str:
    if valor is None:
        return ""
    if hasattr(valor, "value"):
        valor = valor.value
    return str(valor).lower()


def calcular_edad(fecha_nacimiento: Any, hoy: Optional[date] = None) -> Optional[int]:
    """
    Edad en años cumplidos.

    Returns:
        La edad, o None si la fecha falta o no se puede interpretar
    """
    nacimiento = parsear_fecha(fecha_nacimiento)
    if nacimiento is None:
        return None
    if hoy is None:
        hoy = date.today()

    edad = hoy.year - nacimiento.year
    if (hoy.month, hoy.day) < (nacimiento.month, nacimiento.day):
        edad -= 1
    return edad


def obtener_tipo_paciente(paciente: Any, hoy: Optional[date] = None) -> TipoPacienteInfo:
    """Categoría de edad del paciente; con edad desconocida se asume adulto."""
    edad = calcular_edad(_campo(paciente, "fecha_nacimiento"), hoy=hoy)
    sexo = (
        SexoEnum.FEMENINO.value
        if _texto_minusculas(_campo(paciente, "sexo")) == SexoEnum.FEMENINO.value
        else SexoEnum.MASCULINO.value
    )

    if edad is None:
        categoria = CategoriaPacienteEnum.ADULTO
    elif edad < 18:
        categoria = CategoriaPacienteEnum.MENOR
    elif edad >= 80:
        categoria = CategoriaPacienteEnum.CUARTA
    elif edad >= 60:
        categoria = CategoriaPacienteEnum.TERCERA
    else:
        categoria = CategoriaPacienteEnum.ADULTO

    return TipoPacienteInfo(
        categoria=categoria,
        etiqueta=ETIQUETAS_CATEGORIA[categoria],
        sexo=sexo,
        edad=edad,
    )


def _peso_por_edad(edad: Optional[int]) -> int:
    if edad is None:
        return 0
    if edad >= 80:
        return 3
    if edad >= 60:
        return 2
    if edad < 18:
        return 1
    return 0


def calcular_severidad(paciente: Any, hoy: Optional[date] = None) -> SeveridadInfo:
    """
    Nivel de severidad de las condiciones del paciente.

    Puntaje:
        - Edad: 80+ suma 3, 60+ suma 2, menor de 18 suma 1
        - Enfermedad crítica: +3 (una de riesgo vital es `critical` directo)
        - Alergia severa: +2
        - Medicamentos: 3 o más +2, 2 +1
        - Paciente femenina embarazada: +3

    Si el embarazo es la única condición el nivel es `pregnancy`; si no,
    se aplican los umbrales 6/4/2/1 (critical/high/medium/low).
    """
    edad = calcular_edad(_campo(paciente, "fecha_nacimiento"), hoy=hoy)
    puntaje = _peso_por_edad(edad)
    condiciones: List[str] = []

    enfermedades = _texto_minusculas(_campo(paciente, "enfermedades"))
    if enfermedades:
        if any(enfermedad in enfermedades for enfermedad in ENFERMEDADES_RIESGO_VITAL):
            return SeveridadInfo(
                nivel=NivelSeveridadEnum.CRITICAL,
                puntaje=puntaje,
                condiciones=[CONDICION_CRITICA],
            )
        if any(enfermedad in enfermedades for enfermedad in ENFERMEDADES_CRITICAS):
            puntaje += 3
            condiciones.append(CONDICION_CRITICA)

    alergias = _texto_minusculas(_campo(paciente, "alergias"))
    if alergias and any(alergia in alergias for alergia in ALERGIAS_SEVERAS):
        puntaje += 2
        condiciones.append(CONDICION_ALERGIA)

    medicamentos = _texto_minusculas(_campo(paciente, "medicamentos"))
    if medicamentos:
        cantidad = len(medicamentos.split(","))
        if cantidad >= 3:
            puntaje += 2
            condiciones.append(CONDICION_MEDICAMENTOS)
        elif cantidad >= 2:
            puntaje += 1
            condiciones.append(CONDICION_MEDICAMENTOS)

    if (
        _texto_minusculas(_campo(paciente, "sexo")) == SexoEnum.FEMENINO.value
        and _texto_minusculas(_campo(paciente, "embarazo")) == EmbarazoEnum.SI.value
    ):
        puntaje += 3
        condiciones.append(CONDICION_EMBARAZO)

    if condiciones == [CONDICION_EMBARAZO]:
        return SeveridadInfo(nivel=NivelSeveridadEnum.PREGNANCY, puntaje=puntaje, condiciones=condiciones)

    for umbral, nivel in UMBRALES_SEVERIDAD:
        if puntaje >= umbral:
            return SeveridadInfo(nivel=NivelSeveridadEnum(nivel), puntaje=puntaje, condiciones=condiciones)

    return SeveridadInfo(nivel=NivelSeveridadEnum.NONE, puntaje=puntaje, condiciones=condiciones)
