"""
Schemas de Paciente.

El formulario de historia clínica tiene decenas de campos opcionales en
texto libre. `PacienteFormulario` los declara todos y los normaliza en una
sola pasada al entrar, en lugar de leerlos campo por campo.
"""
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, List, Optional
from datetime import date, datetime

from app.models.enums import EmbarazoEnum, SexoEnum


_VALORES_SI = {"si", "sí", "s", "yes", "true", "1", "on"}
_VALORES_NO = {"no", "n", "false", "0", "off"}


def _normalizar_embarazo(valor: Any) -> Optional[str]:
    if valor is None:
        return None
    if isinstance(valor, bool):
        return EmbarazoEnum.SI.value if valor else EmbarazoEnum.NO.value
    texto = str(valor).strip().lower()
    if texto in _VALORES_SI:
        return EmbarazoEnum.SI.value
    if texto in _VALORES_NO:
        return EmbarazoEnum.NO.value
    return None


def _normalizar_semanas(valor: Any) -> Optional[int]:
    if valor is None or isinstance(valor, bool):
        return None
    if isinstance(valor, int):
        return valor
    try:
        return int(float(str(valor).strip()))
    except (ValueError, OverflowError):
        return None


def _normalizar_sexo(valor: Any) -> Optional[str]:
    if valor is None:
        return None
    texto = str(valor).strip().lower()
    if texto in ("f", "femenino", "mujer"):
        return SexoEnum.FEMENINO.value
    if texto in ("m", "masculino", "hombre"):
        return SexoEnum.MASCULINO.value
    return texto or None


class PacienteFormulario(BaseModel):
    """Payload del formulario de paciente. Todos los campos son opcionales."""

    model_config = ConfigDict(use_enum_values=True)

    # Datos personales
    nombre_completo: Optional[str] = Field(default=None, max_length=200)
    numero_identidad: Optional[str] = None
    codigo_interno: Optional[str] = None
    fecha_nacimiento: Optional[date] = None
    sexo: Optional[str] = None
    email: Optional[str] = None
    codigopais: Optional[str] = None
    telefono: Optional[str] = None
    direccion: Optional[str] = None
    ocupacion: Optional[str] = None

    # Contactos
    contacto_emergencia: Optional[str] = None
    codigopaisemergencia: Optional[str] = None
    contacto_telefono: Optional[str] = None
    representante_nombre: Optional[str] = None
    codigopaisrepresentante: Optional[str] = None
    rep_celular: Optional[str] = None

    # Antecedentes médicos
    fecha_inicio: Optional[date] = None
    motivo_consulta: Optional[str] = None
    enfermedades: Optional[str] = None
    alergias: Optional[str] = None
    medicamentos: Optional[str] = None
    embarazo: Optional[EmbarazoEnum] = None
    semanas_embarazo: Optional[int] = Field(default=None, ge=0, le=45)

    # Hábitos
    fuma: Optional[str] = None
    consume_alcohol: Optional[str] = None
    bruxismo: Optional[str] = None
    frecuencia_cepillado: Optional[str] = None

    # Examen dental
    examen_encias: Optional[str] = None
    examen_lengua: Optional[str] = None
    examen_oclusion: Optional[str] = None
    observaciones_examen: Optional[str] = None

    # Documentos
    documentos_urls: Optional[List[str]] = None
    firma_url: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def normalizar(cls, datos: Any) -> Any:
        """Recorta strings, convierte vacíos en None y normaliza valores de opción."""
        if not isinstance(datos, dict):
            return datos

        normalizados = {}
        for campo, valor in datos.items():
            if isinstance(valor, str):
                valor = valor.strip()
                if valor == "":
                    valor = None
            normalizados[campo] = valor

        if "embarazo" in normalizados:
            normalizados["embarazo"] = _normalizar_embarazo(normalizados["embarazo"])
        if "semanas_embarazo" in normalizados:
            normalizados["semanas_embarazo"] = _normalizar_semanas(normalizados["semanas_embarazo"])
        if "sexo" in normalizados:
            normalizados["sexo"] = _normalizar_sexo(normalizados["sexo"])
        if "email" in normalizados and normalizados["email"]:
            normalizados["email"] = normalizados["email"].lower()

        return normalizados


class PacienteCreate(PacienteFormulario):
    """Schema para crear un nuevo paciente."""

    nombre_completo: str = Field(..., min_length=1, max_length=200)


class PacienteUpdate(PacienteFormulario):
    """Schema para actualizar un paciente (solo se aplican los campos enviados)."""
    pass


class PacienteResponse(BaseModel):
    """Schema de respuesta de paciente."""

    paciente_id: str
    nombre_completo: str
    numero_identidad: Optional[str] = None
    codigo_interno: Optional[str] = None
    fecha_nacimiento: Optional[date] = None
    sexo: Optional[str] = None
    email: Optional[str] = None
    codigopais: Optional[str] = None
    telefono: Optional[str] = None
    direccion: Optional[str] = None
    ocupacion: Optional[str] = None

    contacto_emergencia: Optional[str] = None
    codigopaisemergencia: Optional[str] = None
    contacto_telefono: Optional[str] = None
    representante_nombre: Optional[str] = None
    codigopaisrepresentante: Optional[str] = None
    rep_celular: Optional[str] = None

    fecha_inicio: Optional[date] = None
    motivo_consulta: Optional[str] = None
    enfermedades: Optional[str] = None
    alergias: Optional[str] = None
    medicamentos: Optional[str] = None
    embarazo: Optional[str] = None
    semanas_embarazo: Optional[int] = None
    embarazo_activo: bool = False
    embarazo_fecha_fin: Optional[date] = None
    categoria_embarazo_visible: bool = False

    fuma: Optional[str] = None
    consume_alcohol: Optional[str] = None
    bruxismo: Optional[str] = None
    frecuencia_cepillado: Optional[str] = None

    examen_encias: Optional[str] = None
    examen_lengua: Optional[str] = None
    examen_oclusion: Optional[str] = None
    observaciones_examen: Optional[str] = None

    documentos_urls: List[str] = []
    firma_url: Optional[str] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EstadoEmbarazoResponse(BaseModel):
    """Estado de embarazo calculado (forma externa)."""
    fechaFin: str
    semanasRestantes: int
    estaActivo: bool
    semanasTranscurridas: int


class TipoPacienteResponse(BaseModel):
    categoria: str
    etiqueta: str
    sexo: str
    edad: Optional[int] = None


class SeveridadResponse(BaseModel):
    nivel: str
    puntaje: int
    condiciones: List[str] = []


class CategoriaRegistroResponse(BaseModel):
    es_historico: bool
    esta_archivado: bool
    categoria: str


class ClasificacionPacienteResponse(BaseModel):
    """Clasificación completa de un paciente para la ficha."""
    paciente_id: str
    tipo: TipoPacienteResponse
    severidad: SeveridadResponse
    registro: CategoriaRegistroResponse
    embarazo: EstadoEmbarazoResponse
