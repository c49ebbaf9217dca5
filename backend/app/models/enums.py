"""
Enumeraciones del sistema.
Centralizadas para evitar imports circulares.
"""
from enum import Enum


class SexoEnum(str, Enum):
    """Sexo registrado en la historia clínica."""
    FEMENINO = "femenino"
    MASCULINO = "masculino"


class EmbarazoEnum(str, Enum):
    """Respuesta del formulario a la pregunta de embarazo."""
    SI = "si"
    NO = "no"


class CategoriaPacienteEnum(str, Enum):
    """Categoría de edad del paciente."""
    MENOR = "menor"        # 0-17 años
    ADULTO = "adulto"      # 18-59 años
    TERCERA = "3ra"        # 60-79 años
    CUARTA = "4ta"         # 80+ años


class NivelSeveridadEnum(str, Enum):
    """Nivel de severidad de condiciones médicas."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    PREGNANCY = "pregnancy"
    NONE = "none"


class CategoriaRegistroEnum(str, Enum):
    """Categoría de la historia clínica."""
    HISTORICAL = "historical"
    ACTIVE = "active"
    ARCHIVED = "archived"


class EstadoConsentimientoEnum(str, Enum):
    """Estado de un consentimiento informado."""
    PENDIENTE = "pendiente"
    FIRMADO = "firmado"
    REVOCADO = "revocado"
