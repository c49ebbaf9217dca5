"""
Funciones auxiliares compartidas.
"""
from typing import Dict, Any, Optional
import json

from sqlmodel import SQLModel


def safe_json_loads(value: Any, default: Any = None) -> Any:
    """
    Parsea una lista JSON de manera segura.

    Args:
        value: Valor a parsear
        default: Valor por defecto si falla

    Returns:
        Lista parseada o default
    """
    if default is None:
        default = []

    if not value:
        return default

    if isinstance(value, list):
        return value

    if isinstance(value, str):
        try:
            parsed = json.loads(value)
            return parsed if isinstance(parsed, list) else default
        except (json.JSONDecodeError, TypeError, ValueError):
            return default

    return default


def safe_json_dumps(value: Any) -> str:
    """
    Convierte una lista a JSON string de manera segura.

    Args:
        value: Valor a convertir

    Returns:
        String JSON ("[]" si no es serializable)
    """
    if value is None:
        return "[]"

    if isinstance(value, str):
        try:
            json.loads(value)
            return value
        except (json.JSONDecodeError, ValueError):
            return "[]"

    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return "[]"


def modelo_a_dict(modelo: Optional[SQLModel]) -> Dict[str, Any]:
    """Convierte un modelo SQLModel en un diccionario plano (vacío si es None)."""
    if modelo is None:
        return {}
    return modelo.model_dump()


def crear_paciente_response(paciente: Any) -> Dict[str, Any]:
    """
    Crea el diccionario de respuesta para un paciente.

    Incluye los campos derivados de embarazo tal como están en el modelo
    (el llamador debe haberlos recalculado) y las URLs de documentos
    como lista.
    """
    from app.schemas.paciente import PacienteResponse
    from app.services.embarazo_service import debe_mostrar_categoria_embarazo

    datos = paciente.model_dump()
    datos["documentos_urls"] = safe_json_loads(paciente.documentos_urls)
    datos["categoria_embarazo_visible"] = debe_mostrar_categoria_embarazo(paciente)

    return PacienteResponse(**datos).model_dump()
