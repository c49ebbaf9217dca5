"""
Utilidades compartidas del sistema.
"""
from app.utils.helpers import (
    crear_paciente_response,
    safe_json_loads,
    safe_json_dumps,
)
from app.utils.formatters import (
    formatear_telefono,
    crear_url_whatsapp,
    separar_codigo_pais,
)
from app.utils.logger import configurar_logging, enmascarar, get_logger, logger

__all__ = [
    "crear_paciente_response",
    "safe_json_loads",
    "safe_json_dumps",
    "formatear_telefono",
    "crear_url_whatsapp",
    "separar_codigo_pais",
    "configurar_logging",
    "enmascarar",
    "get_logger",
    "logger",
]
