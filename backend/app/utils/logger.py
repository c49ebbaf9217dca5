"""
Configuración de logging del sistema.

Las historias clínicas contienen datos personales. Identidades, teléfonos
y textos de búsqueda se escriben en los logs pasando por `enmascarar()`.
"""
import logging
from typing import Any, Optional

from app.config import settings

LOGGER_RAIZ = "clinica_dental"


def configurar_logging(nivel: Optional[str] = None) -> logging.Logger:
    """
    Configura y retorna el logger raíz de la aplicación.

    Args:
        nivel: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Logger `clinica_dental` con un handler de consola
    """
    nivel_num = getattr(logging, (nivel or settings.LOG_LEVEL).upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_RAIZ)
    logger.setLevel(nivel_num)

    # Un solo handler aunque se llame varias veces
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)

    return logger


logger = configurar_logging()


def get_logger(nombre: str) -> logging.Logger:
    """Logger hijo de `clinica_dental` para un área de la aplicación."""
    return logging.getLogger(f'{LOGGER_RAIZ}.{nombre}')


def enmascarar(valor: Any, visibles: int = 2) -> str:
    """
    Oculta un dato personal dejando visibles solo los primeros caracteres.

    >>> enmascarar("0801-1990-12345")
    '08*************'
    >>> enmascarar(None)
    ''
    """
    if valor is None:
        return ""
    texto = str(valor)
    if len(texto) <= visibles:
        return "*" * len(texto)
    return texto[:visibles] + "*" * (len(texto) - visibles)
