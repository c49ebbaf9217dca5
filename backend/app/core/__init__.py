"""
Módulo core: funcionalidades centrales del sistema.
"""
from app.core.database import create_db_and_tables, get_session, engine
from app.core.exceptions import (
    BaseAppException,
    ValidationError,
    NotFoundError,
    PacienteNotFoundError,
    PacienteDuplicadoError,
)

__all__ = [
    "create_db_and_tables",
    "get_session",
    "engine",
    "BaseAppException",
    "ValidationError",
    "NotFoundError",
    "PacienteNotFoundError",
    "PacienteDuplicadoError",
]
