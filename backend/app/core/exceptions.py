"""
Excepciones personalizadas del sistema.
Proporciona excepciones semánticas para mejor manejo de errores.

Las funciones de dominio (embarazo, permisos, búsqueda) son totales y no
lanzan excepciones; estas clases cubren la capa de datos y la API.
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class BaseAppException(Exception):
    """
    Excepción base de la aplicación.
    Todas las excepciones personalizadas heredan de esta.
    """
    def __init__(self, message: str, code: str = "ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# ============================================
# ERRORES DE VALIDACIÓN
# ============================================

class ValidationError(BaseAppException):
    """Error de validación de datos."""
    def __init__(self, message: str):
        super().__init__(message, "VALIDATION_ERROR")


# ============================================
# ERRORES DE NO ENCONTRADO
# ============================================

class NotFoundError(BaseAppException):
    """Recurso no encontrado."""
    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"{resource} con identificador '{identifier}' no encontrado",
            "NOT_FOUND"
        )
        self.resource = resource
        self.identifier = identifier


class PacienteNotFoundError(NotFoundError):
    """Paciente no encontrado."""
    def __init__(self, paciente_id: str):
        super().__init__("Paciente", paciente_id)


class PacienteDuplicadoError(ValidationError):
    """Ya existe un paciente con el mismo número de identidad."""
    def __init__(self, numero_identidad: str):
        super().__init__(
            f"Ya existe un paciente con número de identidad '{numero_identidad}'"
        )
        self.numero_identidad = numero_identidad


# ============================================
# MANEJADORES HTTP
# ============================================

def _respuesta_error(status_code: int, exc: BaseAppException) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "detail": exc.message},
    )


def registrar_manejadores(app: FastAPI) -> None:
    """Registra los manejadores de excepciones de dominio en la aplicación."""

    @app.exception_handler(NotFoundError)
    async def _manejar_no_encontrado(request: Request, exc: NotFoundError):
        return _respuesta_error(status.HTTP_404_NOT_FOUND, exc)

    @app.exception_handler(ValidationError)
    async def _manejar_validacion(request: Request, exc: ValidationError):
        return _respuesta_error(status.HTTP_400_BAD_REQUEST, exc)
