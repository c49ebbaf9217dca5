"""
Configuración centralizada de la aplicación.
Todas las configuraciones en un solo lugar para fácil mantenimiento.
"""
from datetime import date
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Configuración principal del sistema."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # ============================================
    # APLICACIÓN
    # ============================================
    APP_TITLE: str = "Clínica Dental"
    APP_DESCRIPTION: str = "Backend de gestión de pacientes, búsqueda y permisos de la clínica"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    DEBUG: bool = False

    # ============================================
    # BASE DE DATOS
    # ============================================
    DATABASE_URL: str = "sqlite:///./clinica_dental.db"

    # ============================================
    # CORS
    # ============================================
    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = ["*"]
    CORS_ALLOW_HEADERS: List[str] = ["*"]

    # ============================================
    # AUTENTICACIÓN (proveedor de identidad externo)
    # ============================================
    JWT_SECRET_KEY: str = "cambiar-en-produccion"
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_CLAIM_ROL: str = "role"
    ROL_POR_DEFECTO: str = "staff"

    # ============================================
    # EMBARAZO
    # ============================================
    SEMANAS_GESTACION_TOTAL: int = 40

    # ============================================
    # BÚSQUEDA
    # ============================================
    BUSQUEDA_LIMITE_GRUPO: int = 3

    # ============================================
    # REGISTROS HISTÓRICOS
    # ============================================
    FECHA_LANZAMIENTO_APP: date = date(2026, 2, 2)
    HISTORICO_HABILITADO: bool = True
    ANIOS_ARCHIVO: int = 5

    # ============================================
    # LOGGING
    # ============================================
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


# Instancia global de configuración
settings = Settings()
