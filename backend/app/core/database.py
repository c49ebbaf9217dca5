"""
Configuración de Base de Datos.
Gestión de conexiones y sesiones SQLModel.
"""
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, create_engine, Session
from typing import Generator
from app.config import settings


# Crear engine con configuración según tipo de base de datos
connect_args = {}
if "sqlite" in settings.DATABASE_URL:
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    connect_args=connect_args
)


def create_db_and_tables() -> None:
    """
    Crea todas las tablas en la base de datos.
    Se llama al inicio de la aplicación.
    """
    # Registrar los modelos en el metadata antes de crear
    import app.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session, None, None]:
    """
    Generador de sesiones para dependency injection en FastAPI.

    Uso:
        @router.get("/endpoint")
        def endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session


def check_database_health() -> dict:
    """Verifica la conexión a la base de datos."""
    try:
        with engine.connect() as conexion:
            conexion.execute(text("SELECT 1"))
        return {"status": "healthy"}
    except SQLAlchemyError as e:
        return {"status": "unhealthy", "error": str(e)}
