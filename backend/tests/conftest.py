"""
Fixtures de pytest para tests.
"""
import pytest
from datetime import date
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlmodel.pool import StaticPool

import app.models  # noqa: F401
from app.core.database import get_session
from app.models.usuario import RolEnum
from app.services.auth_service import auth_service
from main import app


# Engine para tests (SQLite en memoria)
@pytest.fixture(name="engine")
def engine_fixture():
    """Crea un engine de test en memoria."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Crea una sesión de test."""
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session):
    """Crea un cliente de test con sesión inyectada."""
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


# ============================================
# TOKENS
# ============================================

def _headers(rol):
    token = auth_service.create_access_token("usuario-test", rol=rol, email="test@clinica.hn")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers_admin():
    return _headers(RolEnum.ADMIN)


@pytest.fixture
def headers_doctor():
    return _headers(RolEnum.DOCTOR)


@pytest.fixture
def headers_staff():
    return _headers(RolEnum.STAFF)


@pytest.fixture
def headers_token():
    """Factory de headers con un rol arbitrario (incluido None o desconocido)."""
    return _headers


# ============================================
# DATOS DE PRUEBA
# ============================================

@pytest.fixture
def paciente_data():
    """Datos de formulario de paciente de prueba."""
    return {
        "nombre_completo": "María López",
        "numero_identidad": "0801-1990-12345",
        "fecha_nacimiento": "1990-05-10",
        "sexo": "femenino",
        "email": "maria@example.com",
        "codigopais": "504",
        "telefono": "99998888",
        "fecha_inicio": "2024-01-01",
        "embarazo": "si",
        "semanas_embarazo": "10",
    }


@pytest.fixture
def crear_paciente(session):
    """Factory fixture para crear pacientes."""
    from app.models.paciente import Paciente

    def _crear_paciente(
        nombre_completo="Paciente Test",
        numero_identidad=None,
        **kwargs
    ):
        paciente = Paciente(
            nombre_completo=nombre_completo,
            numero_identidad=numero_identidad,
            **kwargs
        )
        session.add(paciente)
        session.commit()
        session.refresh(paciente)
        return paciente

    return _crear_paciente


@pytest.fixture
def crear_tratamiento(session):
    """Factory fixture para crear tratamientos del catálogo."""
    from app.models.tratamiento import Tratamiento

    def _crear_tratamiento(nombre="Limpieza dental", codigo="LIM-01", especialidad="Periodoncia", **kwargs):
        tratamiento = Tratamiento(nombre=nombre, codigo=codigo, especialidad=especialidad, **kwargs)
        session.add(tratamiento)
        session.commit()
        session.refresh(tratamiento)
        return tratamiento

    return _crear_tratamiento


@pytest.fixture
def crear_tratamiento_completado(session):
    """Factory fixture para registrar tratamientos realizados."""
    from app.models.tratamiento import TratamientoCompletado

    def _crear(paciente_id, tratamiento_id=None, fecha_completado=date(2024, 3, 1), **kwargs):
        completado = TratamientoCompletado(
            paciente_id=paciente_id,
            tratamiento_id=tratamiento_id,
            fecha_completado=fecha_completado,
            **kwargs
        )
        session.add(completado)
        session.commit()
        session.refresh(completado)
        return completado

    return _crear


@pytest.fixture
def crear_odontograma(session):
    """Factory fixture para crear odontogramas."""
    from app.models.odontograma import Odontograma

    def _crear_odontograma(paciente_id, **kwargs):
        odontograma = Odontograma(paciente_id=paciente_id, **kwargs)
        session.add(odontograma)
        session.commit()
        session.refresh(odontograma)
        return odontograma

    return _crear_odontograma
