"""
Tests para la normalización del formulario de paciente.
"""
import pytest
from datetime import date
from pydantic import ValidationError

from app.schemas.paciente import PacienteCreate, PacienteFormulario, PacienteUpdate


class TestPacienteFormulario:
    """Tests para PacienteFormulario."""

    def test_normaliza_en_una_pasada(self):
        formulario = PacienteFormulario(**{
            "nombre_completo": "  Ana Díaz  ",
            "email": " ANA@Example.COM ",
            "embarazo": "Sí",
            "semanas_embarazo": "12",
            "sexo": "F",
            "telefono": "",
            "fecha_inicio": "2024-01-01",
        })

        assert formulario.nombre_completo == "Ana Díaz"
        assert formulario.email == "ana@example.com"
        assert formulario.embarazo == "si"
        assert formulario.semanas_embarazo == 12
        assert formulario.sexo == "femenino"
        assert formulario.telefono is None
        assert formulario.fecha_inicio == date(2024, 1, 1)

    @pytest.mark.parametrize("valor, esperado", [
        ("si", "si"),
        ("NO", "no"),
        (True, "si"),
        (False, "no"),
        ("quizás", None),
        ("", None),
    ])
    def test_embarazo(self, valor, esperado):
        assert PacienteFormulario(embarazo=valor).embarazo == esperado

    def test_semanas_invalidas(self):
        assert PacienteFormulario(semanas_embarazo="abc").semanas_embarazo is None

    def test_semanas_fuera_de_rango(self):
        with pytest.raises(ValidationError):
            PacienteFormulario(semanas_embarazo=50)

    def test_todos_opcionales(self):
        formulario = PacienteFormulario()
        assert formulario.model_dump(exclude_none=True) == {}


class TestPacienteCreateUpdate:
    """Tests para PacienteCreate y PacienteUpdate."""

    def test_nombre_requerido(self):
        with pytest.raises(ValidationError):
            PacienteCreate()

    def test_nombre_en_blanco(self):
        with pytest.raises(ValidationError):
            PacienteCreate(nombre_completo="   ")

    def test_update_solo_campos_enviados(self):
        datos = PacienteUpdate(semanas_embarazo="10").model_dump(exclude_unset=True)
        assert datos == {"semanas_embarazo": 10}
