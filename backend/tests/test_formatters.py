"""
Tests para el formateo de teléfonos.
"""
import pytest

from app.utils.formatters import (
    crear_url_whatsapp,
    formatear_telefono,
    limpiar_telefono,
    separar_codigo_pais,
)


class TestTelefonos:
    """Tests para las funciones de teléfono."""

    def test_limpiar_telefono(self):
        assert limpiar_telefono("(504) 9999-8888") == "50499998888"
        assert limpiar_telefono(None) == ""

    @pytest.mark.parametrize("numero, codigo, esperado", [
        ("9999-8888", "504", "https://wa.me/50499998888"),
        ("+504 9999 8888", None, "https://wa.me/50499998888"),
        ("99998888", None, "https://wa.me/99998888"),
        (None, "504", "#"),
        ("", None, "#"),
    ])
    def test_url_whatsapp(self, numero, codigo, esperado):
        assert crear_url_whatsapp(numero, codigo) == esperado

    @pytest.mark.parametrize("numero, codigo, esperado", [
        ("99998888", "504", "+504 99998888"),
        ("+50499998888", None, "+50499998888"),
        ("50499998888", None, "+50499998888"),
        ("99998888", None, "99998888"),
        ("", None, ""),
    ])
    def test_formatear_telefono(self, numero, codigo, esperado):
        assert formatear_telefono(numero, codigo) == esperado

    @pytest.mark.parametrize("numero, codigo, esperado", [
        ("+504 9999-8888", None, ("504", "9999-8888")),
        ("+1 555 1234", None, ("1", "555 1234")),
        ("99998888", None, ("504", "99998888")),
        ("9999", "52", ("52", "9999")),
        (None, None, ("504", "")),
    ])
    def test_separar_codigo_pais(self, numero, codigo, esperado):
        assert separar_codigo_pais(numero, codigo) == esperado
