"""
Tests para el endpoint de búsqueda global.
"""
from datetime import date
from fastapi import status


def _grupo(result, nombre):
    for grupo in result["grupos"]:
        if grupo["nombre"] == nombre:
            return grupo
    return None


class TestBusquedaAPI:
    """Tests para /api/busqueda."""

    def test_sin_token(self, client):
        response = client.get("/api/busqueda", params={"q": "maria"})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_consulta_vacia(self, client, headers_staff):
        response = client.get("/api/busqueda", params={"q": "   "}, headers=headers_staff)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"mostrar_panel": False, "total": 0, "grupos": []}

    def test_sin_parametro(self, client, headers_staff):
        result = client.get("/api/busqueda", headers=headers_staff).json()
        assert result["mostrar_panel"] is False

    def test_paciente_centrico(
        self, client, headers_staff, crear_paciente, crear_tratamiento, crear_tratamiento_completado
    ):
        maria = crear_paciente(nombre_completo="María Pérez", numero_identidad="0801")
        crear_paciente(nombre_completo="Ana", email="mariana@example.com")
        limpieza = crear_tratamiento()
        crear_tratamiento_completado(maria.paciente_id, tratamiento_id=limpieza.id)

        response = client.get("/api/busqueda", params={"q": "MARÍA"}, headers=headers_staff)
        assert response.status_code == status.HTTP_200_OK

        result = response.json()
        assert result["mostrar_panel"] is True
        assert result["grupos"][0]["nombre"] == "paciente_centrico"

        centrico = _grupo(result, "paciente_centrico")["items"]
        assert [c["paciente"]["nombre_completo"] for c in centrico] == ["María Pérez"]
        assert centrico[0]["es_coincidencia_directa"] is True
        assert centrico[0]["campos_coincidentes"] == ["nombre_completo"]
        assert len(centrico[0]["tratamientos_completados"]) == 1

    def test_orden_por_puntaje(self, client, headers_staff, crear_paciente):
        crear_paciente(nombre_completo="Ana", email="maria@example.com")
        crear_paciente(nombre_completo="Maria Gómez")

        result = client.get("/api/busqueda", params={"q": "maria"}, headers=headers_staff).json()

        nombres = [c["paciente"]["nombre_completo"] for c in _grupo(result, "paciente_centrico")["items"]]
        assert nombres == ["Maria Gómez", "Ana"]

    def test_paginas(self, client, headers_staff):
        result = client.get("/api/busqueda", params={"q": "odontograma"}, headers=headers_staff).json()

        paginas = _grupo(result, "paginas")
        assert paginas is not None
        assert paginas["items"][0]["href"] == "/odontogram"

    def test_grupo_recortado(self, client, headers_staff, crear_tratamiento):
        for i in range(5):
            crear_tratamiento(nombre=f"Corona {i}", codigo=f"COR-{i}")

        result = client.get("/api/busqueda", params={"q": "corona"}, headers=headers_staff).json()

        tratamientos = _grupo(result, "tratamientos")
        assert tratamientos["total"] == 5
        assert len(tratamientos["items"]) == 3

    def test_paciente_con_la_forma_de_la_api_de_pacientes(self, client, headers_staff, crear_paciente):
        """Test el paciente de la búsqueda coincide con el de /api/pacientes/{id}."""
        paciente = crear_paciente(
            nombre_completo="Lucia Mejia",
            sexo="femenino",
            embarazo="si",
            semanas_embarazo=10,
            fecha_inicio=date(2020, 1, 1),
            embarazo_activo=True,
            documentos_urls='["a.pdf"]',
        )

        result = client.get("/api/busqueda", params={"q": "lucia"}, headers=headers_staff).json()
        desde_busqueda = _grupo(result, "paciente_centrico")["items"][0]["paciente"]
        desde_ficha = client.get(f"/api/pacientes/{paciente.paciente_id}", headers=headers_staff).json()

        assert desde_busqueda["embarazo_activo"] is False
        assert desde_busqueda["embarazo_fecha_fin"] == desde_ficha["embarazo_fecha_fin"] == "2020-07-29"
        assert desde_busqueda["documentos_urls"] == desde_ficha["documentos_urls"] == ["a.pdf"]
