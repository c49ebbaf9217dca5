"""
Tests para endpoints de pacientes.
"""
from datetime import date, timedelta
from fastapi import status


def _fecha_fin_esperada(fecha_inicio: date, semanas: int) -> str:
    return (fecha_inicio - timedelta(weeks=semanas) + timedelta(weeks=40)).isoformat()


class TestCrearPaciente:
    """Tests para crear pacientes."""

    def test_crear_paciente_embarazada(self, client, headers_doctor, paciente_data):
        """Test los derivados de embarazo se calculan al crear."""
        hoy = date.today()
        paciente_data["fecha_inicio"] = hoy.isoformat()

        response = client.post("/api/pacientes", json=paciente_data, headers=headers_doctor)
        assert response.status_code == status.HTTP_201_CREATED

        result = response.json()
        assert result["nombre_completo"] == "María López"
        assert result["embarazo"] == "si"
        assert result["semanas_embarazo"] == 10
        assert result["embarazo_activo"] is True
        assert result["embarazo_fecha_fin"] == _fecha_fin_esperada(hoy, 10)
        assert result["categoria_embarazo_visible"] is True

    def test_derivados_del_cliente_se_ignoran(self, client, headers_doctor, paciente_data):
        paciente_data["embarazo"] = "no"
        paciente_data["embarazo_activo"] = True
        paciente_data["embarazo_fecha_fin"] = "2030-01-01"

        result = client.post("/api/pacientes", json=paciente_data, headers=headers_doctor).json()

        assert result["embarazo_activo"] is False
        assert result["embarazo_fecha_fin"] is None

    def test_staff_no_puede_crear(self, client, headers_staff, paciente_data):
        response = client.post("/api/pacientes", json=paciente_data, headers=headers_staff)
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_sin_token(self, client, paciente_data):
        response = client.post("/api/pacientes", json=paciente_data)
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_identidad_duplicada(self, client, headers_doctor, paciente_data):
        client.post("/api/pacientes", json=paciente_data, headers=headers_doctor)

        response = client.post("/api/pacientes", json=paciente_data, headers=headers_doctor)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_nombre_requerido(self, client, headers_doctor):
        response = client.post("/api/pacientes", json={"nombre_completo": ""}, headers=headers_doctor)
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_documentos_como_lista(self, client, headers_doctor):
        data = {"nombre_completo": "Luis", "documentos_urls": ["a.pdf", "b.pdf"]}

        result = client.post("/api/pacientes", json=data, headers=headers_doctor).json()

        assert result["documentos_urls"] == ["a.pdf", "b.pdf"]


class TestLeerPacientes:
    """Tests para listar y obtener pacientes."""

    def test_listar(self, client, headers_staff, crear_paciente):
        crear_paciente(nombre_completo="Zoe")
        crear_paciente(nombre_completo="Ana")

        response = client.get("/api/pacientes", headers=headers_staff)

        assert response.status_code == status.HTTP_200_OK
        assert [p["nombre_completo"] for p in response.json()] == ["Ana", "Zoe"]

    def test_no_encontrado(self, client, headers_staff):
        response = client.get("/api/pacientes/no-existe", headers=headers_staff)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"] == "NOT_FOUND"

    def test_recalcula_al_leer(self, client, headers_staff, crear_paciente):
        """Test un embarazo guardado como activo se corrige al leerlo."""
        paciente = crear_paciente(
            nombre_completo="Rosa",
            sexo="femenino",
            embarazo="si",
            semanas_embarazo=10,
            fecha_inicio=date(2020, 1, 1),
            embarazo_activo=True,
        )

        result = client.get(f"/api/pacientes/{paciente.paciente_id}", headers=headers_staff).json()

        assert result["embarazo_activo"] is False
        assert result["embarazo_fecha_fin"] == "2020-07-29"
        assert result["categoria_embarazo_visible"] is False

    def test_recalcula_al_listar(self, client, headers_staff, crear_paciente):
        crear_paciente(
            nombre_completo="Rosa",
            embarazo="si",
            semanas_embarazo=10,
            fecha_inicio=date(2020, 1, 1),
            embarazo_activo=True,
        )

        result = client.get("/api/pacientes", headers=headers_staff).json()

        assert result[0]["embarazo_activo"] is False


class TestActualizarPaciente:
    """Tests para actualizar pacientes."""

    def test_quitar_embarazo(self, client, headers_doctor, paciente_data):
        paciente_data["fecha_inicio"] = date.today().isoformat()
        creado = client.post("/api/pacientes", json=paciente_data, headers=headers_doctor).json()

        response = client.patch(
            f"/api/pacientes/{creado['paciente_id']}",
            json={"embarazo": "no"},
            headers=headers_doctor,
        )

        assert response.status_code == status.HTTP_200_OK
        result = response.json()
        assert result["embarazo_activo"] is False
        assert result["embarazo_fecha_fin"] is None
        assert result["semanas_embarazo"] == 10

    def test_cambiar_semanas(self, client, headers_doctor, paciente_data):
        hoy = date.today()
        paciente_data["fecha_inicio"] = hoy.isoformat()
        creado = client.post("/api/pacientes", json=paciente_data, headers=headers_doctor).json()

        result = client.patch(
            f"/api/pacientes/{creado['paciente_id']}",
            json={"semanas_embarazo": 20},
            headers=headers_doctor,
        ).json()

        assert result["embarazo_fecha_fin"] == _fecha_fin_esperada(hoy, 20)
        assert result["embarazo_activo"] is True

    def test_solo_campos_enviados(self, client, headers_doctor, paciente_data):
        creado = client.post("/api/pacientes", json=paciente_data, headers=headers_doctor).json()

        result = client.patch(
            f"/api/pacientes/{creado['paciente_id']}",
            json={"telefono": "33334444"},
            headers=headers_doctor,
        ).json()

        assert result["telefono"] == "33334444"
        assert result["email"] == "maria@example.com"

    def test_no_encontrado(self, client, headers_doctor):
        response = client.patch("/api/pacientes/no-existe", json={}, headers=headers_doctor)
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestClasificacion:
    """Tests para /api/pacientes/{id}/clasificacion."""

    def test_clasificacion(self, client, headers_staff, crear_paciente, crear_tratamiento_completado):
        paciente = crear_paciente(
            nombre_completo="Don Pedro",
            sexo="masculino",
            fecha_nacimiento=date(1930, 1, 1),
            enfermedades="Hipertensión",
            fecha_inicio=date(2015, 3, 1),
        )
        crear_tratamiento_completado(paciente.paciente_id, fecha_completado=date(2016, 1, 1))

        response = client.get(f"/api/pacientes/{paciente.paciente_id}/clasificacion", headers=headers_staff)
        assert response.status_code == status.HTTP_200_OK

        result = response.json()
        assert result["tipo"]["categoria"] == "4ta"
        assert result["severidad"]["nivel"] == "critical"
        assert result["severidad"]["puntaje"] == 6
        assert result["registro"]["categoria"] == "historical"
        assert result["registro"]["esta_archivado"] is True
        assert result["embarazo"] == {
            "fechaFin": "",
            "semanasRestantes": 0,
            "estaActivo": False,
            "semanasTranscurridas": 0,
        }

    def test_clasificacion_sin_token(self, client, crear_paciente):
        paciente = crear_paciente()

        response = client.get(f"/api/pacientes/{paciente.paciente_id}/clasificacion")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
