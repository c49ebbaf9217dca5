"""
Servicio de Pacientes.

Alta, edición y consulta de historias clínicas. Los campos derivados de
embarazo se recalculan en cada lectura y escritura, por lo que nunca se
devuelven valores obsoletos.
"""
from datetime import date, datetime
from typing import List, Optional

from sqlmodel import Session

from app.core.exceptions import PacienteDuplicadoError, PacienteNotFoundError
from app.models.enums import EmbarazoEnum
from app.models.paciente import Paciente
from app.repositories import PacienteRepository, TratamientoCompletadoRepository
from app.schemas.paciente import PacienteCreate, PacienteUpdate
from app.services.clasificacion_service import calcular_severidad, obtener_tipo_paciente
from app.services.embarazo_service import (
    ESTADO_INACTIVO,
    aplicar_estado_embarazo,
    calcular_estado_embarazo,
)
from app.services.registro_service import obtener_categoria_registro
from app.utils.helpers import safe_json_dumps
from app.utils.logger import enmascarar, get_logger

logger = get_logger("pacientes")


class PacienteService:
    """Servicio de gestión de pacientes."""

    def __init__(self, session: Session, hoy: Optional[date] = None):
        self.session = session
        self.hoy = hoy
        self.repo = PacienteRepository(session)
        self.completado_repo = TratamientoCompletadoRepository(session)

    def _refrescar_embarazo(self, paciente: Paciente) -> bool:
        """Recalcula los derivados de embarazo. Indica si cambiaron."""
        antes = (paciente.embarazo_activo, paciente.embarazo_fecha_fin)
        aplicar_estado_embarazo(paciente, hoy=self.hoy)
        return antes != (paciente.embarazo_activo, paciente.embarazo_fecha_fin)

    def _verificar_identidad_unica(self, numero_identidad: Optional[str], paciente_id: Optional[str] = None):
        if not numero_identidad:
            return
        existente = self.repo.obtener_por_numero_identidad(numero_identidad)
        if existente and existente.paciente_id != paciente_id:
            logger.warning(f"Identidad duplicada {enmascarar(numero_identidad)} (paciente {existente.paciente_id})")
            raise PacienteDuplicadoError(numero_identidad)

    # ============================================
    # LECTURA
    # ============================================

    def obtener(self, paciente_id: str) -> Paciente:
        paciente = self.repo.obtener_por_id(paciente_id)
        if not paciente:
            raise PacienteNotFoundError(paciente_id)

        if self._refrescar_embarazo(paciente):
            self.repo.guardar(paciente)
        return paciente

    def listar(self) -> List[Paciente]:
        pacientes = self.repo.obtener_todos()

        cambiados = [p for p in pacientes if self._refrescar_embarazo(p)]
        if cambiados:
            for paciente in cambiados:
                self.session.add(paciente)
            self.session.commit()
            logger.info(f"Estado de embarazo actualizado en {len(cambiados)} pacientes")
            for paciente in cambiados:
                self.session.refresh(paciente)
        return pacientes

    # ============================================
    # ESCRITURA
    # ============================================

    def crear(self, datos: PacienteCreate) -> Paciente:
        self._verificar_identidad_unica(datos.numero_identidad)

        campos = datos.model_dump(exclude={"documentos_urls"})
        paciente = Paciente(**campos)
        paciente.documentos_urls = safe_json_dumps(datos.documentos_urls or [])
        self._refrescar_embarazo(paciente)

        paciente = self.repo.guardar(paciente)
        logger.info(f"Paciente creado: {paciente.paciente_id}")
        return paciente

    def actualizar(self, paciente_id: str, datos: PacienteUpdate) -> Paciente:
        paciente = self.repo.obtener_por_id(paciente_id)
        if not paciente:
            raise PacienteNotFoundError(paciente_id)

        cambios = datos.model_dump(exclude_unset=True)
        if "numero_identidad" in cambios:
            self._verificar_identidad_unica(cambios["numero_identidad"], paciente_id)
        if "documentos_urls" in cambios:
            cambios["documentos_urls"] = safe_json_dumps(cambios["documentos_urls"] or [])
        # Derivados: nunca se aceptan del cliente
        cambios.pop("embarazo_activo", None)
        cambios.pop("embarazo_fecha_fin", None)

        for campo, valor in cambios.items():
            setattr(paciente, campo, valor)
        paciente.updated_at = datetime.utcnow()
        self._refrescar_embarazo(paciente)

        paciente = self.repo.guardar(paciente)
        logger.info(f"Paciente actualizado: {paciente_id} ({', '.join(sorted(cambios)) or 'sin cambios'})")
        return paciente

    # ============================================
    # CLASIFICACIÓN
    # ============================================

    def clasificar(self, paciente_id: str) -> dict:
        """Tipo por edad, severidad, categoría de registro y estado de embarazo."""
        paciente = self.obtener(paciente_id)
        ultimo_tratamiento = self.completado_repo.obtener_ultima_fecha(paciente_id)

        tipo = obtener_tipo_paciente(paciente, hoy=self.hoy)
        severidad = calcular_severidad(paciente, hoy=self.hoy)
        registro = obtener_categoria_registro(
            paciente.fecha_inicio, ultimo_tratamiento, hoy=self.hoy
        )
        estado = ESTADO_INACTIVO
        if paciente.embarazo == EmbarazoEnum.SI.value:
            estado = calcular_estado_embarazo(
                paciente.fecha_inicio, paciente.semanas_embarazo, hoy=self.hoy
            )

        return {
            "paciente_id": paciente.paciente_id,
            "tipo": {
                "categoria": tipo.categoria.value,
                "etiqueta": tipo.etiqueta,
                "sexo": tipo.sexo,
                "edad": tipo.edad,
            },
            "severidad": {
                "nivel": severidad.nivel.value,
                "puntaje": severidad.puntaje,
                "condiciones": list(severidad.condiciones),
            },
            "registro": {
                "es_historico": registro.es_historico,
                "esta_archivado": registro.esta_archivado,
                "categoria": registro.categoria.value,
            },
            "embarazo": estado.to_dict(),
        }
