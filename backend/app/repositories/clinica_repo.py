"""
Repositories del catálogo clínico: tratamientos, promociones, tratamientos
completados, odontogramas y consentimientos.
"""
from datetime import date
from typing import Any, Dict, List, Optional
from sqlmodel import Session, func, select

from app.repositories.base import BaseRepository
from app.models.paciente import Paciente
from app.models.tratamiento import Tratamiento, Promocion, TratamientoCompletado
from app.models.odontograma import Odontograma, Consentimiento
from app.utils.helpers import modelo_a_dict


class TratamientoRepository(BaseRepository[Tratamiento]):
    """Repository del catálogo de tratamientos."""

    def __init__(self, session: Session):
        super().__init__(session, Tratamiento)


class PromocionRepository(BaseRepository[Promocion]):
    """Repository de promociones."""

    def __init__(self, session: Session):
        super().__init__(session, Promocion)

    def obtener_activas(self) -> List[Promocion]:
        query = select(Promocion).where(Promocion.activa == True)
        return list(self.session.exec(query).all())

    def obtener_activas_como_dict(self) -> List[Dict[str, Any]]:
        return [promocion.model_dump() for promocion in self.obtener_activas()]


class TratamientoCompletadoRepository(BaseRepository[TratamientoCompletado]):
    """Repository de tratamientos realizados a pacientes."""

    def __init__(self, session: Session):
        super().__init__(session, TratamientoCompletado)

    def obtener_ultima_fecha(self, paciente_id: str) -> Optional[date]:
        """Fecha del tratamiento completado más reciente del paciente."""
        query = select(func.max(TratamientoCompletado.fecha_completado)).where(
            TratamientoCompletado.paciente_id == paciente_id
        )
        return self.session.exec(query).first()

    def obtener_todos_expandidos(self) -> List[Dict[str, Any]]:
        """
        Todos los tratamientos completados con el paciente, el tratamiento y
        la promoción embebidos como diccionarios.

        Una relación faltante queda como diccionario vacío. La promoción
        expone además `nombre` (su título).
        """
        query = (
            select(TratamientoCompletado, Paciente, Tratamiento, Promocion)
            .join(Paciente, TratamientoCompletado.paciente_id == Paciente.paciente_id, isouter=True)
            .join(Tratamiento, TratamientoCompletado.tratamiento_id == Tratamiento.id, isouter=True)
            .join(Promocion, TratamientoCompletado.promocion_id == Promocion.id, isouter=True)
            .order_by(TratamientoCompletado.fecha_completado.desc())
        )

        resultado = []
        for completado, paciente, tratamiento, promocion in self.session.exec(query).all():
            datos = completado.model_dump()
            datos["paciente"] = modelo_a_dict(paciente)
            datos["tratamiento"] = modelo_a_dict(tratamiento)
            datos["promocion"] = modelo_a_dict(promocion)
            if promocion is not None:
                datos["promocion"]["nombre"] = promocion.titulo
            resultado.append(datos)
        return resultado


class OdontogramaRepository(BaseRepository[Odontograma]):
    """Repository de odontogramas."""

    def __init__(self, session: Session):
        super().__init__(session, Odontograma)


class ConsentimientoRepository(BaseRepository[Consentimiento]):
    """Repository de consentimientos informados."""

    def __init__(self, session: Session):
        super().__init__(session, Consentimiento)
