"""
Repository Base.
Proporciona operaciones CRUD genéricas sobre modelos SQLModel.
"""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlmodel import Session, SQLModel, select

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T]):
    """
    Repository base genérico.

    Uso:
        class TratamientoRepository(BaseRepository[Tratamiento]):
            def __init__(self, session: Session):
                super().__init__(session, Tratamiento)
    """

    def __init__(self, session: Session, model: Type[T]):
        self.session = session
        self.model = model

    def obtener_por_id(self, id: Any) -> Optional[T]:
        """
        Obtiene un registro por clave primaria.

        Returns:
            El registro o None si no existe
        """
        return self.session.get(self.model, id)

    def obtener_todos(self) -> List[T]:
        """Obtiene todos los registros."""
        return list(self.session.exec(select(self.model)).all())

    def obtener_todos_como_dict(self) -> List[Dict[str, Any]]:
        """Todos los registros como diccionarios planos (para búsqueda en memoria)."""
        return [obj.model_dump() for obj in self.obtener_todos()]

    def guardar(self, obj: T) -> T:
        """Persiste los cambios de un registro y lo refresca."""
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj
