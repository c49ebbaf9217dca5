"""
Servicio de búsqueda global.

Búsqueda federada sobre colecciones ya cargadas en memoria: pacientes,
tratamientos, tratamientos completados, odontogramas, consentimientos,
promociones, eventos de calendario y páginas de la aplicación.

- Coincidencia por subcadena sobre texto en minúsculas (sin tokenizar)
- Pacientes puntuados por campo y ordenados por relevancia
- Cada paciente encontrado se agrupa con sus tratamientos completados,
  odontogramas y consentimientos
- Campos faltantes cuentan como texto vacío; nunca se lanza excepción

`buscar()` es una función pura de (consulta, corpus). `BusquedaService`
es la capa que carga el corpus desde la base de datos.
"""
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.config import settings
from app.repositories import (
    PacienteRepository,
    TratamientoRepository,
    TratamientoCompletadoRepository,
    OdontogramaRepository,
    ConsentimientoRepository,
    PromocionRepository,
)
from app.services.embarazo_service import actualizar_estado_embarazo, parsear_fecha
from app.utils.constants import (
    PAGINAS_APP,
    PUNTAJE_CAMPOS_PACIENTE,
    CAMPOS_COINCIDENCIA_DIRECTA,
)
from app.utils.helpers import safe_json_loads
from app.utils.logger import enmascarar, get_logger

logger = get_logger("busqueda")

Registro = Any

# Orden de prioridad de los grupos en el panel de resultados
ORDEN_GRUPOS = (
    "paciente_centrico",
    "paginas",
    "eventos",
    "tratamientos",
    "tratamientos_completados",
    "odontogramas",
    "consentimientos",
    "promociones",
)

# Grupos que se muestran completos
GRUPOS_SIN_LIMITE = frozenset({"paciente_centrico", "paginas"})


# ============================================
# ACCESO TOLERANTE A CAMPOS
# ============================================

def _obtener(registro: Registro, *ruta: str) -> Any:
    """Lee un campo (o un campo anidado) de un dict u objeto; None si falta."""
    actual = registro
    for campo in ruta:
        if actual is None:
            return None
        if isinstance(actual, Mapping):
            actual = actual.get(campo)
        else:
            actual = getattr(actual, campo, None)
    return actual


def _texto(valor: Any) -> str:
    if valor is None:
        return ""
    if isinstance(valor, str):
        return valor
    if hasattr(valor, "value") and isinstance(valor.value, str):
        return valor.value
    if isinstance(valor, (datetime, date)):
        return valor.isoformat()
    return str(valor)


def _concatenar(*valores: Any) -> str:
    return " ".join(_texto(v) for v in valores).lower()


def _contiene(valor: Any, consulta: str) -> bool:
    return consulta in _texto(valor).lower()


def normalizar_consulta(consulta: Optional[str]) -> str:
    """Consulta en minúsculas y sin espacios en los extremos."""
    if not consulta:
        return ""
    return consulta.strip().lower()


# ============================================
# TIPOS DE RESULTADO
# ============================================

@dataclass
class CorpusBusqueda:
    """Colecciones sobre las que se busca. Se toman prestadas, no se modifican."""
    pacientes: Sequence[Registro] = ()
    tratamientos: Sequence[Registro] = ()
    tratamientos_completados: Sequence[Registro] = ()
    odontogramas: Sequence[Registro] = ()
    consentimientos: Sequence[Registro] = ()
    eventos: Sequence[Registro] = ()
    promociones: Sequence[Registro] = ()
    paginas: Sequence[Registro] = PAGINAS_APP


@dataclass
class PacienteCoincidente:
    paciente: Registro
    puntaje: int
    campos_coincidentes: List[str]


@dataclass
class ResultadoPacienteCentrico:
    """Paciente encontrado junto con sus registros relacionados."""
    paciente: Registro
    tratamientos_completados: List[Registro]
    odontogramas: List[Registro]
    consentimientos: List[Registro]
    campos_coincidentes: List[str]
    puntaje: int
    es_coincidencia_directa: bool = False

    def to_dict(self) -> dict:
        return {
            "paciente": self.paciente,
            "tratamientos_completados": self.tratamientos_completados,
            "odontogramas": self.odontogramas,
            "consentimientos": self.consentimientos,
            "campos_coincidentes": self.campos_coincidentes,
            "puntaje": self.puntaje,
            "es_coincidencia_directa": self.es_coincidencia_directa,
        }


@dataclass
class ResultadoBusqueda:
    """
    Resultados agrupados de una búsqueda.

    Las listas contienen todas las coincidencias; `grupos()` aplica el orden
    de prioridad y el límite de visualización de cada grupo.
    """
    paciente_centrico: List[ResultadoPacienteCentrico] = field(default_factory=list)
    pacientes: List[Registro] = field(default_factory=list)
    paginas: List[Registro] = field(default_factory=list)
    eventos: List[Registro] = field(default_factory=list)
    tratamientos: List[Registro] = field(default_factory=list)
    tratamientos_completados: List[Registro] = field(default_factory=list)
    odontogramas: List[Registro] = field(default_factory=list)
    consentimientos: List[Registro] = field(default_factory=list)
    promociones: List[Registro] = field(default_factory=list)
    mostrar_panel: bool = False

    @property
    def esta_vacio(self) -> bool:
        return all(not getattr(self, nombre) for nombre in ORDEN_GRUPOS)

    @property
    def total(self) -> int:
        return sum(len(getattr(self, nombre)) for nombre in ORDEN_GRUPOS)

    def grupos(self, limite: Optional[int] = None) -> List[Tuple[str, list]]:
        """
        Grupos no vacíos en orden de prioridad, recortados para mostrar.

        Args:
            limite: Máximo por grupo (por defecto `settings.BUSQUEDA_LIMITE_GRUPO`)
        """
        if limite is None:
            limite = settings.BUSQUEDA_LIMITE_GRUPO

        grupos = []
        for nombre in ORDEN_GRUPOS:
            items = getattr(self, nombre)
            if not items:
                continue
            if nombre not in GRUPOS_SIN_LIMITE:
                items = items[:limite]
            grupos.append((nombre, list(items)))
        return grupos

    def to_dict(self, limite: Optional[int] = None) -> dict:
        """Forma serializable para la API."""
        grupos = []
        for nombre, items in self.grupos(limite):
            if nombre == "paciente_centrico":
                items = [item.to_dict() for item in items]
            grupos.append({
                "nombre": nombre,
                "total": len(getattr(self, nombre)),
                "items": items,
            })
        return {
            "mostrar_panel": self.mostrar_panel,
            "total": self.total,
            "grupos": grupos,
        }


# ============================================
# FILTROS POR COLECCIÓN
# ============================================

def _texto_paciente(paciente: Registro) -> str:
    return _concatenar(
        _obtener(paciente, "nombre_completo"),
        _obtener(paciente, "numero_identidad"),
        _obtener(paciente, "codigo_interno"),
        _obtener(paciente, "telefono"),
        _texto(_obtener(paciente, "codigopais")) + _texto(_obtener(paciente, "telefono")),
        _obtener(paciente, "email"),
        _obtener(paciente, "contacto_emergencia"),
        _obtener(paciente, "contacto_telefono"),
        _texto(_obtener(paciente, "codigopaisemergencia")) + _texto(_obtener(paciente, "contacto_telefono")),
        _obtener(paciente, "rep_celular"),
        _texto(_obtener(paciente, "codigopaisrepresentante")) + _texto(_obtener(paciente, "rep_celular")),
    )


def _texto_tratamiento_completado(tratamiento: Registro) -> str:
    return _concatenar(
        _obtener(tratamiento, "paciente", "nombre_completo"),
        _obtener(tratamiento, "tratamiento", "nombre"),
        _obtener(tratamiento, "promocion", "nombre"),
        _obtener(tratamiento, "paciente", "numero_identidad"),
        _obtener(tratamiento, "paciente", "telefono"),
        _obtener(tratamiento, "paciente", "email"),
        _obtener(tratamiento, "notas"),
        _obtener(tratamiento, "fecha_completado"),
    )


def _texto_odontograma(odontograma: Registro, paciente: Optional[Registro]) -> str:
    return _concatenar(
        _obtener(odontograma, "paciente_id"),
        _obtener(paciente, "nombre_completo"),
        _obtener(paciente, "numero_identidad"),
        _obtener(odontograma, "notas"),
        _obtener(odontograma, "fecha_actualizacion"),
        _obtener(odontograma, "creado_por"),
    )


def _texto_consentimiento(consentimiento: Registro, paciente: Optional[Registro]) -> str:
    return _concatenar(
        _obtener(consentimiento, "paciente_id"),
        _obtener(paciente, "nombre_completo"),
        _obtener(paciente, "numero_identidad"),
        _obtener(consentimiento, "tipo_consentimiento"),
        _obtener(consentimiento, "nombre_consentimiento"),
        _obtener(consentimiento, "descripcion"),
        _obtener(consentimiento, "estado"),
        _obtener(consentimiento, "fecha_consentimiento"),
    )


def _texto_promocion(promocion: Registro) -> str:
    return _concatenar(
        _obtener(promocion, "titulo"),
        _obtener(promocion, "descripcion"),
        _obtener(promocion, "descuento"),
        _obtener(promocion, "tipo"),
        _obtener(promocion, "codigo"),
        _obtener(promocion, "fecha_inicio"),
        _obtener(promocion, "fecha_fin"),
    )


def _algun_campo_contiene(registro: Registro, campos: Iterable[str], consulta: str) -> bool:
    return any(_contiene(_obtener(registro, campo), consulta) for campo in campos)


def _filtrar(coleccion: Optional[Sequence[Registro]], predicado: Callable[[Registro], bool]) -> List[Registro]:
    return [registro for registro in (coleccion or ()) if predicado(registro)]


def _indice_pacientes(pacientes: Sequence[Registro]) -> Dict[str, Registro]:
    """Pacientes por `paciente_id`; ante duplicados gana el primero."""
    indice: Dict[str, Registro] = {}
    for paciente in pacientes:
        paciente_id = _texto(_obtener(paciente, "paciente_id"))
        if paciente_id:
            indice.setdefault(paciente_id, paciente)
    return indice


def _clave_fecha(valor: Any) -> datetime:
    """Clave de orden para fechas heterogéneas; las inválidas van al final."""
    if isinstance(valor, datetime):
        fecha = valor
    elif isinstance(valor, date):
        fecha = datetime(valor.year, valor.month, valor.day)
    elif isinstance(valor, str) and valor.strip():
        try:
            fecha = datetime.fromisoformat(valor.strip().replace("Z", "+00:00"))
        except ValueError:
            return datetime.min
    else:
        return datetime.min

    if fecha.tzinfo is not None:
        fecha = fecha.astimezone(timezone.utc).replace(tzinfo=None)
    return fecha


# ============================================
# PUNTUACIÓN DE PACIENTES
# ============================================

def puntuar_paciente(paciente: Registro, consulta: str) -> PacienteCoincidente:
    """
    Calcula la relevancia de un paciente para una consulta ya normalizada.

    Pesos: nombre 100, identidad 80, código interno 60, paciente_id 50,
    teléfono 40, email 30, contactos 10 cada uno.
    """
    puntaje = 0
    campos: List[str] = []
    for campo, peso in PUNTAJE_CAMPOS_PACIENTE:
        if _contiene(_obtener(paciente, campo), consulta):
            puntaje += peso
            campos.append(campo)
    return PacienteCoincidente(paciente=paciente, puntaje=puntaje, campos_coincidentes=campos)


def ordenar_pacientes(pacientes: Sequence[Registro], consulta: str) -> List[PacienteCoincidente]:
    """Pacientes con puntaje > 0, de mayor a menor (empates en orden original)."""
    coincidencias = [puntuar_paciente(paciente, consulta) for paciente in pacientes]
    coincidencias = [c for c in coincidencias if c.puntaje > 0]
    coincidencias.sort(key=lambda c: c.puntaje, reverse=True)
    return coincidencias


def es_coincidencia_directa(campos_coincidentes: Sequence[str], indice: int) -> bool:
    """Solo el primer resultado, y solo si coincidió por nombre, identidad, teléfono o email."""
    return indice == 0 and bool(CAMPOS_COINCIDENCIA_DIRECTA.intersection(campos_coincidentes))


# ============================================
# AGRUPACIÓN POR PACIENTE
# ============================================

def _es_tratamiento_del_paciente(
    tratamiento: Registro,
    paciente_id: str,
    identificadores: set,
    nombre: str,
) -> bool:
    """
    Relaciona un tratamiento completado con un paciente.

    Con clave foránea en ambos lados se usa solo esa. Sin ella se cae a la
    igualdad de número de identidad o, en último caso, de nombre.
    """
    tratamiento_paciente_id = _texto(
        _obtener(tratamiento, "paciente_id") or _obtener(tratamiento, "paciente", "paciente_id")
    )
    if tratamiento_paciente_id and paciente_id:
        return tratamiento_paciente_id == paciente_id

    identidad = _texto(_obtener(tratamiento, "paciente", "numero_identidad"))
    if identidad and identidad in identificadores:
        return True

    nombre_tratamiento = _texto(_obtener(tratamiento, "paciente", "nombre_completo")).lower()
    return bool(nombre) and nombre_tratamiento == nombre


def agrupar_por_paciente(
    coincidencias: Sequence[PacienteCoincidente],
    corpus: CorpusBusqueda,
) -> List[ResultadoPacienteCentrico]:
    """Construye un agregado por paciente encontrado, en el orden recibido."""
    resultados = []
    for indice, coincidencia in enumerate(coincidencias):
        paciente = coincidencia.paciente
        paciente_id = _texto(_obtener(paciente, "paciente_id"))
        numero_identidad = _texto(_obtener(paciente, "numero_identidad"))
        clave = paciente_id or numero_identidad
        identificadores = {valor for valor in (clave, numero_identidad) if valor}
        nombre = _texto(_obtener(paciente, "nombre_completo")).lower()

        tratamientos = _filtrar(
            corpus.tratamientos_completados,
            lambda t: _es_tratamiento_del_paciente(t, paciente_id, identificadores, nombre),
        )
        odontogramas = _filtrar(
            corpus.odontogramas,
            lambda o: bool(clave) and _texto(_obtener(o, "paciente_id")) == clave,
        )
        consentimientos = _filtrar(
            corpus.consentimientos,
            lambda c: bool(clave) and _texto(_obtener(c, "paciente_id")) == clave,
        )

        resultados.append(ResultadoPacienteCentrico(
            paciente=paciente,
            tratamientos_completados=tratamientos,
            odontogramas=odontogramas,
            consentimientos=consentimientos,
            campos_coincidentes=list(coincidencia.campos_coincidentes),
            puntaje=coincidencia.puntaje,
            es_coincidencia_directa=es_coincidencia_directa(coincidencia.campos_coincidentes, indice),
        ))
    return resultados


# ============================================
# BÚSQUEDA
# ============================================

def buscar(consulta: Optional[str], corpus: CorpusBusqueda) -> ResultadoBusqueda:
    """
    Ejecuta la búsqueda completa: filtra, puntúa y agrupa.

    Una consulta vacía (o solo espacios) devuelve todos los grupos vacíos y
    el panel oculto.
    """
    q = normalizar_consulta(consulta)
    if not q:
        return ResultadoBusqueda()

    pacientes = list(corpus.pacientes or ())
    indice_pacientes = _indice_pacientes(pacientes)

    pacientes_filtrados = _filtrar(pacientes, lambda p: q in _texto_paciente(p))

    tratamientos = _filtrar(
        corpus.tratamientos,
        lambda t: _algun_campo_contiene(t, ("nombre", "codigo", "especialidad"), q),
    )
    eventos = _filtrar(
        corpus.eventos,
        lambda e: _algun_campo_contiene(e, ("title", "description", "location"), q),
    )
    tratamientos_completados = _filtrar(
        corpus.tratamientos_completados,
        lambda t: q in _texto_tratamiento_completado(t),
    )
    odontogramas = _filtrar(
        corpus.odontogramas,
        lambda o: q in _texto_odontograma(
            o, indice_pacientes.get(_texto(_obtener(o, "paciente_id")))
        ),
    )
    odontogramas.sort(key=lambda o: _clave_fecha(_obtener(o, "fecha_actualizacion")), reverse=True)
    consentimientos = _filtrar(
        corpus.consentimientos,
        lambda c: q in _texto_consentimiento(
            c, indice_pacientes.get(_texto(_obtener(c, "paciente_id")))
        ),
    )
    promociones = _filtrar(corpus.promociones, lambda p: q in _texto_promocion(p))
    paginas = _filtrar(
        corpus.paginas,
        lambda p: _algun_campo_contiene(p, ("title", "description", "category"), q),
    )

    coincidencias = ordenar_pacientes(pacientes_filtrados, q)

    return ResultadoBusqueda(
        paciente_centrico=agrupar_por_paciente(coincidencias, corpus),
        pacientes=pacientes_filtrados,
        paginas=paginas,
        eventos=eventos,
        tratamientos=tratamientos,
        tratamientos_completados=tratamientos_completados,
        odontogramas=odontogramas,
        consentimientos=consentimientos,
        promociones=promociones,
        mostrar_panel=True,
    )


def buscar_global(
    consulta: Optional[str],
    pacientes: Optional[Sequence[Registro]] = None,
    tratamientos: Optional[Sequence[Registro]] = None,
    tratamientos_completados: Optional[Sequence[Registro]] = None,
    odontogramas: Optional[Sequence[Registro]] = None,
    consentimientos: Optional[Sequence[Registro]] = None,
    eventos: Optional[Sequence[Registro]] = None,
    promociones: Optional[Sequence[Registro]] = None,
    paginas: Optional[Sequence[Registro]] = None,
) -> ResultadoBusqueda:
    """Atajo posicional de `buscar`; `None` en cualquier colección equivale a vacía."""
    corpus = CorpusBusqueda(
        pacientes=pacientes or (),
        tratamientos=tratamientos or (),
        tratamientos_completados=tratamientos_completados or (),
        odontogramas=odontogramas or (),
        consentimientos=consentimientos or (),
        eventos=eventos or (),
        promociones=promociones or (),
        paginas=PAGINAS_APP if paginas is None else paginas,
    )
    return buscar(consulta, corpus)


# ============================================
# CARGA DEL CORPUS
# ============================================

class BusquedaService:
    """
    Carga las colecciones desde la base de datos y ejecuta la búsqueda.

    Cada colección se carga por separado: si una falla, queda vacía y el
    resto de la búsqueda sigue funcionando.
    """

    def __init__(self, session: Session, hoy: Optional[date] = None):
        self.session = session
        self.hoy = hoy
        self.paciente_repo = PacienteRepository(session)
        self.tratamiento_repo = TratamientoRepository(session)
        self.completado_repo = TratamientoCompletadoRepository(session)
        self.odontograma_repo = OdontogramaRepository(session)
        self.consentimiento_repo = ConsentimientoRepository(session)
        self.promocion_repo = PromocionRepository(session)

    def _cargar(self, nombre: str, cargador: Callable[[], List[dict]]) -> List[dict]:
        try:
            return cargador()
        except SQLAlchemyError as e:
            logger.warning(f"No se pudo cargar '{nombre}' para la búsqueda: {e}")
            self.session.rollback()
            return []

    def _cargar_pacientes(self) -> List[dict]:
        """
        Pacientes en la misma forma que devuelve la API de pacientes: derivados
        de embarazo recalculados y `documentos_urls` como lista.
        """
        pacientes = []
        for datos in self.paciente_repo.obtener_todos_como_dict():
            paciente = actualizar_estado_embarazo(datos, hoy=self.hoy)
            paciente["embarazo_fecha_fin"] = parsear_fecha(paciente["embarazo_fecha_fin"])
            paciente["documentos_urls"] = safe_json_loads(paciente.get("documentos_urls"))
            pacientes.append(paciente)
        return pacientes

    def cargar_corpus(self, eventos: Optional[Sequence[Registro]] = None) -> CorpusBusqueda:
        """
        Carga todas las colecciones.

        Args:
            eventos: Eventos del calendario externo, si el llamador los tiene
        """
        return CorpusBusqueda(
            pacientes=self._cargar("pacientes", self._cargar_pacientes),
            tratamientos=self._cargar("tratamientos", self.tratamiento_repo.obtener_todos_como_dict),
            tratamientos_completados=self._cargar(
                "tratamientos_completados", self.completado_repo.obtener_todos_expandidos
            ),
            odontogramas=self._cargar("odontogramas", self.odontograma_repo.obtener_todos_como_dict),
            consentimientos=self._cargar("consentimientos", self.consentimiento_repo.obtener_todos_como_dict),
            eventos=list(eventos or ()),
            promociones=self._cargar("promociones", self.promocion_repo.obtener_activas_como_dict),
        )

    def buscar(self, consulta: Optional[str], eventos: Optional[Sequence[Registro]] = None) -> ResultadoBusqueda:
        """Busca sobre el corpus actual. Con consulta vacía no se consulta la base."""
        if not normalizar_consulta(consulta):
            return ResultadoBusqueda()

        corpus = self.cargar_corpus(eventos)
        resultado = buscar(consulta, corpus)
        logger.debug(
            f"Búsqueda '{enmascarar(normalizar_consulta(consulta))}': {resultado.total} resultados, "
            f"{len(resultado.paciente_centrico)} pacientes"
        )
        return resultado
