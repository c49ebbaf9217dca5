"""
Modelo de Paciente.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import date, datetime
import uuid


class Paciente(SQLModel, table=True):
    """
    Modelo de Paciente.

    Historia clínica plana: datos personales, contactos, antecedentes
    médicos, hábitos, examen dental y URLs de documentos.

    `embarazo_activo` y `embarazo_fecha_fin` son derivados de `embarazo`,
    `fecha_inicio` y `semanas_embarazo`; se recalculan con
    `app.services.embarazo_service.aplicar_estado_embarazo`.
    """
    __tablename__ = "pacientes"

    paciente_id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True
    )

    # ============================================
    # DATOS PERSONALES
    # ============================================
    nombre_completo: str = Field(index=True)
    numero_identidad: Optional[str] = Field(default=None, index=True)
    codigo_interno: Optional[str] = Field(default=None, index=True)
    fecha_nacimiento: Optional[date] = Field(default=None)
    sexo: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None)
    codigopais: Optional[str] = Field(default=None)
    telefono: Optional[str] = Field(default=None)
    direccion: Optional[str] = Field(default=None)
    ocupacion: Optional[str] = Field(default=None)

    # ============================================
    # CONTACTOS
    # ============================================
    contacto_emergencia: Optional[str] = Field(default=None)
    codigopaisemergencia: Optional[str] = Field(default=None)
    contacto_telefono: Optional[str] = Field(default=None)
    representante_nombre: Optional[str] = Field(default=None)
    codigopaisrepresentante: Optional[str] = Field(default=None)
    rep_celular: Optional[str] = Field(default=None)

    # ============================================
    # ANTECEDENTES MÉDICOS
    # ============================================
    fecha_inicio: Optional[date] = Field(default=None)
    motivo_consulta: Optional[str] = Field(default=None)
    enfermedades: Optional[str] = Field(default=None)
    alergias: Optional[str] = Field(default=None)
    medicamentos: Optional[str] = Field(default=None)

    # Embarazo (embarazo_activo y embarazo_fecha_fin son derivados)
    embarazo: Optional[str] = Field(default=None)
    semanas_embarazo: Optional[int] = Field(default=None)
    embarazo_activo: bool = Field(default=False)
    embarazo_fecha_fin: Optional[date] = Field(default=None)

    # ============================================
    # HÁBITOS
    # ============================================
    fuma: Optional[str] = Field(default=None)
    consume_alcohol: Optional[str] = Field(default=None)
    bruxismo: Optional[str] = Field(default=None)
    frecuencia_cepillado: Optional[str] = Field(default=None)

    # ============================================
    # EXAMEN DENTAL
    # ============================================
    examen_encias: Optional[str] = Field(default=None)
    examen_lengua: Optional[str] = Field(default=None)
    examen_oclusion: Optional[str] = Field(default=None)
    observaciones_examen: Optional[str] = Field(default=None)

    # ============================================
    # DOCUMENTOS (JSON como string)
    # ============================================
    documentos_urls: Optional[str] = Field(default=None)
    firma_url: Optional[str] = Field(default=None)

    # ============================================
    # TIMESTAMPS
    # ============================================
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
