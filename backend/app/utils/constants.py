"""
Constantes del sistema.
Valores fijos utilizados en toda la aplicación.
"""

# ============================================
# PÁGINAS DE LA APLICACIÓN (búsqueda global)
# ============================================

PAGINAS_APP = (
    {"title": "Dashboard", "description": "Panel principal", "href": "/dashboard", "category": "Navegación"},
    {"title": "Pacientes", "description": "Gestión de pacientes", "href": "/pacientes", "category": "Navegación"},
    {"title": "Calendario", "description": "Citas y eventos", "href": "/calendario", "category": "Navegación"},
    {"title": "Tratamientos", "description": "Catálogo de tratamientos", "href": "/tratamientos", "category": "Navegación"},
    {"title": "Tratamientos Completados", "description": "Historial de tratamientos", "href": "/tratamientos-completados", "category": "Navegación"},
    {"title": "Odontograma", "description": "Diagrama dental", "href": "/odontogram", "category": "Herramientas"},
    {"title": "Nueva Historia Clínica", "description": "Formulario de paciente", "href": "/patient-form", "category": "Formularios"},
    {"title": "Historial de Pacientes", "description": "Registros médicos", "href": "/patient-records", "category": "Registros"},
    {"title": "Menú de Navegación", "description": "Navegación rápida", "href": "/menu-navegacion", "category": "Navegación"},
    {"title": "Promociones", "description": "Ofertas y promociones", "href": "/promociones", "category": "Promociones"},
    {"title": "Consentimientos", "description": "Formularios de consentimiento", "href": "/consentimientos", "category": "Formularios"},
    {"title": "Crear Evento", "description": "Agregar nueva cita o evento", "href": "#create-event", "category": "Acciones", "action": "createEvent"},
    {"title": "Mi Cuenta", "description": "Configuración de perfil", "href": "/account", "category": "Configuración"},
)


# ============================================
# PUNTAJES DE BÚSQUEDA DE PACIENTES
# ============================================

# Orden = orden en que se reportan los campos coincidentes
PUNTAJE_CAMPOS_PACIENTE = (
    ("nombre_completo", 100),
    ("numero_identidad", 80),
    ("codigo_interno", 60),
    ("telefono", 40),
    ("email", 30),
    ("paciente_id", 50),
    ("contacto_emergencia", 10),
    ("contacto_telefono", 10),
    ("rep_celular", 10),
)

# Campos que cuentan como coincidencia directa del primer resultado
CAMPOS_COINCIDENCIA_DIRECTA = frozenset({
    "nombre_completo",
    "numero_identidad",
    "telefono",
    "email",
})


# ============================================
# SEVERIDAD DE CONDICIONES
# ============================================

ENFERMEDADES_CRITICAS = (
    "diabetes", "hipertensión", "corazón", "cardíaco", "cáncer",
    "tumor", "epilepsia", "asma", "renal", "hepático",
)

ENFERMEDADES_RIESGO_VITAL = (
    "cáncer", "tumor", "corazón", "cardíaco",
    "insuficiencia cardíaca", "infarto", "derrame cerebral",
)

ALERGIAS_SEVERAS = (
    "anafilaxia", "penicilina", "maní", "mariscos", "látex", "abeja", "avispas",
)

# Umbrales de puntaje (de mayor a menor)
UMBRALES_SEVERIDAD = (
    (6, "critical"),
    (4, "high"),
    (2, "medium"),
    (1, "low"),
)


# ============================================
# TELÉFONOS
# ============================================

PAISES = (
    {"code": "504", "name": "Honduras"},
    {"code": "1", "name": "USA/Canadá"},
    {"code": "52", "name": "México"},
    {"code": "502", "name": "Guatemala"},
    {"code": "506", "name": "Costa Rica"},
    {"code": "503", "name": "El Salvador"},
    {"code": "505", "name": "Nicaragua"},
    {"code": "507", "name": "Panamá"},
    {"code": "34", "name": "España"},
    {"code": "54", "name": "Argentina"},
    {"code": "57", "name": "Colombia"},
)

CODIGO_PAIS_DEFAULT = "504"

URL_WHATSAPP = "https://wa.me/"
