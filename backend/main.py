"""
API Principal de la Clínica Dental.
Historias clínicas, control de acceso por rol y búsqueda global.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.config import settings
from app.core.database import create_db_and_tables
from app.core.exceptions import registrar_manejadores
from app.utils.logger import get_logger

logger = get_logger("main")

# Crear aplicación
app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION
)

# Configurar CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)

registrar_manejadores(app)

app.include_router(api_router, prefix="/api")


# ============================================
# EVENTOS DE INICIO
# ============================================

@app.on_event("startup")
def on_startup():
    create_db_and_tables()
    logger.info(f"{settings.APP_TITLE} v{settings.APP_VERSION} iniciada ({settings.APP_ENV})")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
