"""
API HTTP principal del portal de documentación.

La app se construye a partir de un catálogo ya cargado: las rutas por API
se registran al crearla, así que el catálogo tiene que existir antes.

Uso:
    uvicorn api.main:create_app_from_settings --factory --port 3000
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from docs_hub import __version__
from docs_hub.config import Settings, get_settings
from docs_hub.errors import DocsHubError
from docs_hub.loader import load_specifications
from docs_hub.models import Catalog
from docs_hub.storage import SpecStore, build_store

from .routes.docs import create_docs_router
from .routes.errors import register_error_handlers
from .routes.health import create_health_router

logger = logging.getLogger(__name__)


def configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(catalog: Catalog, store: SpecStore, settings: Optional[Settings] = None) -> FastAPI:
    """
    Crea la app FastAPI para un catálogo y un store dados.

    Recibir ambos por parámetro permite usar dobles en tests
    (catálogo armado a mano, store que falla, etc.).
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        base_url = f"http://localhost:{settings.port}"
        logger.info(f"🚀 API Documentation Hub running on {base_url}")
        for key, entry in catalog.items():
            logger.info(f"📊 {entry.title} docs: {base_url}/api-docs/{key}")
        logger.info(f"🔍 Health check: {base_url}/health")
        yield

    app = FastAPI(
        title="API Documentation Hub",
        description="Portal de documentación para especificaciones OpenAPI",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.catalog = catalog
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Registrar rutas
    app.include_router(create_docs_router(catalog, store, settings.templates_dir))
    app.include_router(create_health_router(catalog))
    app.mount("/static", StaticFiles(directory=settings.public_dir, check_dir=False), name="static")

    register_error_handlers(app)
    return app


def create_app_from_settings() -> FastAPI:
    """
    Factory para uvicorn: lee la configuración, carga el catálogo y crea la app.

    Si el store no se puede listar, el proceso termina: no se sirve un
    catálogo a medio inicializar.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"🚀 Iniciando API Documentation Hub (source={settings.spec_source})")

    try:
        store = build_store(settings)
        catalog = load_specifications(store)
    except (DocsHubError, ValueError) as e:
        logger.critical(f"❌ No se pudo cargar el catálogo de especificaciones: {e}")
        sys.exit(1)

    try:
        return create_app(catalog, store, settings)
    except OSError as e:
        logger.critical(f"❌ No se pudieron leer las plantillas en {settings.templates_dir}: {e}")
        sys.exit(1)
