"""
Rutas de documentación.

- GET /                          Landing con todas las APIs del catálogo
- GET /api-docs/{key}            Visor de documentación de una API
- GET /api/{key}/openapi.yaml    YAML crudo, re-leído desde el store

Las rutas por API se registran iterando el catálogo al crear el router:
una API agregada al store después del arranque no tiene ruta (404) hasta
reiniciar el proceso.
"""

import html
import json
import logging
from pathlib import Path
from typing import Any, Dict, List
from urllib.parse import quote

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from docs_hub.errors import DocsHubError
from docs_hub.models import Catalog, SpecificationEntry
from docs_hub.storage import SpecStore
from docs_hub.templating import load_template, render

from ..models.responses import ErrorResponse

logger = logging.getLogger(__name__)

LANDING_TEMPLATE = "landing.html"
DOCS_TEMPLATE = "api-docs.html"
YAML_MEDIA_TYPE = "application/x-yaml"


def _esc(value: Any) -> str:
    return html.escape("" if value is None else str(value), quote=True)


def docs_url(key: str) -> str:
    return f"/api-docs/{quote(key, safe='')}"


def raw_spec_url(key: str) -> str:
    return f"/api/{quote(key, safe='')}/openapi.yaml"


def _json_safe(value: Any) -> Any:
    """YAML admite keys no string (fechas, números); JSON no."""
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


def _embed_json(document: Dict[str, Any]) -> str:
    """Serializa el documento para incrustarlo en un <script> sin cerrarlo antes de tiempo."""
    return json.dumps(_json_safe(document), default=str, ensure_ascii=False).replace("</", "<\\/")


def build_landing_context(catalog: Catalog) -> Dict[str, Any]:
    """
    Datos de la landing.

    Las APIs se ordenan por grupo (carpeta) respetando el orden del catálogo
    dentro de cada grupo. `folders` alimenta la barra de filtros.
    """
    groups: Dict[str, List[SpecificationEntry]] = {}
    for entry in catalog.values():
        groups.setdefault(entry.group, []).append(entry)

    apis = []
    folders = []
    for group in sorted(groups):
        entries = groups[group]
        folders.append({"name": _esc(group), "count": len(entries)})
        for entry in entries:
            apis.append(
                {
                    "key": _esc(entry.key),
                    "url": _esc(docs_url(entry.key)),
                    "title": _esc(entry.title),
                    "version": _esc(entry.version),
                    "description": _esc(entry.description),
                    "folder": _esc(group),
                }
            )

    return {
        "title": "API Documentation Hub",
        "count": len(catalog),
        "apis": apis,
        "folders": folders,
    }


def build_docs_context(catalog: Catalog, key: str) -> Dict[str, Any]:
    """Datos del visor: navegación con la API activa marcada y el documento embebido."""
    entry = catalog[key]
    return {
        "title": _esc(f"{entry.title} Documentation"),
        "key": _esc(key),
        "version": _esc(entry.version),
        "spec_url": _esc(raw_spec_url(key)),
        "apis": [
            {
                "key": _esc(other.key),
                "url": _esc(docs_url(other.key)),
                "title": _esc(other.title),
                "active": "active" if other.key == key else "",
            }
            for other in catalog.values()
        ],
        "spec": _embed_json(entry.document),
    }


def _docs_page_endpoint(catalog: Catalog, key: str, template: str):
    async def api_docs_page():
        return HTMLResponse(render(template, build_docs_context(catalog, key)))

    api_docs_page.__doc__ = f"Visor de documentación de '{key}'."
    return api_docs_page


def _raw_spec_endpoint(entry: SpecificationEntry, store: SpecStore):
    async def raw_spec():
        try:
            content = await run_in_threadpool(store.read, entry.source_location)
        except DocsHubError as e:
            logger.error(f"❌ Error serving {entry.key} spec: {e}")
            body = ErrorResponse(
                error="Failed to load API specification",
                message="The API specification could not be retrieved from the document store.",
            )
            return JSONResponse(status_code=500, content=body.model_dump())
        return Response(content=content, media_type=YAML_MEDIA_TYPE)

    raw_spec.__doc__ = f"YAML crudo de '{entry.key}'."
    return raw_spec


def create_docs_router(catalog: Catalog, store: SpecStore, templates_dir: str | Path) -> APIRouter:
    """
    Crea el router de documentación para un catálogo ya cargado.

    Args:
        catalog: Catálogo construido al arrancar (no se modifica).
        store: Store de donde re-leer el YAML crudo.
        templates_dir: Directorio con `landing.html` y `api-docs.html` (se leen una vez, acá).
    """
    templates_dir = Path(templates_dir)
    landing_template = load_template(templates_dir / LANDING_TEMPLATE)
    docs_template = load_template(templates_dir / DOCS_TEMPLATE)
    router = APIRouter(tags=["docs"])

    @router.get("/", response_class=HTMLResponse)
    async def landing_page():
        """Landing con todas las APIs agrupadas por carpeta."""
        return HTMLResponse(render(landing_template, build_landing_context(catalog)))

    for key, entry in catalog.items():
        router.add_api_route(
            f"/api-docs/{key}",
            _docs_page_endpoint(catalog, key, docs_template),
            methods=["GET"],
            response_class=HTMLResponse,
            name=f"api_docs_{key}",
        )
        router.add_api_route(
            f"/api/{key}/openapi.yaml",
            _raw_spec_endpoint(entry, store),
            methods=["GET"],
            name=f"raw_spec_{key}",
        )

    return router
