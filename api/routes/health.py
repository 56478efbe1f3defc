"""
Endpoint de health check.

Informa el catálogo cargado al arrancar; no consulta el store.
"""

from datetime import UTC, datetime

from fastapi import APIRouter

from docs_hub.models import Catalog

from ..models.responses import HealthResponse


def create_health_router(catalog: Catalog) -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.get("/health", response_model=HealthResponse)
    async def health():
        """Liveness: estado, timestamp y keys del catálogo."""
        return HealthResponse(
            status="OK",
            timestamp=datetime.now(UTC).isoformat(),
            apis=list(catalog.keys()),
            count=len(catalog),
        )

    return router
