"""
Modelos de response de la API.

Definen la forma de los cuerpos JSON que devuelven `/health` y los
handlers de error.
"""

from typing import List

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """
    Estado del servicio.

    `apis` y `count` reflejan el catálogo cargado al arrancar, no el
    estado actual del store.
    """

    status: str = Field(default="OK", description="Estado del servicio")
    timestamp: str = Field(..., description="Fecha/hora ISO-8601 (UTC) de la respuesta")
    apis: List[str] = Field(default_factory=list, description="Keys del catálogo")
    count: int = Field(..., description="Cantidad de especificaciones cargadas")


class ErrorResponse(BaseModel):
    """Cuerpo estándar de error."""

    error: str = Field(..., description="Tipo de error")
    message: str = Field(..., description="Mensaje legible, sin detalles internos")
