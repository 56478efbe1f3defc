"""
Handlers de error de la app.

- 404 para cualquier ruta no registrada (incluye APIs que no están en el catálogo)
- Resto de errores HTTP con su status y el cuerpo estándar `{error, message}`
- 500 genérico para excepciones no manejadas: el detalle va al log, nunca al cliente
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..models.responses import ErrorResponse

logger = logging.getLogger(__name__)

NOT_FOUND = ErrorResponse(
    error="Not Found",
    message="The requested resource was not found on this server.",
)
INTERNAL_ERROR = ErrorResponse(
    error="Internal Server Error",
    message="Something went wrong!",
)


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content=NOT_FOUND.model_dump())
        body = ErrorResponse(error=_reason(exc.status_code), message=str(exc.detail))
        return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"❌ Error no manejado en {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content=INTERNAL_ERROR.model_dump())
