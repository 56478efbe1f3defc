"""Rutas de la API."""

from . import docs, errors, health

__all__ = ["docs", "errors", "health"]
