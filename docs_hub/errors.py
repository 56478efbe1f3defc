"""
Errores del portal.

Los stores traducen los errores de su backend (filesystem, botocore) a estas
clases para que el loader y las rutas no dependan de boto3.
"""


class DocsHubError(Exception):
    """Base de todos los errores del portal."""


class DocumentNotFound(DocsHubError):
    """El documento fue listado (o referenciado) pero no se pudo obtener."""

    def __init__(self, location: str):
        super().__init__(f"Documento no encontrado: {location}")
        self.location = location


class DocumentParseError(DocsHubError):
    """El documento se obtuvo pero no es YAML válido (o no es un mapping)."""

    def __init__(self, location: str, reason: str):
        super().__init__(f"No se pudo parsear {location}: {reason}")
        self.location = location
        self.reason = reason


class StoreUnavailable(DocsHubError):
    """Falla de listado o de conexión contra el store."""
