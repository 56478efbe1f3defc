from __future__ import annotations

"""
docs_hub.models
===============

Modelos de dominio (dataclasses) del catálogo de especificaciones.

- `SpecInfo`: bloque `info` de un documento OpenAPI, con campos opcionales.
- `SpecificationEntry`: una especificación cargada, lista para mostrar.
- `Catalog`: mapping key → entry, construido una vez al arrancar.

Estos objetos no hablan con S3 ni con el filesystem; solo representan datos.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

DEFAULT_VERSION = "1.0.0"
DEFAULT_GROUP = "default"


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class SpecInfo:
    """
    Campos de presentación extraídos del bloque `info` de un documento.

    Cualquiera puede faltar; `with_defaults` es el único lugar donde se
    completan, así el catálogo nunca expone campos vacíos.
    """

    title: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "SpecInfo":
        info = document.get("info") if isinstance(document, dict) else None
        if not isinstance(info, dict):
            return cls()
        return cls(
            title=_clean(info.get("title")),
            version=_clean(info.get("version")),
            description=_clean(info.get("description")),
        )

    def with_defaults(self, key: str) -> "SpecInfo":
        """
        Devuelve un `SpecInfo` completo usando defaults derivados de la key.

        - title → key
        - version → "1.0.0"
        - description → "API documentation for <key>"
        """
        return SpecInfo(
            title=self.title or key,
            version=self.version or DEFAULT_VERSION,
            description=self.description or f"API documentation for {key}",
        )


@dataclass(frozen=True)
class SpecificationEntry:
    """
    Una especificación del catálogo.

    Attributes:
        key: Identificador único (nombre de carpeta, o "<carpeta>-<archivo>").
        title / version / description: Siempre presentes (ver `SpecInfo.with_defaults`).
        folder: Carpeta de agrupación; vacío en el layout plano.
        source_location: Path local o key del objeto en S3, para re-leer el YAML crudo.
        file_name: Nombre del archivo fuente (ej: "openapi.yaml").
        document: Documento parseado.
    """

    key: str
    title: str
    version: str
    description: str
    source_location: str
    folder: str = ""
    file_name: str = ""
    document: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def group(self) -> str:
        """Grupo mostrado en la landing: carpeta, prefijo de la key, o "default"."""
        if self.folder:
            return self.folder
        if "-" in self.key:
            return self.key.split("-", 1)[0]
        return DEFAULT_GROUP


Catalog = Dict[str, SpecificationEntry]
"""Catálogo inmutable en la práctica: se construye al arrancar y no se modifica."""
