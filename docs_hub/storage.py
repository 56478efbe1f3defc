"""
Stores de documentos de especificación.

Dos implementaciones con la misma operación de lectura (`read`), que es la
que usan las rutas de passthrough:

- `LocalSpecStore`: árbol de directorios `<root>/<carpeta>/openapi.yaml`.
- `S3SpecStore`: bucket S3 (o compatible) con `<prefix><carpeta>/<archivo>.yaml`.

Los errores del backend se traducen a `docs_hub.errors`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .errors import DocumentNotFound, StoreUnavailable

logger = logging.getLogger(__name__)

SPEC_EXTENSIONS = (".yaml", ".yml")
PREFERRED_FILE_NAME = "openapi.yaml"


def is_spec_file(name: str) -> bool:
    return name.lower().endswith(SPEC_EXTENSIONS)


class SpecStore(Protocol):
    """Interfaz mínima que necesitan las rutas: leer un documento crudo."""

    def read(self, location: str) -> bytes:
        """
        Devuelve los bytes del documento en `location`.

        Raises:
            DocumentNotFound: Si el documento no existe.
            StoreUnavailable: Si el store no responde.
        """
        ...


# ============================================================
# Filesystem
# ============================================================

class LocalSpecStore:
    """
    Store sobre un directorio local.

    Cada subdirectorio directo de `root` es una API y debe contener un
    documento (se prefiere `openapi.yaml`).
    """

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def list_spec_dirs(self) -> List[Path]:
        if not self.root.is_dir():
            raise StoreUnavailable(f"El directorio de datos no existe: {self.root}")
        try:
            return sorted(p for p in self.root.iterdir() if p.is_dir())
        except OSError as e:
            raise StoreUnavailable(f"No se pudo listar {self.root}: {e}") from e

    def find_document(self, spec_dir: Path) -> Optional[Path]:
        """
        Elige el documento de un subdirectorio.

        `openapi.yaml` si existe; si no, el primer `.yaml`/`.yml` por nombre.
        Si hay más de uno, el resto se ignora con un warning.

        Raises:
            StoreUnavailable: Si el subdirectorio no se puede leer.
        """
        try:
            candidates = sorted(
                p for p in spec_dir.iterdir() if p.is_file() and is_spec_file(p.name)
            )
        except OSError as e:
            raise StoreUnavailable(f"No se pudo listar {spec_dir}: {e}") from e
        if not candidates:
            return None

        preferred = spec_dir / PREFERRED_FILE_NAME
        chosen = preferred if preferred in candidates else candidates[0]
        if len(candidates) > 1:
            ignored = [p.name for p in candidates if p != chosen]
            logger.warning(f"⚠️  {spec_dir.name}: se usa {chosen.name}, se ignoran {ignored}")
        return chosen

    def read(self, location: str) -> bytes:
        try:
            return Path(location).read_bytes()
        except FileNotFoundError as e:
            raise DocumentNotFound(location) from e
        except OSError as e:
            raise StoreUnavailable(f"No se pudo leer {location}: {e}") from e


# ============================================================
# S3
# ============================================================

def _normalize_prefix(prefix: str) -> str:
    prefix = (prefix or "").strip().lstrip("/")
    if prefix and not prefix.endswith("/"):
        prefix += "/"
    return prefix


class S3SpecStore:
    """
    Store sobre un bucket S3 (AWS, MinIO, LocalStack...).

    Layout esperado:
        <prefix><carpeta>/<archivo>.yaml

    Si no hay carpetas bajo el prefijo, los documentos se listan en plano.
    """

    def __init__(
        self,
        bucket: str,
        prefix: str = "",
        region: str = "eu-west-1",
        endpoint_url: Optional[str] = None,
        access_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        client: Any = None,
    ):
        self.bucket = bucket
        self.prefix = _normalize_prefix(prefix)

        if client is None:
            client_kwargs = {
                "service_name": "s3",
                "region_name": region,
                "config": Config(signature_version="s3v4"),
            }
            if endpoint_url:
                client_kwargs["endpoint_url"] = endpoint_url
            if access_key and secret_key:
                client_kwargs["aws_access_key_id"] = access_key
                client_kwargs["aws_secret_access_key"] = secret_key
            client = boto3.client(**client_kwargs)

        self.client = client
        logger.info(f"🪣 S3 store: bucket={bucket} prefix='{self.prefix}' region={region}")

    def _paginate(self, prefix: str):
        paginator = self.client.get_paginator("list_objects_v2")
        try:
            for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix, Delimiter="/"):
                yield page
        except (ClientError, BotoCoreError) as e:
            raise StoreUnavailable(f"No se pudo listar s3://{self.bucket}/{prefix}: {e}") from e

    def list_folders(self) -> List[str]:
        """Nombres de las carpetas (common prefixes) directamente bajo el prefijo."""
        folders = []
        for page in self._paginate(self.prefix):
            for common in page.get("CommonPrefixes", []):
                name = common["Prefix"][len(self.prefix):].strip("/")
                if name:
                    folders.append(name)
        return sorted(folders)

    def list_documents(self, folder: str = "") -> List[str]:
        """Keys de los documentos YAML dentro de `folder` (o del prefijo si es vacío)."""
        prefix = f"{self.prefix}{folder}/" if folder else self.prefix
        keys = []
        for page in self._paginate(prefix):
            for obj in page.get("Contents", []):
                key = obj["Key"]
                if is_spec_file(key):
                    keys.append(key)
        return sorted(keys)

    def read(self, location: str) -> bytes:
        try:
            response = self.client.get_object(Bucket=self.bucket, Key=location)
            return response["Body"].read()
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("NoSuchKey", "404"):
                raise DocumentNotFound(location) from e
            raise StoreUnavailable(f"Error leyendo s3://{self.bucket}/{location}: {e}") from e
        except BotoCoreError as e:
            raise StoreUnavailable(f"Error leyendo s3://{self.bucket}/{location}: {e}") from e


def build_store(settings) -> LocalSpecStore | S3SpecStore:
    """
    Crea el store indicado por `settings.spec_source` ("local" o "s3").

    Raises:
        ValueError: Si `spec_source` no es un valor conocido.
    """
    if settings.spec_source == "local":
        return LocalSpecStore(settings.data_dir)
    if settings.spec_source == "s3":
        return S3SpecStore(
            bucket=settings.s3_bucket_name,
            prefix=settings.s3_prefix,
            region=settings.aws_region,
            endpoint_url=settings.aws_endpoint_url,
            access_key=settings.aws_access_key_id,
            secret_key=settings.aws_secret_access_key,
        )
    raise ValueError(f"SPEC_SOURCE desconocido: {settings.spec_source!r} (usar 'local' o 's3')")
