from __future__ import annotations

"""
docs_hub.loader
===============

Carga de especificaciones OpenAPI (store → Catalog).

Responsabilidad
----------------
- Enumerar los documentos de un store (local o S3)
- Parsear cada uno desde YAML
- Derivar una key única por documento
- Completar título/versión/descripción con defaults
- Construir el `Catalog`

Diseño
------
- Tolerante a errores por documento: un YAML roto o inaccesible se loguea y
  se descarta, nunca aborta la carga completa.
- Una falla al *listar* el store sí se propaga (`StoreUnavailable`): sin
  listado no hay catálogo que servir.
- Determinista: carpetas y archivos se recorren ordenados.
"""

import logging
from pathlib import PurePosixPath
from typing import Any, Dict, Iterable, Tuple, Union

import yaml

from .errors import DocsHubError, DocumentParseError
from .models import Catalog, SpecInfo, SpecificationEntry
from .storage import LocalSpecStore, S3SpecStore

logger = logging.getLogger(__name__)


# ============================================================
# Helpers
# ============================================================

def derive_key(folder: str, file_name: str) -> str:
    """
    Key del catálogo para un documento.

    - Con carpeta: "<carpeta>-<archivo sin extensión>"  (crm/crm.yaml → "crm-crm")
    - Sin carpeta: "<archivo sin extensión>"
    """
    stem = PurePosixPath(file_name).stem
    return f"{folder}-{stem}" if folder else stem


def parse_document(raw: Union[bytes, str], location: str) -> Dict[str, Any]:
    """
    Parsea el YAML crudo de un documento.

    Raises:
        DocumentParseError: Si no es UTF-8, no es YAML válido, o el nivel
            superior no es un mapping.
    """
    try:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        document = yaml.safe_load(text)
    except UnicodeDecodeError as e:
        raise DocumentParseError(location, f"no es UTF-8 ({e})") from e
    except yaml.YAMLError as e:
        raise DocumentParseError(location, str(e)) from e

    if not isinstance(document, dict):
        raise DocumentParseError(location, "el documento no es un mapping")
    return document


def build_entry(
    key: str,
    document: Dict[str, Any],
    source_location: str,
    folder: str = "",
    file_name: str = "",
) -> SpecificationEntry:
    info = SpecInfo.from_document(document).with_defaults(key)
    return SpecificationEntry(
        key=key,
        title=info.title,
        version=info.version,
        description=info.description,
        folder=folder,
        source_location=source_location,
        file_name=file_name,
        document=document,
    )


def _add_entry(catalog: Catalog, entry: SpecificationEntry) -> None:
    if entry.key in catalog:
        logger.warning(
            f"⚠️  Key duplicada '{entry.key}': se ignora {entry.source_location} "
            f"(ya cargada desde {catalog[entry.key].source_location})"
        )
        return
    catalog[entry.key] = entry
    logger.info(f"✅ Loaded API: {entry.key} ({entry.title} v{entry.version})")


def _load_one(store, location: str, key: str, folder: str, file_name: str) -> SpecificationEntry | None:
    try:
        document = parse_document(store.read(location), location)
    except DocsHubError as e:
        logger.error(f"❌ Error loading {key}: {e}")
        return None
    return build_entry(key, document, location, folder=folder, file_name=file_name)


# ============================================================
# Layouts
# ============================================================

def _iter_local(store: LocalSpecStore) -> Iterable[Tuple[str, str, str, str]]:
    for spec_dir in store.list_spec_dirs():
        try:
            path = store.find_document(spec_dir)
        except DocsHubError as e:
            logger.error(f"❌ Error loading {spec_dir.name}: {e}")
            continue
        if path is None:
            logger.warning(f"⚠️  {spec_dir.name}: no contiene ningún documento YAML")
            continue
        yield spec_dir.name, str(path), "", path.name


def _iter_s3(store: S3SpecStore) -> Iterable[Tuple[str, str, str, str]]:
    folders = store.list_folders()
    if not folders:
        logger.info("📂 No hay carpetas bajo el prefijo, se listan documentos en plano")
        for location in store.list_documents():
            file_name = PurePosixPath(location).name
            yield derive_key("", file_name), location, "", file_name
        return

    for folder in folders:
        for location in store.list_documents(folder):
            file_name = PurePosixPath(location).name
            yield derive_key(folder, file_name), location, folder, file_name


# ============================================================
# API pública
# ============================================================

def load_specifications(store: Union[LocalSpecStore, S3SpecStore]) -> Catalog:
    """
    Construye el catálogo a partir de un store.

    Flujo:
    ------
    1) Enumera los documentos según el layout del store:
       - Local: un subdirectorio por API, key = nombre del subdirectorio.
       - S3: carpetas → documentos, key = "<carpeta>-<archivo>";
         sin carpetas, listado plano con key = nombre del archivo.
    2) Lee y parsea cada documento (errores → log + descarte).
    3) Completa los campos de presentación y descarta keys duplicadas.

    Raises:
        StoreUnavailable: Si el store no se puede listar.
    """
    if isinstance(store, LocalSpecStore):
        sources = _iter_local(store)
    elif isinstance(store, S3SpecStore):
        sources = _iter_s3(store)
    else:
        raise TypeError(f"Store no soportado: {type(store).__name__}")

    catalog: Catalog = {}
    for key, location, folder, file_name in sources:
        entry = _load_one(store, location, key, folder, file_name)
        if entry is not None:
            _add_entry(catalog, entry)

    logger.info(f"📚 {len(catalog)} especificaciones cargadas")
    return catalog
