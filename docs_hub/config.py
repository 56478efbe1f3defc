# docs_hub/config.py
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional
import os

from dotenv import load_dotenv

"""
docs_hub.config
===============

Configuración centralizada del portal de documentación.

Este módulo define:
- La estructura de configuración (`Settings`)
- La carga de variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Convenciones
------------
- Las variables de entorno se cargan desde un archivo `.env` si existe.
- Hay defaults para todo salvo las credenciales del object store: si no
  están, boto3 usa su cadena de credenciales habitual (perfil, rol IAM, etc.).
- Este módulo NO crea clientes ni carga especificaciones; solo expone valores.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()


@dataclass
class Settings:
    """
    Contenedor tipado de configuración del portal.

    Attributes
    ----------
    port / host:
        Dónde escucha el servidor HTTP.
    spec_source:
        "s3" (object store, layout por carpetas) o "local" (árbol de directorios).
    data_dir:
        Raíz del layout local: `<data_dir>/<carpeta>/openapi.yaml`.
    s3_bucket_name / s3_prefix:
        Bucket y prefijo bajo el cual viven las carpetas de especificaciones.
    aws_region / aws_endpoint_url:
        Región y endpoint opcional (MinIO, LocalStack, ...).
    aws_access_key_id / aws_secret_access_key:
        Credenciales explícitas (opcionales).
    public_dir:
        Directorio de assets estáticos; las plantillas HTML viven en `public/templates`.
    """

    port: int = 3000
    host: str = "0.0.0.0"

    spec_source: str = "s3"
    data_dir: str = "data"

    # Object store
    s3_bucket_name: str = "ewa-documentation"
    s3_prefix: str = ""
    aws_region: str = "eu-west-1"
    aws_endpoint_url: Optional[str] = None
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None

    # Presentación
    public_dir: str = "public"
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def templates_dir(self) -> str:
        return os.path.join(self.public_dir, "templates")


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - PORT (default: 3000), HOST (default: "0.0.0.0")
    - SPEC_SOURCE (default: "s3"), DATA_DIR (default: "data")
    - S3_BUCKET_NAME (default: "ewa-documentation"), S3_PREFIX (default: "")
    - AWS_REGION (default: "eu-west-1"), AWS_ENDPOINT_URL
    - AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY
    - PUBLIC_DIR (default: "public"), LOG_LEVEL (default: "INFO")
    - CORS_ORIGINS (default: "*", separado por comas)

    En tests conviene llamar `get_settings.cache_clear()` después de
    modificar el entorno.
    """
    return Settings(
        port=int(os.getenv("PORT", "3000")),
        host=os.getenv("HOST", "0.0.0.0"),
        spec_source=os.getenv("SPEC_SOURCE", "s3").strip().lower(),
        data_dir=os.getenv("DATA_DIR", "data"),
        s3_bucket_name=os.getenv("S3_BUCKET_NAME", "ewa-documentation"),
        s3_prefix=os.getenv("S3_PREFIX", ""),
        aws_region=os.getenv("AWS_REGION", "eu-west-1"),
        aws_endpoint_url=os.getenv("AWS_ENDPOINT_URL") or None,
        aws_access_key_id=os.getenv("AWS_ACCESS_KEY_ID") or None,
        aws_secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY") or None,
        public_dir=os.getenv("PUBLIC_DIR", "public"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
    )
