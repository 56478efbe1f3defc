"""
Core del portal de documentación de APIs.

- Configuración (`config`)
- Stores de documentos: filesystem y S3 (`storage`)
- Carga del catálogo de especificaciones (`loader`)
- Motor de plantillas HTML (`templating`)

La capa HTTP vive en el paquete `api`.
"""

__version__ = "0.1.0"
