"""
API HTTP del portal de documentación.

Esta capa compone el catálogo (docs_hub.loader) y el motor de plantillas
(docs_hub.templating) en:
- Landing con todas las APIs
- Un visor de documentación por API
- Passthrough del YAML crudo
- Health check y handlers de error
"""
