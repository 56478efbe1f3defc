#!/usr/bin/env python3
"""
Script helper para ejecutar el portal con uvicorn.
Ejecuta desde la raíz del proyecto para asegurar que Python encuentre los módulos 'api' y 'docs_hub'.
"""

import sys
from pathlib import Path

# Asegurar que el directorio raíz esté en el PYTHONPATH
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

if __name__ == "__main__":
    try:
        import uvicorn
        from docs_hub.config import get_settings
    except ImportError as e:
        print(f"❌ Error: No se pudieron importar las dependencias. ¿Activaste el venv?")
        print(f"   Ejecuta: pip install -e .")
        print(f"   Error: {e}")
        sys.exit(1)

    settings = get_settings()
    print(f"🚀 Iniciando portal en http://localhost:{settings.port}")
    uvicorn.run(
        "api.main:create_app_from_settings",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload="--reload" in sys.argv,
    )
