#!/usr/bin/env python3
"""
Script de verificación para diagnosticar problemas con el portal.

Verifica dependencias, configuración, carga del catálogo y creación de la app
sin levantar el servidor.

Ejecutar: python tools/check_api.py
"""

import sys
from pathlib import Path

# Agregar raíz del proyecto al path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

print("🔍 Verificando dependencias y estructura del portal...\n")

# 1) Verificar dependencias
print("1. Verificando dependencias:")
try:
    import fastapi
    import uvicorn
    import yaml
    import boto3
    print(f"   ✅ FastAPI {fastapi.__version__}")
    print(f"   ✅ Uvicorn {uvicorn.__version__}")
    print(f"   ✅ PyYAML {yaml.__version__}")
    print(f"   ✅ boto3 {boto3.__version__}")
except ImportError as e:
    print(f"   ❌ Dependencia faltante: {e}")
    sys.exit(1)

# 2) Configuración
print("\n2. Configuración:")
from docs_hub.config import get_settings
from docs_hub.errors import DocsHubError

settings = get_settings()
print(f"   ✅ SPEC_SOURCE={settings.spec_source}")
if settings.spec_source == "local":
    print(f"   ✅ DATA_DIR={settings.data_dir}")
else:
    print(f"   ✅ S3 bucket={settings.s3_bucket_name} prefix='{settings.s3_prefix}' region={settings.aws_region}")
    if not settings.aws_access_key_id:
        print("   ⚠️  Sin credenciales explícitas: se usa la cadena de credenciales de boto3")

templates = Path(settings.templates_dir)
for name in ("landing.html", "api-docs.html"):
    status = "✅" if (templates / name).exists() else "❌"
    print(f"   {status} {templates / name}")

# 3) Catálogo
print("\n3. Cargando catálogo:")
from docs_hub.loader import load_specifications
from docs_hub.storage import build_store

try:
    store = build_store(settings)
    catalog = load_specifications(store)
except (DocsHubError, ValueError) as e:
    print(f"   ❌ No se pudo cargar el catálogo: {e}")
    sys.exit(1)

for key, entry in catalog.items():
    print(f"   ✅ {key}: {entry.title} v{entry.version}")
if not catalog:
    print("   ⚠️  Catálogo vacío")

# 4) Verificar que se puede crear la app
print("\n4. Verificando creación de la app FastAPI:")
try:
    from api.main import create_app
    app = create_app(catalog, store, settings)
    print("   ✅ App FastAPI creada correctamente")
    print(f"   ✅ Rutas registradas: {len(app.routes)}")
except Exception as e:
    print(f"   ❌ Error creando app: {e}")
    sys.exit(1)

print("\n✅ Todo OK")
