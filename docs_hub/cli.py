"""
docs_hub.cli
============

Punto de entrada de línea de comandos.

Comandos:
- `list`: carga el catálogo con la configuración actual y lo imprime.
  Sirve para verificar credenciales / layout del bucket sin levantar el server.
- `serve`: levanta la API con uvicorn (usa `api.main:create_app_from_settings`).

Uso:
    docs-hub list
    docs-hub serve --port 3000 --reload
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import get_settings
from .errors import DocsHubError
from .loader import load_specifications
from .storage import build_store


def _cmd_list(args: argparse.Namespace) -> int:
    settings = get_settings()
    try:
        catalog = load_specifications(build_store(settings))
    except (DocsHubError, ValueError) as e:
        print(f"❌ No se pudo cargar el catálogo: {e}", file=sys.stderr)
        return 1

    if not catalog:
        print("⚠️  No se encontraron especificaciones.")
        return 0

    for key, entry in catalog.items():
        print(f"{key}\t{entry.title}\tv{entry.version}\t[{entry.group}]\t{entry.source_location}")
    print(f"\n📚 {len(catalog)} especificaciones")
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "api.main:create_app_from_settings",
        factory=True,
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docs-hub", description="Portal de documentación de APIs")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="Listar las especificaciones del catálogo")
    p_list.set_defaults(func=_cmd_list)

    p_serve = sub.add_parser("serve", help="Levantar el servidor HTTP")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    p_serve.add_argument("--reload", action="store_true")
    p_serve.set_defaults(func=_cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, get_settings().log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
