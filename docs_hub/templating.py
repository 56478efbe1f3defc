"""
Motor de plantillas mínimo para las páginas HTML del portal.

Soporta exactamente dos construcciones:

- Bloques repetidos:  {{#apis}} ... {{api.title}} ... {{/apis}}
  El fragmento se instancia una vez por item de la lista `data["apis"]`;
  `{{alias.campo}}` toma `item["campo"]`. Si la lista no existe (o no es una
  lista) el bloque queda vacío.
- Variables:  {{title}} → `data["title"]`, o vacío si no existe. También
  dentro de un bloque, donde se resuelven junto con los campos del item.

Los bloques se resuelven antes que las variables y el texto sustituido no se
vuelve a escanear: un valor que contenga "{{x}}" sale tal cual.

No escapa HTML. Quien arma `data` es responsable de escapar.
"""

import re
from pathlib import Path
from typing import Any, Mapping

_TOKEN_RE = re.compile(
    r"\{\{#(?P<block>\w+)\}\}(?P<body>.*?)\{\{/(?P=block)\}\}"
    r"|\{\{(?P<var>\w+)\}\}",
    re.DOTALL,
)
# Dentro de un bloque: {{alias.campo}} (item) o {{nombre}} (data de nivel superior)
_FRAGMENT_VAR_RE = re.compile(r"\{\{(?:(?P<alias>\w+)\.)?(?P<name>\w+)\}\}")


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _render_item(fragment: str, item: Any, data: Mapping[str, Any]) -> str:
    fields = item if isinstance(item, Mapping) else {}

    def replace(match: re.Match) -> str:
        source = fields if match.group("alias") else data
        return _text(source.get(match.group("name")))

    return _FRAGMENT_VAR_RE.sub(replace, fragment)


def _render_block(name: str, fragment: str, data: Mapping[str, Any]) -> str:
    items = data.get(name)
    if not isinstance(items, (list, tuple)):
        return ""
    return "".join(_render_item(fragment, item, data) for item in items)


def render(template_text: str, data: Mapping[str, Any]) -> str:
    """
    Renderiza `template_text` con `data`.

    Nunca lanza por datos faltantes: variables ausentes y bloques sin lista
    se reemplazan por texto vacío.
    """
    def replace(match: re.Match) -> str:
        if match.group("block"):
            return _render_block(match.group("block"), match.group("body"), data)
        return _text(data.get(match.group("var")))

    return _TOKEN_RE.sub(replace, template_text)


def load_template(template_path: str | Path) -> str:
    """Lee una plantilla desde disco (se carga una vez, al crear el router)."""
    return Path(template_path).read_text(encoding="utf-8")
