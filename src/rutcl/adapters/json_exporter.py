"""Exportación JSON de reportes.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines (`rutcl validate --json`).
- Salida estable (claves ordenadas) para poder comparar ejecuciones.
"""

from __future__ import annotations

import json
from typing import Sequence

from pydantic import BaseModel


def dump_json(payload: BaseModel | Sequence[BaseModel]) -> str:
    """Serializa uno o varios modelos a JSON UTF-8 con formato estable."""

    if isinstance(payload, BaseModel):
        data: object = payload.model_dump(mode="json")
    else:
        data = [item.model_dump(mode="json") for item in payload]
    return json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
