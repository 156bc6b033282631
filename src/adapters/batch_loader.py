"""Carga de lotes de expresiones (JSON).

Soporta formatos tipo:
- {"expressions": ["1,2", "//;\\n1;2", null, ...]}
- ["1,2", "//;\\n1;2", null, ...]

Se usa JSON y no una expresión por línea porque las expresiones con
delimitador custom contienen saltos de línea.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field


class ExpressionBatch(BaseModel):
    expressions: list[str | None] = Field(default_factory=list)


def load_batch(path: Path) -> ExpressionBatch:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    if isinstance(data, list):
        data = {"expressions": data}
    return ExpressionBatch.model_validate(data)
