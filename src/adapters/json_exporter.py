"""Exportación JSON de resultados.

Por qué JSON:
- Interoperabilidad con scripts y pipelines.
- Deja registro de cada expresión evaluada, incluidos los fallos.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from core.domain.models import CalculationResult


def export_results_json(*, results: Sequence[CalculationResult], output_path: Path) -> Path:
    """Exporta los resultados a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "results": [r.model_dump(mode="json") for r in results],
        "failed": sum(1 for r in results if not r.ok),
    }
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
