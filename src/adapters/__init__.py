from adapters.batch_loader import ExpressionBatch, load_batch
from adapters.json_exporter import export_results_json

__all__ = [
    "ExpressionBatch",
    "export_results_json",
    "load_batch",
]
