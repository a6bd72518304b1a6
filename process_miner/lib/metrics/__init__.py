from .engine import compute_metrics
from .export import events_to_json, metrics_to_json
from .formatting import format_duration
from .models import DFGEdge, DFGNode, DirectlyFollowsGraph, ProcessMetrics
from .tables import activity_table, variant_table

__all__ = [
    "compute_metrics",
    "format_duration",
    "ProcessMetrics",
    "DirectlyFollowsGraph",
    "DFGNode",
    "DFGEdge",
    "activity_table",
    "variant_table",
    "metrics_to_json",
    "events_to_json",
]
