"""Process Miner: métricas de mineração de processos a partir de logs de eventos."""

from process_miner.lib.event_log import ProcessEvent
from process_miner.lib.metrics import (
    DirectlyFollowsGraph,
    ProcessMetrics,
    compute_metrics,
    format_duration,
)

__all__ = [
    "ProcessEvent",
    "ProcessMetrics",
    "DirectlyFollowsGraph",
    "compute_metrics",
    "format_duration",
]
