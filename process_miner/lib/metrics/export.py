from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from process_miner.lib.event_log import ProcessEvent
from process_miner.lib.event_log.frame import as_event
from process_miner.lib.metrics.models import ProcessMetrics


def metrics_to_json(metrics: ProcessMetrics, *, indent: int | None = 2) -> str:
    return json.dumps(metrics.to_dict(), indent=indent, ensure_ascii=False)


def events_to_json(
    events: Iterable[ProcessEvent | Mapping[str, Any]], *, indent: int | None = 2
) -> str:
    """Serializa os eventos no mesmo formato aceito pelo upload JSON."""
    return json.dumps(
        [as_event(ev).to_dict() for ev in events], indent=indent, ensure_ascii=False
    )
