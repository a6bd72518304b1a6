from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd

from process_miner.lib.constants import (
    COLUMN_ACTIVITY,
    COLUMN_CASE_ID,
    COLUMN_COST,
    COLUMN_EVENT_ORDER,
    COLUMN_RESOURCE,
    COLUMN_TIMESTAMP,
)
from process_miner.lib.event_log.models import ProcessEvent

EVENT_COLUMNS: tuple[str, ...] = (
    COLUMN_CASE_ID,
    COLUMN_ACTIVITY,
    COLUMN_TIMESTAMP,
    COLUMN_RESOURCE,
    COLUMN_COST,
    COLUMN_EVENT_ORDER,
)


def as_event(item: ProcessEvent | Mapping[str, Any]) -> ProcessEvent:
    if isinstance(item, ProcessEvent):
        return item
    if isinstance(item, Mapping):
        return ProcessEvent.from_mapping(item)
    raise TypeError(
        f"Evento deve ser ProcessEvent ou Mapping, recebido: {type(item).__name__}"
    )


def events_to_dataframe(
    events: Iterable[ProcessEvent | Mapping[str, Any]],
) -> pd.DataFrame:
    """Materializa os eventos em um **novo** DataFrame.

    A coluna ``COLUMN_EVENT_ORDER`` guarda a posição original de cada evento e
    serve de desempate na ordenação por tempo. A coleção de entrada não é
    modificada.
    """
    rows = [
        {
            COLUMN_CASE_ID: ev.case_id,
            COLUMN_ACTIVITY: ev.activity,
            COLUMN_TIMESTAMP: ev.timestamp,
            COLUMN_RESOURCE: ev.resource,
            COLUMN_COST: ev.cost,
            COLUMN_EVENT_ORDER: position,
        }
        for position, ev in enumerate(map(as_event, events))
    ]
    return pd.DataFrame(rows, columns=list(EVENT_COLUMNS))


def dataframe_to_events(df: pd.DataFrame) -> list[ProcessEvent]:
    """Operação inversa de :func:`events_to_dataframe` (ignora colunas extras)."""
    out: list[ProcessEvent] = []
    for row in df.to_dict(orient="records"):
        resource = row.get(COLUMN_RESOURCE)
        cost = row.get(COLUMN_COST)
        out.append(
            ProcessEvent(
                case_id=str(row[COLUMN_CASE_ID]),
                activity=str(row[COLUMN_ACTIVITY]),
                timestamp=str(row[COLUMN_TIMESTAMP]),
                resource=None if pd.isna(resource) else str(resource),
                cost=None if pd.isna(cost) else float(cost),
            )
        )
    return out
