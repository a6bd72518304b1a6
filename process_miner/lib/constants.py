"""Nomes de colunas e marcadores compartilhados pela biblioteca."""

from __future__ import annotations

COLUMN_CASE_ID = "CASE_ID"
COLUMN_ACTIVITY = "ACTIVITY"
COLUMN_TIMESTAMP = "TIMESTAMP"
COLUMN_RESOURCE = "RESOURCE"
COLUMN_COST = "COST"

# Colunas internas (derivadas) usadas pelo pipeline de agregação
COLUMN_EVENT_ORDER = "__EV_ORDER__"
COLUMN_TIMESTAMP_MS = "__TS_MS__"

VARIANT_JOINER = " -> "

# Instante "zero" usado quando o timestamp não pode ser interpretado
EPOCH_SENTINEL_MS = 0

UNKNOWN_DURATION = "N/A"
ZERO_DURATION = "0 ms"

# Aliases (minúsculos) aceitos nos cabeçalhos de CSV
CASE_ID_ALIASES: tuple[str, ...] = (
    "caseid",
    "case_id",
    "casenumber",
    "case number",
    "traceid",
    "trace_id",
)
ACTIVITY_ALIASES: tuple[str, ...] = (
    "activity",
    "event",
    "task",
    "activityname",
    "activity_name",
    "event_name",
    "task_name",
)
TIMESTAMP_ALIASES: tuple[str, ...] = (
    "timestamp",
    "time_stamp",
    "time",
    "date",
    "datetime",
    "start_time",
    "starttime",
    "end_time",
    "endtime",
    "event_time",
)
RESOURCE_ALIASES: tuple[str, ...] = (
    "resource",
    "user",
    "agent",
    "staff",
    "resource_name",
    "resourcename",
    "performer",
)
COST_ALIASES: tuple[str, ...] = ("cost", "amount", "value", "costs")
