from collections.abc import Iterable, Mapping

from process_miner.lib.constants import (
    ACTIVITY_ALIASES,
    CASE_ID_ALIASES,
    COLUMN_ACTIVITY,
    COLUMN_CASE_ID,
    COLUMN_COST,
    COLUMN_RESOURCE,
    COLUMN_TIMESTAMP,
    COST_ALIASES,
    RESOURCE_ALIASES,
    TIMESTAMP_ALIASES,
)
from process_miner.lib.utils.exceptions import LogFormatError

REQUIRED_COLUMNS: Mapping[str, tuple[str, ...]] = {
    COLUMN_CASE_ID: CASE_ID_ALIASES,
    COLUMN_ACTIVITY: ACTIVITY_ALIASES,
    COLUMN_TIMESTAMP: TIMESTAMP_ALIASES,
}
OPTIONAL_COLUMNS: Mapping[str, tuple[str, ...]] = {
    COLUMN_RESOURCE: RESOURCE_ALIASES,
    COLUMN_COST: COST_ALIASES,
}

_MISSING_HINTS: Mapping[str, str] = {
    COLUMN_CASE_ID: "caseId (e.g., case_id, casenumber)",
    COLUMN_ACTIVITY: "activity (e.g., event_name, task)",
    COLUMN_TIMESTAMP: "timestamp (e.g., time_stamp, event_time)",
}


def normalize_header(header: str) -> str:
    """Remove BOM, aspas e espaços; devolve o cabeçalho em minúsculas."""
    return str(header).lstrip("\ufeff").strip().strip("\"'").strip().lower()


def find_column(headers: Iterable[str], aliases: Iterable[str]) -> str | None:
    """Primeiro cabeçalho (original) que corresponde a um alias, na ordem dos aliases."""
    by_name: dict[str, str] = {}
    for header in headers:
        by_name.setdefault(normalize_header(header), header)
    for alias in aliases:
        if alias in by_name:
            return by_name[alias]
    return None


def verify_format(headers: Iterable[str]) -> dict[str, str]:
    """
    Valida os cabeçalhos e devolve ``{coluna_lógica: cabeçalho_original}``.
    Lança LogFormatError se faltar coluna obrigatória.
    """
    headers = list(headers)
    mapping: dict[str, str] = {}
    missing: list[str] = []
    for logical, aliases in REQUIRED_COLUMNS.items():
        found = find_column(headers, aliases)
        if found is None:
            missing.append(_MISSING_HINTS[logical])
        else:
            mapping[logical] = found
    if missing:
        raise LogFormatError(
            "CSV must contain compatible 'caseId', 'activity', and 'timestamp' "
            f"columns (case-insensitive). Missing or unrecognized: {', '.join(missing)}."
        )
    for logical, aliases in OPTIONAL_COLUMNS.items():
        found = find_column(headers, aliases)
        if found is not None:
            mapping[logical] = found
    return mapping
