import json
import logging
import os
from pathlib import Path
from typing import Any

import pandas as pd
import pm4py

from process_miner.lib.constants import (
    COLUMN_ACTIVITY,
    COLUMN_CASE_ID,
    COLUMN_COST,
    COLUMN_RESOURCE,
    COLUMN_TIMESTAMP,
)
from process_miner.lib.event_log import ProcessEvent
from process_miner.lib.utils.exceptions import LogFormatError
from process_miner.lib.utils.verify import verify_format

logger = logging.getLogger(__name__)

_XES_COLUMNS = {
    "case:concept:name": COLUMN_CASE_ID,
    "concept:name": COLUMN_ACTIVITY,
    "time:timestamp": COLUMN_TIMESTAMP,
    "org:resource": COLUMN_RESOURCE,
}


def _file_extension(file: Any, load_options: dict[Any, Any]) -> str:
    name = load_options.get("file_name") or getattr(file, "name", None)
    if name is None and isinstance(file, (str, os.PathLike)):
        name = os.fspath(file)
    return Path(str(name or "")).suffix.lower()


def _read_text(file: Any) -> str:
    if isinstance(file, (str, os.PathLike)):
        return Path(file).read_text(encoding="utf-8-sig")
    content = file.read()
    if isinstance(content, bytes):
        content = content.decode("utf-8-sig")
    return content.lstrip("\ufeff")


def _clean(value: Any) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return str(value).strip()


def _events_from_frame(df: pd.DataFrame) -> list[ProcessEvent]:
    """Converte um DataFrame com colunas lógicas em eventos.

    Linhas sem ``CASE_ID``, ``ACTIVITY`` ou ``TIMESTAMP`` são descartadas
    (com aviso no log). A numeração das linhas considera o cabeçalho.
    """
    costs = (
        pd.to_numeric(df[COLUMN_COST], errors="coerce")
        if COLUMN_COST in df.columns
        else pd.Series(float("nan"), index=df.index)
    )
    events: list[ProcessEvent] = []
    for row_number, (idx, row) in enumerate(df.iterrows(), start=2):
        case_id = _clean(row[COLUMN_CASE_ID])
        activity = _clean(row[COLUMN_ACTIVITY])
        timestamp = _clean(row[COLUMN_TIMESTAMP])
        if not case_id or not activity or not timestamp:
            logger.warning(
                "Ignorando linha %d: campos obrigatórios ausentes "
                "(caseId, activity ou timestamp)",
                row_number,
            )
            continue
        resource = _clean(row[COLUMN_RESOURCE]) if COLUMN_RESOURCE in df.columns else ""
        cost = costs.loc[idx]
        events.append(
            ProcessEvent(
                case_id=case_id,
                activity=activity,
                timestamp=timestamp,
                resource=resource or None,
                cost=None if pd.isna(cost) else float(cost),
            )
        )
    return events


def _load_csv(file: Any, load_options: dict[Any, Any]) -> list[ProcessEvent]:
    try:
        df = pd.read_csv(
            file,
            sep=load_options.get("sep", ","),
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            encoding="utf-8-sig",
        )
    except pd.errors.EmptyDataError as exc:
        raise LogFormatError(
            "CSV file must have a header and at least one data row."
        ) from exc
    except pd.errors.ParserError as exc:
        raise LogFormatError(f"CSV inválido: {exc}") from exc

    mapping = verify_format(df.columns)
    df = df[list(mapping.values())].rename(
        columns={header: logical for logical, header in mapping.items()}
    )
    return _events_from_frame(df)


def _load_json(file: Any) -> list[ProcessEvent]:
    try:
        records = json.loads(_read_text(file))
    except json.JSONDecodeError as exc:
        raise LogFormatError(f"JSON inválido: {exc}") from exc

    if not isinstance(records, list) or not all(
        isinstance(item, dict)
        and item.get("caseId")
        and item.get("activity")
        and item.get("timestamp")
        for item in records
    ):
        raise LogFormatError(
            "Invalid JSON format. Expected an array of events with caseId, "
            "activity, and timestamp."
        )
    try:
        return [ProcessEvent.from_mapping(item) for item in records]
    except (TypeError, ValueError) as exc:
        raise LogFormatError(f"Evento JSON inválido: {exc}") from exc


def _load_xes(file: Any) -> list[ProcessEvent]:
    source = os.fspath(file) if isinstance(file, os.PathLike) else file
    df = pm4py.convert_to_dataframe(pm4py.read_xes(source))
    df = df.rename(columns=_XES_COLUMNS)
    if COLUMN_TIMESTAMP in df.columns:
        df[COLUMN_TIMESTAMP] = df[COLUMN_TIMESTAMP].map(
            lambda ts: "" if pd.isna(ts) else pd.Timestamp(ts).isoformat()
        )
    missing = [
        c for c in (COLUMN_CASE_ID, COLUMN_ACTIVITY, COLUMN_TIMESTAMP) if c not in df
    ]
    if missing:
        raise LogFormatError(f"Faltam atributos obrigatórios no XES: {missing}")
    return _events_from_frame(df.reset_index(drop=True))


def load_dataset(file: Any, load_options: dict[Any, Any]) -> list[ProcessEvent]:
    """
    Carrega um log de eventos em CSV, JSON ou XES e retorna a lista de eventos.

    ``load_options`` aceita ``sep`` (separador do CSV, padrão ``,``) e
    ``file_name`` (usado para detectar o formato quando ``file`` é um buffer).
    """
    ext = _file_extension(file, load_options)
    if ext == ".csv":
        events = _load_csv(file, load_options)
    elif ext == ".json":
        events = _load_json(file)
    elif ext == ".xes":
        events = _load_xes(file)
    else:
        raise LogFormatError("Unsupported file type. Please upload CSV, JSON or XES.")

    if events:
        logger.info("Carregados %d eventos (%s)", len(events), ext)
    else:
        logger.warning("Nenhum evento válido encontrado no arquivo (%s)", ext)
    return events
