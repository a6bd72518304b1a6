"""Conversão de timestamps para milissegundos desde a época (UTC).

Toda a política de degradação fica aqui: valores que não podem ser
interpretados viram ``EPOCH_SENTINEL_MS`` em vez de lançar exceção. Esses
eventos ordenam primeiro dentro do caso e invalidam a duração do caso.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Any

import pandas as pd
from dateutil import parser as date_parser
from pandas.errors import OutOfBoundsDatetime

from process_miner.lib.constants import EPOCH_SENTINEL_MS

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)

# "GMT+0100" / "UTC-05:00" (formato de Date.toString()); dateutil leria o sinal
# invertido (convenção POSIX), então vira um offset ISO "+01:00".
_GMT_OFFSET = re.compile(r"\b(?:GMT|UTC)\s*([+-])(\d{2}):?(\d{2})\b")
# Nome do fuso entre parênteses no final: "(Central European Standard Time)"
_TZ_NAME_SUFFIX = re.compile(r"\s*\([^()]*\)\s*$")


def normalize_timestamp(value: Any) -> Any:
    """Reescreve sufixos ``GMT±hhmm``/``UTC±hhmm`` como offset ``±hh:mm``."""
    if not isinstance(value, str):
        return value
    text = _TZ_NAME_SUFFIX.sub("", value.strip())
    return _GMT_OFFSET.sub(r"\1\2:\3", text)


def _to_millis(dt: datetime) -> int:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - _EPOCH) // _ONE_MS


def _parse_one(value: Any) -> int:
    """Parse individual via dateutil, sem o limite de datas do pandas."""
    if not isinstance(value, str) or not value.strip():
        return EPOCH_SENTINEL_MS
    try:
        return _to_millis(date_parser.parse(value))
    except (ValueError, OverflowError):
        return EPOCH_SENTINEL_MS


def parse_timestamps(values: pd.Series) -> pd.Series:
    """Converte uma série de timestamps em inteiros (ms desde a época).

    Timestamps sem fuso são tratados como UTC. Entradas vazias, ``None`` ou
    inválidas resultam em ``EPOCH_SENTINEL_MS``. Datas fora do intervalo
    representável pelo pandas (ex.: ano 500 ou 3000) são interpretadas uma a
    uma.
    """
    if values.empty:
        return pd.Series([], index=values.index, dtype="int64")

    normalized = values.astype("object").map(normalize_timestamp)
    try:
        parsed = pd.to_datetime(normalized, errors="coerce", format="mixed", utc=True)
        valid = parsed.notna()
        millis = pd.Series(EPOCH_SENTINEL_MS, index=values.index, dtype="int64")
        millis[valid] = (
            parsed[valid].dt.as_unit("ms").dt.tz_convert(None).astype("int64")
        )
    except OutOfBoundsDatetime:
        return normalized.map(_parse_one).astype("int64")

    retry = ~valid
    if retry.any():
        millis[retry] = normalized[retry].map(_parse_one).astype("int64")
    return millis


def parse_timestamp(value: Any) -> int:
    """Versão escalar de :func:`parse_timestamps`."""
    return int(parse_timestamps(pd.Series([value], dtype="object")).iloc[0])
