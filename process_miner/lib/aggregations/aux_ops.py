"""Auxiliary operations (pre-processing) for case aggregations."""
from __future__ import annotations

from typing import Sequence

import pandas as pd

from process_miner.lib.aggregations.exceptions import MissingColumnsError
from process_miner.lib.constants import (
    COLUMN_EVENT_ORDER,
    COLUMN_TIMESTAMP,
    COLUMN_TIMESTAMP_MS,
)
from process_miner.lib.timestamps import parse_timestamps


class BaseAuxOp:
    """Operação auxiliar aplicada *antes* da agregação.

    Deve retornar um novo DataFrame (não deve mutar o original).
    """

    required_columns: Sequence[str] = ()

    def _check_columns(self, df: pd.DataFrame) -> None:
        missing = [c for c in self.required_columns if c not in df.columns]
        if missing:
            raise MissingColumnsError(f"Colunas ausentes: {missing}")

    def apply(self, df: pd.DataFrame) -> pd.DataFrame:  # pragma: no cover - interface
        raise NotImplementedError


class ParseTimestampsOp(BaseAuxOp):
    """Adiciona `__TS_MS__` (ms desde a época) a partir de `TIMESTAMP`.

    Timestamps inválidos recebem o sentinela da época; a coluna original
    permanece intacta.
    """

    required_columns = (COLUMN_TIMESTAMP,)

    def apply(self, df: pd.DataFrame) -> pd.DataFrame:
        self._check_columns(df)
        df2 = df.copy()
        df2[COLUMN_TIMESTAMP_MS] = parse_timestamps(df2[COLUMN_TIMESTAMP])
        return df2


class SortByTimeOp(BaseAuxOp):
    """Ordena os eventos por `__TS_MS__` com desempate por `__EV_ORDER__`.

    A ordenação é estável: eventos com o mesmo instante mantêm a ordem de
    entrada. Como `groupby(..., sort=False)` preserva a ordem das linhas dentro
    de cada grupo, cada case chega ordenado aos agregadores.
    """

    required_columns = (COLUMN_TIMESTAMP_MS, COLUMN_EVENT_ORDER)

    def apply(self, df: pd.DataFrame) -> pd.DataFrame:
        self._check_columns(df)
        return df.sort_values(
            [COLUMN_TIMESTAMP_MS, COLUMN_EVENT_ORDER], kind="mergesort"
        ).copy()
