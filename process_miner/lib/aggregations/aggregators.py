"""Concrete case aggregators (variant, duration, directly-follows)."""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd

from process_miner.lib.aggregations.base import BaseCaseAggregator
from process_miner.lib.aggregations.models import VariantInfo
from process_miner.lib.constants import (
    COLUMN_ACTIVITY,
    COLUMN_CASE_ID,
    COLUMN_TIMESTAMP_MS,
    EPOCH_SENTINEL_MS,
    VARIANT_JOINER,
)

logger = logging.getLogger(__name__)


def rank_variants(
    variant_counts: dict[str, int], *, joiner: str = VARIANT_JOINER
) -> dict[str, VariantInfo]:
    """Atribui `variant 1..n` em ordem decrescente de frequência.

    Empates mantêm a ordem de primeira ocorrência de `variant_counts`.
    """
    ordered = sorted(variant_counts.items(), key=lambda kv: -kv[1])
    out: dict[str, VariantInfo] = {}
    for idx, (variant_str, frequency) in enumerate(ordered, start=1):
        out[variant_str] = VariantInfo(
            variant_id=f"variant {idx}",
            variant=variant_str,
            frequency=int(frequency),
            length=len(variant_str.split(joiner)) if variant_str else 0,
        )
    return out


class CaseVariantAggregator(BaseCaseAggregator):
    """Computa a **variante** de cada case e devolve `{case_id: VariantInfo}`.

    Regras:
      - Espera eventos já ordenados (`ParseTimestampsOp` + `SortByTimeOp`).
      - Concatena `ACTIVITY` com `joiner` (padrão: " -> ").
      - Frequência por variante é calculada **globalmente** em `prepare`.
    """

    required_columns = (COLUMN_CASE_ID, COLUMN_ACTIVITY)

    def __init__(self, *, joiner: str = VARIANT_JOINER) -> None:
        self.joiner = joiner

    def prepare(
        self, df: pd.DataFrame
    ) -> tuple[dict[Any, str], dict[str, VariantInfo]]:
        self._check_columns(df)
        seq = df.groupby(COLUMN_CASE_ID, sort=False, dropna=False)[
            COLUMN_ACTIVITY
        ].agg(list)
        case_to_variant: dict[Any, str] = {
            case_id: self.joiner.join(map(str, activities))
            for case_id, activities in seq.items()
        }

        counts: dict[str, int] = {}
        for variant_str in case_to_variant.values():
            counts[variant_str] = counts.get(variant_str, 0) + 1

        return case_to_variant, rank_variants(counts, joiner=self.joiner)

    def compute_case(
        self,
        case_df: pd.DataFrame,
        state: tuple[dict[Any, str], dict[str, VariantInfo]],
    ) -> VariantInfo:
        case_to_variant, var_to_info = state
        case_id = case_df.iloc[0][COLUMN_CASE_ID]
        return var_to_info[case_to_variant[case_id]]


class CaseDurationAggregator(BaseCaseAggregator):
    """Calcula a duração de cada caso em milissegundos.

    Pré-requisitos
    ---------------
    - ``ParseTimestampsOp`` e ``SortByTimeOp`` aplicados antes da agregação.

    Retorno
    ------
    - int | None: ``último - primeiro`` instante do case, ou ``None`` quando o
      primeiro ou o último timestamp é o sentinela da época (timestamp
      inválido) ou a diferença é negativa.
    """

    required_columns = (COLUMN_CASE_ID, COLUMN_TIMESTAMP_MS)

    def prepare(self, df: pd.DataFrame) -> None:
        self._check_columns(df)
        return None

    def compute_case(self, case_df: pd.DataFrame, state: Any) -> int | None:
        start = int(case_df[COLUMN_TIMESTAMP_MS].iloc[0])
        end = int(case_df[COLUMN_TIMESTAMP_MS].iloc[-1])
        if start <= EPOCH_SENTINEL_MS or end <= EPOCH_SENTINEL_MS:
            return None
        duration = end - start
        return duration if duration >= 0 else None


class DirectlyFollowsAggregator(BaseCaseAggregator):
    """Lista os pares `(origem, destino)` de atividades consecutivas do case.

    Auto-laços (`A` seguido de `A`) são pares válidos. Um case com um único
    evento não gera pares.
    """

    required_columns = (COLUMN_CASE_ID, COLUMN_ACTIVITY)

    def prepare(self, df: pd.DataFrame) -> None:
        self._check_columns(df)
        return None

    def compute_case(
        self, case_df: pd.DataFrame, state: Any
    ) -> list[tuple[str, str]]:
        activities = case_df[COLUMN_ACTIVITY].tolist()
        return list(zip(activities[:-1], activities[1:]))
