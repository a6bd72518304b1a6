"""Motor de métricas de mineração de processos.

``compute_metrics`` é uma função pura: materializa os eventos em um
DataFrame próprio, agrupa por case, ordena cada case por tempo (estável) e
agrega variantes, durações e pares directly-follows.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd

from process_miner.lib.aggregations import (
    CaseAggView,
    CaseDurationAggregator,
    CaseVariantAggregator,
    DirectlyFollowsAggregator,
    ParseTimestampsOp,
    SortByTimeOp,
)
from process_miner.lib.constants import COLUMN_ACTIVITY, COLUMN_CASE_ID
from process_miner.lib.event_log import ProcessEvent, events_to_dataframe
from process_miner.lib.metrics.models import (
    DFGEdge,
    DFGNode,
    DirectlyFollowsGraph,
    ProcessMetrics,
)

logger = logging.getLogger(__name__)


def _activity_frequencies(df: pd.DataFrame) -> dict[str, int]:
    sizes = df.groupby(COLUMN_ACTIVITY, sort=False, dropna=False).size()
    return {activity: int(count) for activity, count in sizes.items()}


def _variant_counts(prepared: pd.DataFrame) -> dict[str, int]:
    """Frequência por variante, em ordem decrescente (`variant 1..n`)."""
    _, var_to_info = CaseVariantAggregator().prepare(prepared)
    return {variant: info.frequency for variant, info in var_to_info.items()}


def _average_duration(per_case: dict[Any, int | None]) -> float | None:
    valid = [d for d in per_case.values() if d is not None]
    if not valid:
        return None
    return sum(valid) / len(valid)


def _edge_counts(
    per_case: dict[Any, list[tuple[str, str]]],
) -> dict[tuple[str, str], int]:
    counts: dict[tuple[str, str], int] = {}
    for pairs in per_case.values():
        for pair in pairs:
            counts[pair] = counts.get(pair, 0) + 1
    return counts


def compute_metrics(
    events: Iterable[ProcessEvent | Mapping[str, Any]],
) -> ProcessMetrics:
    """Calcula o snapshot de métricas para uma coleção de eventos.

    A ordem dos eventos entre cases diferentes não afeta o resultado; dentro
    de um case, eventos com o mesmo instante mantêm a ordem de entrada.
    Entrada vazia devolve o snapshot zerado.
    """
    df = events_to_dataframe(events)
    if df.empty:
        return ProcessMetrics()

    prepared = (
        CaseAggView(df)
        .with_aux(ParseTimestampsOp(), SortByTimeOp())
        .prepared()
    )
    view = CaseAggView(prepared)

    variants = _variant_counts(prepared)
    durations = view.with_aggregator(CaseDurationAggregator()).compute()
    edges = _edge_counts(view.with_aggregator(DirectlyFollowsAggregator()).compute())

    activity_frequencies = _activity_frequencies(df)
    dfg = DirectlyFollowsGraph(
        nodes=tuple(
            DFGNode(id=activity, count=count)
            for activity, count in activity_frequencies.items()
        ),
        edges=tuple(
            DFGEdge(source=source, target=target, count=count)
            for (source, target), count in edges.items()
        ),
    )

    metrics = ProcessMetrics(
        total_cases=int(df[COLUMN_CASE_ID].nunique(dropna=False)),
        total_events=int(len(df)),
        average_case_duration_ms=_average_duration(durations),
        activity_frequencies=activity_frequencies,
        variants=variants,
        dfg=dfg,
    )
    logger.debug(
        "compute_metrics: events=%d, cases=%d, variants=%d, edges=%d",
        metrics.total_events,
        metrics.total_cases,
        len(metrics.variants),
        len(dfg.edges),
    )
    return metrics
