"""Tabelas ordenadas (atividades e variantes) a partir de ``ProcessMetrics``."""

from __future__ import annotations

import pandas as pd

from process_miner.lib.aggregations import rank_variants
from process_miner.lib.metrics.models import ProcessMetrics

ACTIVITY_TABLE_COLUMNS = ["activity", "frequency", "percentage"]
VARIANT_TABLE_COLUMNS = ["variant_id", "variant", "frequency", "length"]


def activity_table(metrics: ProcessMetrics, top_n: int | None = None) -> pd.DataFrame:
    """Frequência por atividade, decrescente, com percentual sobre os eventos."""

    if not metrics.activity_frequencies:
        return pd.DataFrame(columns=ACTIVITY_TABLE_COLUMNS)

    total = metrics.total_events
    rows = [
        {
            "activity": activity,
            "frequency": count,
            "percentage": (count / total) * 100 if total > 0 else 0.0,
        }
        for activity, count in metrics.activity_frequencies.items()
    ]
    rows.sort(key=lambda row: -row["frequency"])
    table = pd.DataFrame(rows, columns=ACTIVITY_TABLE_COLUMNS)
    return table if top_n is None else table.head(top_n)


def variant_table(metrics: ProcessMetrics, top_n: int | None = None) -> pd.DataFrame:
    """Retorna as variantes (top-N ou todas) com ``variant 1..n`` por frequência."""

    if not metrics.variants:
        return pd.DataFrame(columns=VARIANT_TABLE_COLUMNS)

    infos = rank_variants(metrics.variants).values()
    table = pd.DataFrame(
        [
            {
                "variant_id": info.variant_id,
                "variant": info.variant,
                "frequency": info.frequency,
                "length": info.length,
            }
            for info in infos
        ],
        columns=VARIANT_TABLE_COLUMNS,
    )
    return table if top_n is None else table.head(top_n)
