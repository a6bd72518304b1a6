"""Aggregations (lazy) por caso sobre o log de eventos.

Reexporta a API pública dividida em módulos menores dentro de
`process_miner.lib.aggregations`.
"""

from __future__ import annotations

# Concrete aggregators
from process_miner.lib.aggregations.aggregators import (
    CaseDurationAggregator,
    CaseVariantAggregator,
    DirectlyFollowsAggregator,
    rank_variants,
)

# Aux ops
from process_miner.lib.aggregations.aux_ops import (
    BaseAuxOp,
    ParseTimestampsOp,
    SortByTimeOp,
)

# Base aggregator interface
from process_miner.lib.aggregations.base import BaseCaseAggregator

# Re-export exceptions
from process_miner.lib.aggregations.exceptions import (
    AggregationError,
    MissingColumnsError,
)

# Data models
from process_miner.lib.aggregations.models import VariantInfo

# Lazy view
from process_miner.lib.aggregations.view import CaseAggView

__all__ = [
    "AggregationError",
    "MissingColumnsError",
    "BaseAuxOp",
    "ParseTimestampsOp",
    "SortByTimeOp",
    "VariantInfo",
    "BaseCaseAggregator",
    "CaseVariantAggregator",
    "CaseDurationAggregator",
    "DirectlyFollowsAggregator",
    "rank_variants",
    "CaseAggView",
]
