"""Estruturas de saída do motor de métricas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DFGNode:
    id: str
    count: int


@dataclass(frozen=True)
class DFGEdge:
    source: str
    target: str
    count: int


@dataclass(frozen=True)
class DirectlyFollowsGraph:
    """Directly-Follows Graph: nós por atividade e arestas por par consecutivo.

    A ordem de ``nodes`` e ``edges`` é a de primeira ocorrência e não tem
    significado; compare via :attr:`node_counts` / :attr:`edge_counts`.
    """

    nodes: tuple[DFGNode, ...] = field(default_factory=tuple)
    edges: tuple[DFGEdge, ...] = field(default_factory=tuple)

    @property
    def node_counts(self) -> dict[str, int]:
        return {node.id: node.count for node in self.nodes}

    @property
    def edge_counts(self) -> dict[tuple[str, str], int]:
        return {(edge.source, edge.target): edge.count for edge in self.edges}

    def top(self, max_nodes: int = 20) -> DirectlyFollowsGraph:
        """Mantém os ``max_nodes`` nós mais frequentes e as arestas entre eles.

        Empates de frequência preservam a ordem original dos nós.
        """
        if max_nodes < 0:
            raise ValueError("max_nodes deve ser >= 0")
        kept = sorted(self.nodes, key=lambda n: -n.count)[:max_nodes]
        kept_ids = {node.id for node in kept}
        return DirectlyFollowsGraph(
            nodes=tuple(kept),
            edges=tuple(
                e for e in self.edges if e.source in kept_ids and e.target in kept_ids
            ),
        )

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            "nodes": [{"id": n.id, "count": n.count} for n in self.nodes],
            "edges": [
                {"source": e.source, "target": e.target, "count": e.count}
                for e in self.edges
            ],
        }


@dataclass(frozen=True)
class ProcessMetrics:
    """Snapshot de métricas de um log de eventos.

    Attributes:
        total_cases: quantidade de ``case_id`` distintos.
        total_events: quantidade de eventos recebidos (inclusive os com
            timestamp inválido).
        average_case_duration_ms: média das durações válidas, ou ``None``
            quando nenhum caso tem duração válida ("desconhecida", diferente
            de zero).
        activity_frequencies: atividade -> ocorrências.
        variants: variante (atividades unidas por " -> ") -> número de cases,
            da mais frequente para a menos frequente.
        dfg: grafo directly-follows.
    """

    total_cases: int = 0
    total_events: int = 0
    average_case_duration_ms: float | None = None
    activity_frequencies: dict[str, int] = field(default_factory=dict)
    variants: dict[str, int] = field(default_factory=dict)
    dfg: DirectlyFollowsGraph = field(default_factory=DirectlyFollowsGraph)

    def to_dict(self) -> dict[str, Any]:
        """Representação serializável em JSON (chaves camelCase)."""
        out: dict[str, Any] = {
            "totalCases": self.total_cases,
            "totalEvents": self.total_events,
        }
        if self.average_case_duration_ms is not None:
            out["averageCaseDurationMs"] = self.average_case_duration_ms
        out["activityFrequencies"] = dict(self.activity_frequencies)
        out["variants"] = dict(self.variants)
        out["dfg"] = self.dfg.to_dict()
        return out
