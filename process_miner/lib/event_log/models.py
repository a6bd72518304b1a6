"""Modelo de evento de processo recebido pelo motor de métricas."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "case_id": ("caseId", "case_id"),
    "activity": ("activity",),
    "timestamp": ("timestamp",),
    "resource": ("resource",),
    "cost": ("cost",),
}


def _first_present(mapping: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in mapping:
            return mapping[key]
    return None


@dataclass(frozen=True)
class ProcessEvent:
    """Um evento do log: ``case_id``, ``activity`` e ``timestamp``.

    ``resource`` e ``cost`` são apenas repassados; o motor de métricas não os
    utiliza. O timestamp é mantido como string crua e interpretado somente no
    momento do cálculo.
    """

    case_id: str
    activity: str
    timestamp: str
    resource: str | None = None
    cost: float | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ProcessEvent:
        """Constrói um evento a partir de um registro ``caseId``/``case_id``."""
        values = {
            name: _first_present(mapping, keys) for name, keys in _FIELD_KEYS.items()
        }
        cost = values["cost"]
        if cost is not None:
            cost = float(cost)
            if math.isnan(cost):
                cost = None
        resource = values["resource"]
        return cls(
            case_id=values["case_id"],
            activity=values["activity"],
            timestamp=values["timestamp"],
            resource=None if resource is None else str(resource),
            cost=cost,
        )

    def to_dict(self) -> dict[str, Any]:
        """Registro no formato de upload/exportação (camelCase)."""
        record: dict[str, Any] = {
            "caseId": self.case_id,
            "activity": self.activity,
            "timestamp": self.timestamp,
        }
        if self.resource is not None:
            record["resource"] = self.resource
        if self.cost is not None:
            record["cost"] = self.cost
        return record
