import dataclasses

import pandas as pd
import pytest

from process_miner.lib.constants import (
    COLUMN_ACTIVITY,
    COLUMN_CASE_ID,
    COLUMN_COST,
    COLUMN_EVENT_ORDER,
    COLUMN_RESOURCE,
    COLUMN_TIMESTAMP,
)
from process_miner.lib.event_log import (
    ProcessEvent,
    dataframe_to_events,
    events_to_dataframe,
)


def test_from_mapping_accepts_camel_and_snake_case():
    camel = ProcessEvent.from_mapping(
        {"caseId": "c1", "activity": "A", "timestamp": "2024-01-01", "cost": "3.5"}
    )
    snake = ProcessEvent.from_mapping(
        {"case_id": "c1", "activity": "A", "timestamp": "2024-01-01", "cost": 3.5}
    )
    assert camel == snake
    assert camel.cost == 3.5
    assert camel.resource is None


def test_from_mapping_nan_cost_becomes_none():
    ev = ProcessEvent.from_mapping(
        {"caseId": "c1", "activity": "A", "timestamp": "t", "cost": float("nan")}
    )
    assert ev.cost is None


def test_event_is_immutable():
    ev = ProcessEvent("c1", "A", "2024-01-01")
    with pytest.raises(dataclasses.FrozenInstanceError):
        ev.activity = "B"  # type: ignore[misc]


def test_to_dict_omits_absent_optional_fields():
    assert ProcessEvent("c1", "A", "t").to_dict() == {
        "caseId": "c1",
        "activity": "A",
        "timestamp": "t",
    }
    assert ProcessEvent("c1", "A", "t", resource="ana", cost=2.0).to_dict() == {
        "caseId": "c1",
        "activity": "A",
        "timestamp": "t",
        "resource": "ana",
        "cost": 2.0,
    }


def test_events_to_dataframe_records_input_order_without_mutating(order_events):
    original = list(order_events)
    df = events_to_dataframe(order_events)

    assert order_events == original
    assert len(df) == len(order_events)
    assert df[COLUMN_EVENT_ORDER].tolist() == list(range(len(order_events)))
    assert df[COLUMN_CASE_ID].tolist()[:3] == ["order-1"] * 3
    assert df.loc[5, COLUMN_COST] == 12.5
    assert df.loc[0, COLUMN_RESOURCE] == "ana"


def test_events_to_dataframe_accepts_mappings_and_empty_input():
    df = events_to_dataframe([{"caseId": "c1", "activity": "A", "timestamp": "t"}])
    assert df[[COLUMN_CASE_ID, COLUMN_ACTIVITY, COLUMN_TIMESTAMP]].iloc[0].tolist() == [
        "c1",
        "A",
        "t",
    ]

    empty = events_to_dataframe([])
    assert empty.empty
    assert COLUMN_CASE_ID in empty.columns


def test_events_to_dataframe_rejects_unknown_items():
    with pytest.raises(TypeError):
        events_to_dataframe([("c1", "A", "t")])


def test_dataframe_round_trip_preserves_events(order_events):
    assert dataframe_to_events(events_to_dataframe(order_events)) == order_events


def test_dataframe_to_events_ignores_extra_columns():
    df = pd.DataFrame(
        {
            COLUMN_CASE_ID: ["c1"],
            COLUMN_ACTIVITY: ["A"],
            COLUMN_TIMESTAMP: ["2024-01-01"],
            "EXTRA": [1],
        }
    )
    assert dataframe_to_events(df) == [ProcessEvent("c1", "A", "2024-01-01")]
