import json

import pytest

from process_miner import compute_metrics
from process_miner.lib.event_log import ProcessEvent
from process_miner.lib.metrics import (
    DFGEdge,
    DFGNode,
    DirectlyFollowsGraph,
    ProcessMetrics,
    activity_table,
    events_to_json,
    metrics_to_json,
    variant_table,
)


def test_activity_table_sorted_with_percentage(order_events):
    table = activity_table(compute_metrics(order_events))

    assert table.columns.tolist() == ["activity", "frequency", "percentage"]
    assert table["activity"].tolist() == ["Check", "Receive", "Ship"]
    assert table["frequency"].tolist() == [4, 3, 3]
    assert table["percentage"].tolist() == pytest.approx([40.0, 30.0, 30.0])


def test_activity_table_top_n(order_events):
    table = activity_table(compute_metrics(order_events), top_n=1)
    assert table["activity"].tolist() == ["Check"]


def test_variant_table(order_events):
    table = variant_table(compute_metrics(order_events))

    assert table.to_dict(orient="records") == [
        {
            "variant_id": "variant 1",
            "variant": "Receive -> Check -> Ship",
            "frequency": 2,
            "length": 3,
        },
        {
            "variant_id": "variant 2",
            "variant": "Receive -> Check -> Check -> Ship",
            "frequency": 1,
            "length": 4,
        },
    ]
    assert len(variant_table(compute_metrics(order_events), top_n=1)) == 1


def test_tables_for_empty_metrics():
    empty = ProcessMetrics()
    assert activity_table(empty).empty
    assert variant_table(empty).columns.tolist() == [
        "variant_id",
        "variant",
        "frequency",
        "length",
    ]


def test_dfg_top_keeps_most_frequent_nodes_and_their_edges():
    dfg = DirectlyFollowsGraph(
        nodes=(DFGNode("A", 5), DFGNode("B", 1), DFGNode("C", 3)),
        edges=(DFGEdge("A", "B", 1), DFGEdge("A", "C", 2), DFGEdge("C", "C", 1)),
    )
    top = dfg.top(max_nodes=2)

    assert [n.id for n in top.nodes] == ["A", "C"]
    assert top.edge_counts == {("A", "C"): 2, ("C", "C"): 1}
    assert dfg.top(0) == DirectlyFollowsGraph()
    with pytest.raises(ValueError):
        dfg.top(-1)


def test_metrics_to_json_uses_camel_case_keys(order_events):
    payload = json.loads(metrics_to_json(compute_metrics(order_events)))

    assert payload["totalCases"] == 3
    assert payload["totalEvents"] == 10
    assert payload["averageCaseDurationMs"] == pytest.approx(6_000_000)
    assert payload["activityFrequencies"]["Check"] == 4
    assert payload["variants"]["Receive -> Check -> Ship"] == 2
    assert {"id": "Check", "count": 4} in payload["dfg"]["nodes"]
    assert {"source": "Check", "target": "Check", "count": 1} in payload["dfg"]["edges"]


def test_events_to_json_matches_upload_shape():
    payload = json.loads(
        events_to_json([ProcessEvent("1", "A", "2024-01-01", resource="ana")])
    )
    assert payload == [
        {"caseId": "1", "activity": "A", "timestamp": "2024-01-01", "resource": "ana"}
    ]
