import pytest

from process_miner.lib.event_log import ProcessEvent


@pytest.fixture
def make_event():
    def _factory(case_id, activity, timestamp, **kwargs):
        return ProcessEvent(
            case_id=case_id, activity=activity, timestamp=timestamp, **kwargs
        )

    return _factory


@pytest.fixture
def order_events(make_event):
    """Dois pedidos com o mesmo fluxo e um terceiro com retrabalho."""
    return [
        make_event("order-1", "Receive", "2024-03-01T09:00:00Z", resource="ana"),
        make_event("order-1", "Check", "2024-03-01T10:00:00Z", resource="bob"),
        make_event("order-1", "Ship", "2024-03-01T12:00:00Z", resource="ana"),
        make_event("order-2", "Receive", "2024-03-02T09:00:00Z"),
        make_event("order-2", "Check", "2024-03-02T09:30:00Z"),
        make_event("order-2", "Ship", "2024-03-02T10:00:00Z", cost=12.5),
        make_event("order-3", "Receive", "2024-03-03T08:00:00Z"),
        make_event("order-3", "Check", "2024-03-03T08:10:00Z"),
        make_event("order-3", "Check", "2024-03-03T08:20:00Z"),
        make_event("order-3", "Ship", "2024-03-03T09:00:00Z"),
    ]
