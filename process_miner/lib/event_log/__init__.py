from .frame import EVENT_COLUMNS, dataframe_to_events, events_to_dataframe
from .models import ProcessEvent

__all__ = [
    "ProcessEvent",
    "EVENT_COLUMNS",
    "events_to_dataframe",
    "dataframe_to_events",
]
