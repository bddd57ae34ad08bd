"""
Tabular TWAP Trace.

Records one row per processed event, which is handy for inspecting a
session in a notebook or a spreadsheet.

Columns:
    time, op, order_id, price  - the event (price is NaN for erases)
    max_price                  - best live price after the event
    twap                       - running average after the event

Undefined values are NaN.

Rows are recorded while the engine runs, so the input is read only once:

    recorder = TraceRecorder()
    for event in source:
        average = engine.process(event)
        recorder.record(event, engine.book.max_price(), average)
    recorder.write_csv("trace.csv")
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import numpy as np
import pandas as pd

from twap_from_file.core.engine import TwapEngine
from twap_from_file.core.events import InsertEvent, OrderEvent

logger = logging.getLogger(__name__)

TRACE_COLUMNS = ['time', 'op', 'order_id', 'price', 'max_price', 'twap']
_FLOAT_COLUMNS = ['price', 'max_price', 'twap']


def _nan_if_none(value):
    return np.nan if value is None else value


class TraceRecorder:
    """Collects trace rows as events are processed."""

    def __init__(self):
        self.rows: List[Dict[str, Any]] = []

    def record(self, event: OrderEvent, max_price: Optional[float], average: Optional[float]):
        """Add the row for one processed event."""
        price = event.price if isinstance(event, InsertEvent) else None
        self.rows.append({
            'time': event.time,
            'op': event.event_type.value,
            'order_id': event.order_id,
            'price': _nan_if_none(price),
            'max_price': _nan_if_none(max_price),
            'twap': _nan_if_none(average),
        })

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame(self.rows, columns=TRACE_COLUMNS)
        df[_FLOAT_COLUMNS] = df[_FLOAT_COLUMNS].astype(float)
        return df

    def write_csv(self, path: Union[str, Path]) -> pd.DataFrame:
        """Save the recorded rows as CSV. Returns the DataFrame."""
        df = self.to_frame()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(path, index=False)
        logger.info(f"Wrote {len(df)} trace rows to {path}")
        return df

    def __len__(self) -> int:
        return len(self.rows)


def _record_all(events: Iterable[OrderEvent]) -> TraceRecorder:
    engine = TwapEngine()
    recorder = TraceRecorder()

    for event in events:
        average = engine.process(event)
        recorder.record(event, engine.book.max_price(), average)

    return recorder


def trace_frame(events: Iterable[OrderEvent]) -> pd.DataFrame:
    """
    Process events through a fresh engine and return the per-event trace.

    Args:
        events: Parsed order events in file order

    Returns:
        DataFrame with TRACE_COLUMNS, one row per event
    """
    return _record_all(events).to_frame()


def write_trace_csv(events: Iterable[OrderEvent], path: Union[str, Path]) -> pd.DataFrame:
    """Build the trace and save it as CSV. Returns the DataFrame."""
    return _record_all(events).write_csv(path)
