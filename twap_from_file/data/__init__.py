"""
Data layer: reading order events from files and tracing results.

Usage:
    from twap_from_file.data import EventFileSource, trace_frame

    source = EventFileSource("orders.txt")
    df = trace_frame(source)
"""

from .source import EventFileSource, EventSourceError, iter_events, parse_event_line
from .trace import TRACE_COLUMNS, TraceRecorder, trace_frame, write_trace_csv

__all__ = [
    'EventFileSource',
    'EventSourceError',
    'iter_events',
    'parse_event_line',
    'TRACE_COLUMNS',
    'TraceRecorder',
    'trace_frame',
    'write_trace_csv',
]
