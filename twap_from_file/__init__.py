"""
TWAP From File
==============

Computes a running time-weighted average price (TWAP) of the best
(maximum) outstanding order price from a file of order insertions and
erasures read in time order.

Usage:
    from twap_from_file import TwapEngine, EventFileSource

    engine = TwapEngine()
    for average in engine.run(EventFileSource("orders.txt")):
        print(average)
"""

from twap_from_file.exceptions import TwapError
from twap_from_file.core import (
    EraseEvent,
    EventType,
    InsertEvent,
    PriceSet,
    TwapAccumulator,
    TwapEngine,
)
from twap_from_file.data import EventFileSource, EventSourceError, parse_event_line

__version__ = "0.1.0"

__all__ = [
    'TwapError',
    'PriceSet',
    'TwapAccumulator',
    'TwapEngine',
    'EventType',
    'InsertEvent',
    'EraseEvent',
    'EventFileSource',
    'EventSourceError',
    'parse_event_line',
]
