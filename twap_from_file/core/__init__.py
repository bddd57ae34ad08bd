"""
Core algorithms: the live order book and the TWAP accumulator.

Neither component raises for odd-but-valid input (duplicate order ids,
unknown order ids, timestamps going backwards); each has a defined no-op.
"""

from .events import EraseEvent, EventType, InsertEvent, OrderEvent, apply_event
from .orderbook import PriceSet
from .twap import TwapAccumulator
from .engine import EngineStats, TwapEngine

__all__ = [
    'EventType',
    'InsertEvent',
    'EraseEvent',
    'OrderEvent',
    'apply_event',
    'PriceSet',
    'TwapAccumulator',
    'EngineStats',
    'TwapEngine',
]
