"""
Order Event Definitions.

Events are what the order book understands: an order was inserted at a
price, or an order was erased by id. They are produced by the data
sources and consumed by the engine, which does not care where they came
from.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .orderbook import PriceSet


class EventType(Enum):
    """Order operations, valued by their code in the event file."""
    INSERT = "I"
    ERASE = "E"


@dataclass(frozen=True)
class InsertEvent:
    """A new order rests in the book at `price`."""
    time: int
    order_id: int
    price: float

    @property
    def event_type(self) -> EventType:
        return EventType.INSERT


@dataclass(frozen=True)
class EraseEvent:
    """The order with `order_id` leaves the book."""
    time: int
    order_id: int

    @property
    def event_type(self) -> EventType:
        return EventType.ERASE


OrderEvent = Union[InsertEvent, EraseEvent]


def apply_event(book: PriceSet, event: OrderEvent) -> bool:
    """
    Apply an event to the order book.

    Returns:
        True if the book changed, False for an ignored duplicate insert
        or unknown erase
    """
    if isinstance(event, InsertEvent):
        return book.insert(event.order_id, event.price)
    if isinstance(event, EraseEvent):
        return book.erase(event.order_id)
    raise TypeError(f"Unsupported event: {event!r}")
