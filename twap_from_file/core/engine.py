# -*- coding: utf-8 -*-
"""
TWAP Engine - Order Events In, Averages Out
============================================
Drives the two core components for one pass over an event stream:

    for each event:
        1. apply it to the PriceSet
        2. feed (event.time, PriceSet.max_price()) to the TwapAccumulator
        3. read the current average

The very first event never produces an average because no time has
passed yet. Callers that only want printable values use run(), which
skips undefined averages.

Usage:
    engine = TwapEngine()
    for average in engine.run(events):
        print(average)

    print(engine.stats.to_dict())
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, Iterator, Optional

from .events import InsertEvent, OrderEvent, apply_event
from .orderbook import PriceSet
from .twap import TwapAccumulator

logger = logging.getLogger(__name__)


@dataclass
class EngineStats:
    """Counters for one pass over an event stream."""
    events_processed: int = 0
    inserts: int = 0
    erases: int = 0
    duplicate_inserts: int = 0      # insert of an id that was already live
    unknown_erases: int = 0         # erase of an id that was not live
    out_of_order: int = 0           # samples discarded, time went backwards
    averages_emitted: int = 0       # events after which the average was defined

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class TwapEngine:
    """
    Pipeline of PriceSet -> TwapAccumulator.

    A fresh engine is needed for every pass; components are owned by the
    engine and never shared.
    """
    book: PriceSet = field(default_factory=PriceSet)
    accumulator: TwapAccumulator = field(default_factory=TwapAccumulator)
    stats: EngineStats = field(default_factory=EngineStats)

    def process(self, event: OrderEvent) -> Optional[float]:
        """
        Process one event.

        Returns:
            Current TWAP after the event, or None while it is undefined
        """
        changed = apply_event(self.book, event)

        self.stats.events_processed += 1
        if isinstance(event, InsertEvent):
            self.stats.inserts += 1
            if not changed:
                self.stats.duplicate_inserts += 1
        else:
            self.stats.erases += 1
            if not changed:
                self.stats.unknown_erases += 1

        if not self.accumulator.observe(event.time, self.book.max_price()):
            self.stats.out_of_order += 1

        average = self.accumulator.current_average()
        if average is not None:
            self.stats.averages_emitted += 1
        return average

    def run(self, events: Iterable[OrderEvent]) -> Iterator[float]:
        """Process events in order, yielding each defined average."""
        for event in events:
            average = self.process(event)
            if average is not None:
                yield average

        logger.info(
            f"Processed {self.stats.events_processed} events "
            f"({self.stats.averages_emitted} averages, "
            f"{self.stats.duplicate_inserts} duplicate inserts, "
            f"{self.stats.unknown_erases} unknown erases, "
            f"{self.stats.out_of_order} out-of-order)"
        )
