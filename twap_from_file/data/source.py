"""
Event File Source.

Reads an order event file line by line and turns each line into an
InsertEvent or EraseEvent. Lines are streamed, never loaded all at once.

Line format (whitespace separated, trailing tokens ignored):

    <time> I <order_id> <price>     insert an order
    <time> E <order_id>             erase an order

Anything that does not fit is skipped: missing tokens, a time or order
id that is not an integer, an unknown operation, or an insert whose
price is missing, not a number, or not finite. Skipped lines never reach
the order book.
"""

import logging
import math
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from twap_from_file.core.events import EraseEvent, EventType, InsertEvent, OrderEvent
from twap_from_file.exceptions import TwapError

logger = logging.getLogger(__name__)


class EventSourceError(TwapError):
    """Raised when the event file cannot be opened or read."""
    pass


def _parse_int(token: str) -> Optional[int]:
    try:
        return int(token)
    except ValueError:
        return None


def parse_event_line(line: str) -> Optional[OrderEvent]:
    """
    Parse one line of the event file.

    Args:
        line: Raw line, with or without trailing newline

    Returns:
        The parsed event, or None if the line is malformed
    """
    tokens = line.split()
    if len(tokens) < 3:
        return None

    time = _parse_int(tokens[0])
    if time is None:
        return None

    try:
        operation = EventType(tokens[1])
    except ValueError:
        return None

    order_id = _parse_int(tokens[2])
    if order_id is None:
        return None

    if operation is EventType.ERASE:
        return EraseEvent(time=time, order_id=order_id)

    if len(tokens) < 4:
        return None
    try:
        price = float(tokens[3])
    except ValueError:
        return None
    if not math.isfinite(price):
        return None

    return InsertEvent(time=time, order_id=order_id, price=price)


def iter_events(lines: Iterable[str]) -> Iterator[OrderEvent]:
    """Parse lines, silently dropping malformed ones."""
    for line in lines:
        event = parse_event_line(line)
        if event is not None:
            yield event


class EventFileSource:
    """
    Iterable of parsed order events from a file.

    Usage:
        source = EventFileSource("data/orders.txt")
        for event in source:
            ...
        print(source.lines_read, source.lines_skipped)

    Opening the file happens when iteration starts; a missing or
    unreadable file raises EventSourceError at that point.
    """

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding
        self.lines_read = 0
        self.lines_skipped = 0

    def __iter__(self) -> Iterator[OrderEvent]:
        self.lines_read = 0
        self.lines_skipped = 0

        try:
            f = open(self.path, "r", encoding=self.encoding)
        except OSError as e:
            raise EventSourceError(f"Can't access input file: {self.path}") from e

        with f:
            logger.info(f"Reading events from {self.path}")
            try:
                for line_no, line in enumerate(f, start=1):
                    self.lines_read += 1
                    event = parse_event_line(line)
                    if event is None:
                        self.lines_skipped += 1
                        logger.debug(f"Skipping malformed line {line_no}: {line.rstrip()!r}")
                        continue
                    yield event
            except (OSError, UnicodeDecodeError) as e:
                raise EventSourceError(f"Failed reading {self.path}: {e}") from e

        logger.info(
            f"Read {self.lines_read} lines from {self.path} "
            f"({self.lines_skipped} skipped)"
        )
