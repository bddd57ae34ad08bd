# -*- coding: utf-8 -*-
"""
TWAP Accumulator - Running Time-Weighted Average Price
=======================================================
Turns a stream of (time, price) observations into a running
time-weighted average without keeping the history.

How it works:
- Each new observation closes the interval that started at the
  previous one. The previous price held for that whole interval,
  so it is blended into the average with the interval length as weight.
- A new price only affects the average once the NEXT observation
  arrives (no time has passed for it yet).
- A "no price" observation (empty book, price None) is stored like any
  other. The interval it starts carries no weight and is left out of
  total_time; it is never treated as a price of zero.
- An observation earlier than the reference point is discarded whole:
  average, total_time and the reference point all stay as they were.

The blend keeps a running average instead of a weighted price sum so the
accumulated value never grows with the session length.

Example:
    >>> twap = TwapAccumulator()
    >>> twap.observe(0, 10.0)
    True
    >>> twap.observe(10, 20.0)
    True
    >>> twap.observe(30, 30.0)
    True
    >>> round(twap.current_average(), 4)
    16.6667
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class TwapAccumulator:
    """
    Incremental time-weighted average of a price signal.

    The signal may be undefined (None) for some periods; those periods
    are excluded from the average.
    """

    def __init__(self):
        self._has_observation = False
        self._last_price: Optional[float] = None
        self._last_time = 0
        self._average: Optional[float] = None
        self._total_time = 0

    def observe(self, time: int, price: Optional[float]) -> bool:
        """
        Feed the price signal at a point in time.

        Args:
            time: Observation timestamp
            price: Price at this time, or None if there is no price

        Returns:
            False if the observation was discarded because time went
            backwards, True otherwise
        """
        if not self._has_observation:
            self._has_observation = True
            self._last_price = price
            self._last_time = time
            return True

        elapsed = time - self._last_time
        if elapsed < 0:
            # checked even when the previous price was undefined, so a late
            # sample after a no-price period is dropped too; reference point
            # stays where it was
            logger.debug(
                f"Discarding observation at t={time}: earlier than t={self._last_time}"
            )
            return False

        if self._last_price is not None:
            if self._total_time == 0:
                self._average = self._last_price
                self._total_time = elapsed
            else:
                new_total_time = self._total_time + elapsed
                self._average = (
                    self._average * (self._total_time / new_total_time)
                    + self._last_price * (elapsed / new_total_time)
                )
                self._total_time = new_total_time

        self._last_price = price
        self._last_time = time
        return True

    def current_average(self) -> Optional[float]:
        """Time-weighted average so far, or None if no interval has closed yet."""
        return self._average

    @property
    def has_observation(self) -> bool:
        return self._has_observation

    @property
    def last_price(self) -> Optional[float]:
        return self._last_price

    @property
    def last_time(self) -> int:
        return self._last_time

    @property
    def total_time(self) -> int:
        """Elapsed time that carried a defined price"""
        return self._total_time

    def __repr__(self) -> str:
        return (
            f"TwapAccumulator(average={self._average}, total_time={self._total_time}, "
            f"last_time={self._last_time}, last_price={self._last_price})"
        )
