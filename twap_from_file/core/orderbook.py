"""
Live Order Book with Automatic Max Price.

Tracks the currently outstanding orders and exposes the best (maximum)
price among them.

Two containers are kept side by side:
- order id -> price, so an order can be found when it is erased by id
- price -> number of live orders at that price, sorted by price, so the
  maximum is always the last key

Orders cluster at a limited number of price ticks, so counting orders per
price keeps the sorted structure small even under heavy churn at the same
price. A price whose last order is erased is removed entirely.

Prices are used as dict keys exactly as they were parsed. Two orders at
"10.3" read from different lines compare equal because nothing is
computed on them before insertion.
"""

import logging
from typing import Dict, Optional

from sortedcontainers import SortedDict

logger = logging.getLogger(__name__)


class PriceSet:
    """
    Outstanding orders plus an order count per price level.

    Invariants:
        sum(price_counts.values()) == len(orders)
        every price in orders has a count >= 1 in price_counts and vice versa

    Insert of an existing id and erase of an unknown id are no-ops, not
    errors.
    """

    def __init__(self):
        # keeps track of current orders & prices
        self.orders: Dict[int, float] = {}
        # number of live orders at each price, ascending by price
        self.price_counts: SortedDict = SortedDict()

    def insert(self, order_id: int, price: float) -> bool:
        """
        Record a new order.

        Args:
            order_id: Unique order id
            price: Order price

        Returns:
            True if the order was added, False if the id was already live
        """
        if order_id in self.orders:
            logger.debug(f"Ignoring duplicate insert of order {order_id}")
            return False

        self.orders[order_id] = price
        self.price_counts[price] = self.price_counts.get(price, 0) + 1
        return True

    def erase(self, order_id: int) -> bool:
        """
        Remove an order by id.

        Returns:
            True if the order was removed, False if no such order was live
        """
        price = self.orders.pop(order_id, None)
        if price is None:
            logger.debug(f"Ignoring erase of unknown order {order_id}")
            return False

        count = self.price_counts[price] - 1
        if count <= 0:
            del self.price_counts[price]
        else:
            self.price_counts[price] = count
        return True

    def max_price(self) -> Optional[float]:
        """Highest live price, or None when the book is empty."""
        if not self.price_counts:
            return None
        return self.price_counts.peekitem(-1)[0]

    def price_of(self, order_id: int) -> Optional[float]:
        """Price of a live order, or None if the id is not live."""
        return self.orders.get(order_id)

    @property
    def level_count(self) -> int:
        """Number of distinct price levels"""
        return len(self.price_counts)

    def snapshot(self) -> Dict[float, int]:
        """Copy of the price -> count mapping, ascending by price."""
        return dict(self.price_counts.items())

    def __len__(self) -> int:
        return len(self.orders)

    def __contains__(self, order_id: int) -> bool:
        return order_id in self.orders

    def __repr__(self) -> str:
        return (
            f"PriceSet(orders={len(self.orders)}, levels={len(self.price_counts)}, "
            f"max_price={self.max_price()})"
        )
