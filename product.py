# product.py
import logging
import threading
from decimal import Decimal

from formatting import format_price, to_price
from observer import Subject

logger = logging.getLogger(__name__)


class Product(Subject):
    """A priced product whose price changes are broadcast to its observers."""

    def __init__(self, name: str, price, manager=None):
        super().__init__()
        self._name = name
        self._price = to_price(price)
        # one change transaction at a time, so notifications follow commit order
        self._lock = threading.Lock()
        if manager is not None:
            manager.add_product(self)

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Decimal:
        return self._price

    def change_price(self, new_price) -> bool:
        """Set a new price and notify observers.

        Returns False when the price is unchanged; no observer is called then.
        An exception raised by an observer propagates and the remaining
        observers are skipped; the new price stays committed.
        """
        new_price = to_price(new_price)
        with self._lock:
            if new_price == self._price:
                print(f"No price change for {self._name}. No notification sent.")
                return False
            old_price = self._price
            self._price = new_price
            logger.debug(f"{self._name}: {old_price} -> {new_price}, notifying {len(self._observers)} observer(s)")
            self.notify_all(old_price)
            return True

    def notify_all(self, old_price):
        super().notify_all()
        print(
            f"Price changed from {format_price(old_price)} to {format_price(self._price)} "
            f"for {self._name}. Notifications sent."
        )

    def __repr__(self):
        return f"Product(name={self._name!r}, price={self._price})"
