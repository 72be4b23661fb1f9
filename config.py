import os
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_products() -> Dict[str, Tuple[str, str]]:
    return {
        "A": ("Product A", "1000"),
        "B": ("Product B", "1200"),
    }


def _default_observers() -> Dict[str, List[str]]:
    return {
        "A": ["Observer 1"],
        "B": ["Observer 2"],
    }


@dataclass
class PriceMonitorConfig:
    # Console Settings
    CURRENCY_SYMBOL: str = os.getenv("PRICE_CURRENCY_SYMBOL", "")
    EXIT_COMMAND: str = "exit"

    # Idle loop tick, seconds
    IDLE_INTERVAL: float = float(os.getenv("PRICE_IDLE_INTERVAL", "1.0"))

    LOG_LEVEL: str = os.getenv("PRICE_LOG_LEVEL", "WARNING")

    # Price history
    HISTORY_MAX_POINTS: int = 300

    # Telegram Configuration
    TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")
    TELEGRAM_CHAT_ID: str = os.getenv("TELEGRAM_CHAT_ID", "")
    TELEGRAM_ENABLED: bool = True

    # Catalogue: selector -> (product name, initial price)
    PRODUCTS: Dict[str, Tuple[str, str]] = field(default_factory=_default_products)
    # selector -> observer names watching that product
    OBSERVERS: Dict[str, List[str]] = field(default_factory=_default_observers)

    def validate(self):
        if self.IDLE_INTERVAL <= 0:
            raise ValueError("IDLE_INTERVAL must be positive")
        if str(self.LOG_LEVEL).upper() not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        if self.HISTORY_MAX_POINTS < 1:
            raise ValueError("HISTORY_MAX_POINTS must be at least 1")
        if not self.PRODUCTS:
            raise ValueError("At least one product is required")
        selectors = [s.lower() for s in self.PRODUCTS]
        if len(set(selectors)) != len(selectors):
            raise ValueError("Product selectors must be unique (case-insensitive)")
        for selector in self.PRODUCTS:
            if not selector or selector != selector.strip() or " " in selector:
                raise ValueError(f"Invalid product selector: {selector!r}")
            if selector.lower() == self.EXIT_COMMAND.lower():
                raise ValueError(f"Product selector cannot be '{self.EXIT_COMMAND}'")
        names = [name for name, _ in self.PRODUCTS.values()]
        if len(set(names)) != len(names):
            raise ValueError("Product names must be unique")
        unknown = set(self.OBSERVERS) - set(self.PRODUCTS)
        if unknown:
            raise ValueError(f"Observers reference unknown products: {sorted(unknown)}")

    @property
    def telegram_configured(self) -> bool:
        return bool(self.TELEGRAM_ENABLED and self.TELEGRAM_BOT_TOKEN and self.TELEGRAM_CHAT_ID)


config = PriceMonitorConfig()
