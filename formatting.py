# formatting.py
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

from config import config

TWO_PLACES = Decimal("0.01")


class PriceParseError(ValueError):
    pass


def to_price(value) -> Decimal:
    """Coerce ``value`` to a finite Decimal."""
    if isinstance(value, Decimal):
        price = value
    elif isinstance(value, float):
        # str() keeps 0.1 as 0.1 instead of its binary expansion
        price = Decimal(str(value))
    else:
        try:
            price = Decimal(str(value).strip())
        except InvalidOperation:
            raise PriceParseError(f"Invalid price: {value!r}") from None
    if not price.is_finite():
        raise PriceParseError(f"Price must be a finite number: {value!r}")
    # must fit the context precision at 2 places, or format_price cannot render it
    try:
        price.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise PriceParseError(f"Price out of range: {value!r}") from None
    return price


def format_price(value, symbol=None) -> str:
    if symbol is None:
        symbol = config.CURRENCY_SYMBOL
    amount = to_price(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    if amount < 0:
        return f"-{symbol}{-amount}"
    return f"{symbol}{amount}"
