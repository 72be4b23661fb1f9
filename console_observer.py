from observer import Observer
from formatting import format_price


class ConsoleObserver(Observer):
    def __init__(self, observer_name: str):
        self.observer_name = observer_name

    def update(self, product):
        print(f"{self.observer_name}: The price of '{product.name}' is now {format_price(product.price)}.")

    def __repr__(self):
        return f"ConsoleObserver({self.observer_name!r})"
