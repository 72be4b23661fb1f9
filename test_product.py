import threading
import time
from decimal import Decimal

import pytest

from console_observer import ConsoleObserver
from observer import Observer
from product import Product
from product_manager import ProductManager


class RecordingObserver(Observer):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def update(self, product):
        self.log.append((self.name, product.name, product.price))


class FailingObserver(Observer):
    def update(self, product):
        raise RuntimeError("observer failed")


@pytest.fixture
def manager():
    return ProductManager()


@pytest.fixture
def product_a(manager):
    return Product("Product A", 1000, manager=manager)


def test_construct_registers_with_manager(manager, product_a):
    assert manager.get_product_by_name("Product A") is product_a
    assert product_a.price == Decimal("1000")


def test_no_change_sends_no_notification(capsys, product_a):
    log = []
    product_a.register(RecordingObserver("O1", log))
    product_a.register(RecordingObserver("O2", log))

    assert product_a.change_price(1000) is False

    assert log == []
    assert capsys.readouterr().out == "No price change for Product A. No notification sent.\n"


def test_change_notifies_in_order_then_reports(capsys, product_a):
    product_a.register(ConsoleObserver("O1"))
    product_a.register(ConsoleObserver("O2"))

    assert product_a.change_price(1200) is True

    assert capsys.readouterr().out.splitlines() == [
        "O1: The price of 'Product A' is now 1200.00.",
        "O2: The price of 'Product A' is now 1200.00.",
        "Price changed from 1000.00 to 1200.00 for Product A. Notifications sent.",
    ]


def test_observers_see_new_price(product_a):
    log = []
    product_a.register(RecordingObserver("O1", log))
    product_a.register(RecordingObserver("O2", log))

    product_a.change_price("1250.50")

    assert log == [
        ("O1", "Product A", Decimal("1250.50")),
        ("O2", "Product A", Decimal("1250.50")),
    ]


@pytest.mark.parametrize("registrations", [0, 1, 3, 5])
def test_one_update_per_registration(product_a, registrations):
    log = []
    observer = RecordingObserver("O", log)
    for _ in range(registrations):
        product_a.register(observer)

    product_a.change_price(1)
    product_a.change_price(2)

    assert len(log) == registrations * 2


def test_unregister_stops_notifications(product_a):
    log = []
    o1 = RecordingObserver("O1", log)
    o2 = RecordingObserver("O2", log)
    product_a.register(o1)
    product_a.register(o2)
    product_a.register(o1)

    product_a.unregister(o1)
    product_a.change_price(1100)
    assert [name for name, _, _ in log] == ["O2", "O1"]

    product_a.unregister(o1)
    log.clear()
    product_a.change_price(1200)
    assert [name for name, _, _ in log] == ["O2"]


def test_failing_observer_aborts_remaining(capsys, product_a):
    log = []
    product_a.register(RecordingObserver("O1", log))
    product_a.register(FailingObserver())
    product_a.register(RecordingObserver("O3", log))

    with pytest.raises(RuntimeError, match="observer failed"):
        product_a.change_price(900)

    assert [name for name, _, _ in log] == ["O1"]
    assert product_a.price == Decimal("900")
    assert "Notifications sent" not in capsys.readouterr().out


def test_equal_price_with_different_scale_is_no_change(product_a):
    assert product_a.change_price("1000.00") is False


def test_invalid_price_rejected(product_a):
    with pytest.raises(ValueError):
        product_a.change_price("abc")
    with pytest.raises(ValueError):
        product_a.change_price(float("nan"))
    with pytest.raises(ValueError):
        product_a.change_price("1e30")
    assert product_a.price == Decimal("1000")


class SlowRecordingObserver(RecordingObserver):
    def update(self, product):
        super().update(product)
        time.sleep(0.001)


def test_concurrent_changes_notify_in_commit_order(capsys, product_a):
    log = []
    product_a.register(SlowRecordingObserver("O1", log))
    product_a.register(RecordingObserver("O2", log))
    prices = [Decimal(i) for i in range(1, 41)]
    threads = [threading.Thread(target=product_a.change_price, args=(p,)) for p in prices]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    # each change is one uninterrupted O1, O2 pass over the same price
    assert [name for name, _, _ in log] == ["O1", "O2"] * len(prices)
    pairs = list(zip(log[::2], log[1::2]))
    assert all(first[2] == second[2] for first, second in pairs)

    # each "from" price is the previous pass's "to" price
    seen = [first[2] for first, _ in pairs]
    assert sorted(seen) == prices
    assert seen[-1] == product_a.price
    changes = [
        line.split()[3:6:2]
        for line in capsys.readouterr().out.splitlines()
        if line.startswith("Price changed from")
    ]
    assert [Decimal(new) for _, new in changes] == seen
    assert Decimal(changes[0][0]) == Decimal("1000")
    assert all(Decimal(old) == Decimal(prev_new)
               for (old, _), (_, prev_new) in zip(changes[1:], changes))


def test_repr(product_a):
    assert repr(product_a) == "Product(name='Product A', price=1000)"
