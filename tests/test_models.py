from datetime import date

import pytest

from models.product import Product
from models.sales_cache import SalesCache
from models.sales_record import SalesRecord

DAY = date(2026, 10, 18)


def test_products_with_same_values_are_the_same_key():
    first = Product("banana", "Bananas Fyffes", 150, 9_234, True)
    second = Product("banana", "Bananas Fyffes", 150, 9_234, True)

    assert first == second
    assert hash(first) == hash(second)
    assert len({first: 1, second: 2}) == 1


def test_product_is_immutable():
    lamp = Product("lamp", "Led Lamp", 250, 1_234)

    with pytest.raises(AttributeError):
        lamp.price = 1


def test_sales_record_defaults():
    record = SalesRecord(1_234, DAY, 250)

    assert record.quantity == 1
    assert record.sales_price == 250
    assert record.best_before is None


def test_sales_record_rejects_negative_price():
    with pytest.raises(ValueError):
        SalesRecord(1_234, DAY, -1)


def test_increase_quantity():
    record = SalesRecord(1_234, DAY, 250)
    record.increase_quantity(1)
    record.increase_quantity(3)

    assert record.quantity == 5


@pytest.mark.parametrize("amount", [0, -2])
def test_increase_quantity_must_be_positive(amount):
    record = SalesRecord(1_234, DAY, 250)

    with pytest.raises(ValueError):
        record.increase_quantity(amount)
    assert record.quantity == 1


def _entry(short_name, barcode, perishable):
    product = Product(short_name, short_name.title(), 100, barcode, perishable)
    return product, SalesRecord(barcode, DAY, 100)


def test_cache_keeps_scan_order_on_replace():
    cache = SalesCache()
    cheese, cheese_record = _entry("cheese", 1, True)
    lamp, lamp_record = _entry("lamp", 2, False)
    cache.record(cheese, cheese_record)
    cache.record(lamp, lamp_record)

    replacement = SalesRecord(1, DAY, 100, quantity=2)
    cache.record(cheese, replacement)

    assert len(cache) == 2
    assert cache.records() == [replacement, lamp_record]
    assert cache.get(cheese) is replacement


def test_receipt_order_is_a_stable_partition():
    cache = SalesCache()
    entries = [
        _entry("lamp", 1, False),
        _entry("cheese", 2, True),
        _entry("soap", 3, False),
        _entry("banana", 4, True),
    ]
    for product, record in entries:
        cache.record(product, record)

    names = [p.short_name for p, _ in cache.receipt_order()]

    assert names == ["cheese", "banana", "lamp", "soap"]
    # the cache itself is still in scan order
    assert [p.short_name for p, _ in cache] == ["lamp", "cheese", "soap", "banana"]


def test_cache_clear():
    cache = SalesCache()
    product, record = _entry("lamp", 1, False)
    cache.record(product, record)

    cache.clear()

    assert len(cache) == 0
    assert product not in cache
    assert cache.get(product) is None
    assert cache.receipt_order() == []
