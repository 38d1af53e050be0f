from datetime import date
from unittest.mock import create_autospec

import pytest

from models.product import Product
from services.cash_register import CashRegister
from services.display import UI, Printer
from services.errors import UnknownProductError
from services.sales_service import SalesService
from utils.clock import FixedClock

TODAY = date(2026, 10, 18)


@pytest.fixture
def lamp():
    return Product("lamp", "Led Lamp", 250, 1_234, False)


@pytest.fixture
def banana():
    return Product("banana", "Bananas Fyffes", 150, 9_234, True)


@pytest.fixture
def cheese():
    return Product("cheese", "Gouda 48+", 800, 7_687, True)


@pytest.fixture
def clock():
    return FixedClock(TODAY)


@pytest.fixture
def printer():
    return create_autospec(Printer, instance=True)


@pytest.fixture
def ui():
    return create_autospec(UI, instance=True)


@pytest.fixture
def sales_service(lamp, banana, cheese):
    """Mocked sales service that knows lamp, banana and cheese."""
    service = create_autospec(SalesService, instance=True)
    catalog = {p.barcode: p for p in (lamp, banana, cheese)}

    def lookup(barcode):
        if barcode not in catalog:
            raise UnknownProductError(barcode)
        return catalog[barcode]

    service.lookup_product.side_effect = lookup
    return service


@pytest.fixture
def register(clock, printer, ui, sales_service):
    return CashRegister(clock, printer, ui, sales_service)
