# services/sales_service.py

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from models.product import Product
from models.sales_record import SalesRecord
from services.errors import UnknownProductError

logger = logging.getLogger("cash_register.sales")


class SalesService(ABC):
    # Catalog lookup and sales submission used by the register.

    @abstractmethod
    def lookup_product(self, barcode: int) -> Product:
        """Return the product for barcode or raise UnknownProductError."""

    @abstractmethod
    def sold(self, sales_record: SalesRecord) -> None:
        """Record one finalized line item."""


class CatalogSalesService(SalesService):
    """
    In-memory sales service.
    The catalog is a barcode -> Product map (usually loaded by DataRepository),
    and sold records are only kept in memory for the running session.
    """

    def __init__(self, products: Iterable[Product] = ()):
        self.catalog: dict[int, Product] = {}
        self.sales: list[SalesRecord] = []
        for p in products:
            self.add_product(p)

    def add_product(self, product: Product) -> None:
        if product.barcode in self.catalog:
            logger.warning(f"Catalog: barcode {product.barcode} replaced ({product.description})")
        self.catalog[product.barcode] = product

    def lookup_product(self, barcode: int) -> Product:
        try:
            return self.catalog[barcode]
        except KeyError:
            raise UnknownProductError(barcode) from None

    def sold(self, sales_record: SalesRecord) -> None:
        self.sales.append(sales_record)
        logger.info(
            f"Sold barcode={sales_record.barcode} qty={sales_record.quantity} "
            f"sales_price={sales_record.sales_price}"
        )

    def revenue(self) -> int:
        # total of everything sold this session, in minor units
        return sum(r.sales_price * r.quantity for r in self.sales)
