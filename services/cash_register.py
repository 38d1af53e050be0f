# services/cash_register.py

import logging
from datetime import date
from typing import Any, Dict, Optional

from models.product import Product
from models.sales_cache import SalesCache
from models.sales_record import SalesRecord
from services.display import UI, Printer
from services.errors import (
    NoPerishableScannedError,
    UnknownBestBeforeError,
    UnknownProductError,
)
from services.pricing_service import MarkdownPolicy
from services.sales_service import SalesService
from utils.clock import Clock

logger = logging.getLogger("cash_register.register")

UNKNOWN_PRODUCT_MESSAGE = "This product is unknown"


class CashRegister:
    """
    State of one sales transaction at one till.

    Scanned products collect in a SalesCache until the transaction is
    finalized. Perishable products get a best-before markdown through
    correct_sales_price, right after they are scanned.
    """

    def __init__(
        self,
        clock: Clock,
        printer: Printer,
        ui: UI,
        sales_service: SalesService,
        policy: Optional[MarkdownPolicy] = None,
        settings: Optional[Dict[str, Any]] = None,
    ):
        settings = settings or {}
        self.clock = clock
        self.printer = printer
        self.ui = ui
        self.sales_service = sales_service
        self.policy = policy or MarkdownPolicy()
        self.unknown_product_message = settings.get("unknown_product_message", UNKNOWN_PRODUCT_MESSAGE)
        self.separator = settings.get("receipt_separator", "\t")

        self.sales_cache = SalesCache()
        # key into sales_cache, not an owner of the record
        self.last_scanned_product: Optional[Product] = None

    def scan(self, barcode: int) -> None:
        try:
            product = self.sales_service.lookup_product(barcode)
        except UnknownProductError:
            logger.warning(f"Scan: unknown barcode {barcode}")
            self.ui.display_error_message(self.unknown_product_message)
            return

        sales_record = SalesRecord(barcode, self.clock.today(), product.price)
        previous = self.sales_cache.get(product)
        if previous is not None:
            # carry the running quantity over to the new record
            sales_record.quantity = previous.quantity
            sales_record.increase_quantity(1)
        self.sales_cache.record(product, sales_record)

        if product.perishable:
            self.last_scanned_product = product
            self.ui.display_calendar()

        self.ui.display_product(product)
        logger.info(f"Scan: {product.description} barcode={barcode} qty={sales_record.quantity}")

    def correct_sales_price(self, best_before: Optional[date]) -> None:
        """
        Mark down the last scanned perishable product.

        The number of days from today until best_before selects the price
        from the MarkdownPolicy; the best-before date is kept on the record.
        Raises UnknownBestBeforeError when best_before is None.
        """
        if best_before is None:
            raise UnknownBestBeforeError("The best-before date should not be None")

        product = self.last_scanned_product
        if product is None:
            raise NoPerishableScannedError("No perishable product was scanned")
        sales_record = self.sales_cache.get(product)
        if sales_record is None:
            raise NoPerishableScannedError(f"{product.description} is not in the current transaction")

        days_left = (best_before - self.clock.today()).days
        sales_record.sales_price = self.policy.sales_price(product.price, days_left)
        sales_record.best_before = best_before

        logger.info(
            f"Markdown: {product.description} best_before={best_before.isoformat()} "
            f"days_left={days_left} sales_price={sales_record.sales_price}"
        )

    def finalize_sales_transaction(self) -> None:
        # Submit every record once, in scan order, then start a fresh transaction.
        records = self.sales_cache.records()
        for sales_record in records:
            self.sales_service.sold(sales_record)

        self.sales_cache.clear()
        self.last_scanned_product = None
        logger.info(f"Transaction finalized: {len(records)} line(s) submitted")

    def print_receipt(self) -> None:
        # Perishables first, then the rest; the cache is left untouched.
        for product, sales_record in self.sales_cache.receipt_order():
            self.printer.println(self.receipt_line(product, sales_record))

    def receipt_line(self, product: Product, sales_record: SalesRecord) -> str:
        return self.separator.join(
            [product.description, str(sales_record.sales_price), str(sales_record.quantity)]
        )
