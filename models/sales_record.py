# models/sales_record.py
from dataclasses import dataclass, field
from datetime import date
from typing import Optional
# One line item of the open transaction.
@dataclass
class SalesRecord:
    barcode: int
    sold_on: date
    price: int
    quantity: int = 1
    sales_price: Optional[int] = field(default=None)
    best_before: Optional[date] = None

    def __post_init__(self):
        if self.price < 0:
            raise ValueError("The unit price cannot be negative.")
        # sales price starts at the full unit price
        if self.sales_price is None:
            self.sales_price = self.price

    def increase_quantity(self, amount: int = 1) -> None:
        if amount <= 0:
            raise ValueError("The quantity must be a positive number.")
        self.quantity += amount
