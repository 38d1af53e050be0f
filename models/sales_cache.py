# models/sales_cache.py
from typing import Iterator, Optional

from models.product import Product
from models.sales_record import SalesRecord
# Sales cache of the open transaction: product -> sales record.
# dict keeps insertion order, which is the scan order of the receipt.
class SalesCache:
    def __init__(self):
        self.entries: dict[Product, SalesRecord] = {}

    def record(self, product: Product, sales_record: SalesRecord) -> None:
        # insert or replace; a product keeps its original scan position
        self.entries[product] = sales_record

    def get(self, product: Product) -> Optional[SalesRecord]:
        return self.entries.get(product)

    def records(self) -> list[SalesRecord]:
        return list(self.entries.values())

    def receipt_order(self) -> list[tuple[Product, SalesRecord]]:
        """
        Perishable entries first, then the rest.
        Both groups keep their scan order (stable partition, no sorting).
        """
        perishables = [(p, r) for p, r in self.entries.items() if p.perishable]
        others = [(p, r) for p, r in self.entries.items() if not p.perishable]
        return perishables + others

    def clear(self) -> None:
        self.entries.clear()

    def __contains__(self, product: object) -> bool:
        return product in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[tuple[Product, SalesRecord]]:
        return iter(list(self.entries.items()))
