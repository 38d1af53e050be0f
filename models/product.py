# models/product.py
from dataclasses import dataclass
# Product model representing a catalog entry the register can scan.
# Frozen so that two lookups of the same barcode give equal, hashable keys.
@dataclass(frozen=True)
class Product:
    short_name: str
    description: str
    price: int          # minor currency units (cents)
    barcode: int
    perishable: bool = False
