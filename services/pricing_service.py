# services/pricing_service.py

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Any


class MarkdownPolicy:
    """
    Best-before markdown for perishable products.

    Percentages are of the unit price that the customer still pays:
        days_left >= 2 : 100 (no markdown)
        days_left == 1 : one_day   (default 65)
        days_left == 0 : same_day  (default 35)
        days_left <  0 : expired   (default 0, the product is free)
    """

    DEFAULTS = {"one_day": 65, "same_day": 35, "expired": 0}

    def __init__(self, one_day: int = 65, same_day: int = 35, expired: int = 0):
        for name, pct in (("one_day", one_day), ("same_day", same_day), ("expired", expired)):
            if not 0 <= pct <= 100:
                raise ValueError(f"Markdown percentage {name} must be between 0 and 100, got {pct}")
        self.one_day = one_day
        self.same_day = same_day
        self.expired = expired

    @classmethod
    def from_settings(cls, markdown: Dict[str, Any] | None) -> MarkdownPolicy:
        # missing keys fall back to the defaults
        cfg = dict(cls.DEFAULTS)
        if markdown:
            cfg.update({k: int(v) for k, v in markdown.items() if k in cls.DEFAULTS})
        return cls(**cfg)

    def percent_for(self, days_left: int) -> int:
        if days_left >= 2:
            return 100
        if days_left == 1:
            return self.one_day
        if days_left == 0:
            return self.same_day
        return self.expired

    def sales_price(self, unit_price: int, days_left: int) -> int:
        # Return the marked down price in whole minor units, halves rounded up.
        pct = self.percent_for(days_left)
        if pct == 100:
            return unit_price
        price = Decimal(unit_price) * pct / 100
        return int(price.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
