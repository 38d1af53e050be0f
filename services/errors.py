# services/errors.py
# Exceptions raised by the register and its collaborators.


class RegisterError(Exception):
    """Base class for cash register failures."""


class UnknownProductError(RegisterError, LookupError):
    # Raised by SalesService.lookup_product when the barcode is not in the catalog.

    def __init__(self, barcode: int):
        super().__init__(f"Unknown product for barcode {barcode}")
        self.barcode = barcode


class UnknownBestBeforeError(RegisterError, ValueError):
    # Raised by CashRegister.correct_sales_price when no date was given.
    pass


class NoPerishableScannedError(RegisterError, LookupError):
    # correct_sales_price needs a perishable product that is still in the sales cache.
    pass
