# services/display.py
import sys
from abc import ABC, abstractmethod
from typing import TextIO

from models.product import Product
# Output sinks of the register: the customer/cashier display and the receipt printer.


class UI(ABC):
    @abstractmethod
    def display_product(self, product: Product) -> None:
        pass

    @abstractmethod
    def display_calendar(self) -> None:
        # ask the cashier for the best-before date of a perishable product
        pass

    @abstractmethod
    def display_error_message(self, text: str) -> None:
        pass


class Printer(ABC):
    @abstractmethod
    def println(self, line: str) -> None:
        pass


def format_price(cents: int) -> str:
    # 150 -> "1.50"
    return f"{cents // 100}.{cents % 100:02d}"


class ConsoleUI(UI):
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def display_product(self, product: Product) -> None:
        print(f"{product.description}  {format_price(product.price)}", file=self.stream)

    def display_calendar(self) -> None:
        print("Enter best-before date (YYYY-MM-DD):", file=self.stream)

    def display_error_message(self, text: str) -> None:
        print(f"ERROR: {text}", file=self.stream)


class ConsolePrinter(Printer):
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def println(self, line: str) -> None:
        print(line, file=self.stream)
