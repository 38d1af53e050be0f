import tkinter as tk
from tkinter import ttk, messagebox

from datetime import date

from utils.clock import SystemClock
from utils.logger import setup_logger
from data.repository import DataRepository
from models.product import Product
from services.cash_register import CashRegister
from services.display import UI, Printer, format_price
from services.errors import RegisterError
from services.pricing_service import MarkdownPolicy
from services.sales_service import CatalogSalesService

def parse_day(day_str: str) -> date | None:
    # "2026-10-18" -> date(2026, 10, 18); empty -> None
    day_str = day_str.strip()
    if day_str == "":
        return None
    return date.fromisoformat(day_str)

class RegisterApp(UI, Printer):
    """
    Tkinter till. The window is both the display and the receipt printer
    of the CashRegister it drives.
    """

    def __init__(self, root: tk.Tk, repo: DataRepository | None = None):
        # core services / data
        self.root = root
        self.root.title("Cash Register")
        self.root.geometry("700x520")

        self.logger = setup_logger()
        self.repo = repo or DataRepository()

        settings = self.repo.get_settings()
        products = self.repo.get_products()
        self.sales_service = CatalogSalesService(products)
        self.register = CashRegister(
            clock=SystemClock(),
            printer=self,
            ui=self,
            sales_service=self.sales_service,
            policy=MarkdownPolicy.from_settings(settings["markdown"]),
            settings=settings,
        )
        self.logger.info(f"GUI: register started with {len(products)} catalog products")

        self.build_scan_frame()
        self.build_best_before_frame()
        self.build_receipt_frame()

    # Scan section

    def build_scan_frame(self):
        scan_frame = ttk.LabelFrame(self.root, text="Scan")
        scan_frame.pack(fill="x", padx=10, pady=10)

        ttk.Label(scan_frame, text="Barcode:").grid(row=0, column=0, sticky="e", padx=5, pady=5)
        self.barcode_entry = ttk.Entry(scan_frame, width=20)
        self.barcode_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)
        self.barcode_entry.bind("<Return>", lambda _event: self.gui_scan())

        scan_btn = ttk.Button(
            scan_frame,
            text="Scan",
            command=self.gui_scan
        )
        scan_btn.grid(row=0, column=2, sticky="w", padx=10, pady=5)

        self.product_label = ttk.Label(scan_frame, text="", font=("Arial", 12, "bold"))
        self.product_label.grid(row=1, column=0, columnspan=3, sticky="w", padx=5, pady=5)

    def gui_scan(self):
        barcode_str = self.barcode_entry.get().strip()
        if not barcode_str:
            return

        try:
            barcode = int(barcode_str)
        except ValueError:
            messagebox.showerror("Error", "Barcode must be a number.")
            return

        self.register.scan(barcode)
        self.barcode_entry.delete(0, tk.END)

    # Best-before section, enabled by display_calendar

    def build_best_before_frame(self):
        bb_frame = ttk.LabelFrame(self.root, text="Best-before (perishables)")
        bb_frame.pack(fill="x", padx=10, pady=(0, 10))

        ttk.Label(bb_frame, text="Date (YYYY-MM-DD):").grid(row=0, column=0, sticky="e", padx=5, pady=5)
        self.best_before_entry = ttk.Entry(bb_frame, width=15, state="disabled")
        self.best_before_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)

        self.best_before_btn = ttk.Button(
            bb_frame,
            text="Apply",
            command=self.gui_correct_sales_price,
            state="disabled"
        )
        self.best_before_btn.grid(row=0, column=2, sticky="w", padx=10, pady=5)

    def gui_correct_sales_price(self):
        try:
            best_before = parse_day(self.best_before_entry.get())
        except ValueError:
            messagebox.showerror("Error", "Date must look like 2026-10-18.")
            return

        try:
            self.register.correct_sales_price(best_before)
        except RegisterError as e:
            self.logger.warning(f"GUI: markdown rejected: {e}")
            messagebox.showerror("Error", str(e))
            return

        self.best_before_entry.delete(0, tk.END)
        self.best_before_entry.config(state="disabled")
        self.best_before_btn.config(state="disabled")
        self.refresh_receipt()

    # Receipt section

    def build_receipt_frame(self):
        receipt_frame = ttk.LabelFrame(self.root, text="Receipt")
        receipt_frame.pack(fill="both", expand=True, padx=10, pady=(0, 10))

        self.receipt_text = tk.Text(receipt_frame, height=12, state="disabled")
        self.receipt_text.pack(fill="both", expand=True, padx=5, pady=5)

        btn_frame = ttk.Frame(receipt_frame)
        btn_frame.pack(pady=(0, 5))
        ttk.Button(btn_frame, text="Print Receipt", command=self.refresh_receipt).pack(side="left", padx=5)
        ttk.Button(btn_frame, text="Finalize Sale", command=self.gui_finalize).pack(side="left", padx=5)

    def refresh_receipt(self):
        self.receipt_text.config(state="normal")
        self.receipt_text.delete("1.0", tk.END)
        self.receipt_text.config(state="disabled")
        self.register.print_receipt()

    def gui_finalize(self):
        if len(self.register.sales_cache) == 0:
            messagebox.showerror("Error", "Nothing scanned yet.")
            return

        self.refresh_receipt()
        self.register.finalize_sales_transaction()
        self.product_label.config(text="")
        self.logger.info(
            f"GUI: sale finalized, session revenue={format_price(self.sales_service.revenue())}"
        )
        messagebox.showinfo("Sale Complete", "Transaction finalized.")

    # UI / Printer callbacks used by CashRegister

    def display_product(self, product: Product) -> None:
        self.product_label.config(text=f"{product.description}  {format_price(product.price)}")

    def display_calendar(self) -> None:
        self.best_before_entry.config(state="normal")
        self.best_before_btn.config(state="normal")
        self.best_before_entry.focus()

    def display_error_message(self, text: str) -> None:
        messagebox.showerror("Error", text)

    def println(self, line: str) -> None:
        self.receipt_text.config(state="normal")
        self.receipt_text.insert(tk.END, line + "\n")
        self.receipt_text.config(state="disabled")


def main():
    root = tk.Tk()
    app = RegisterApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
