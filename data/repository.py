# data/repository.py
import json
import logging
from pathlib import Path

from models.product import Product

logger = logging.getLogger("cash_register.repository")

DEFAULT_SETTINGS = {
    "unknown_product_message": "This product is unknown",
    "receipt_separator": "\t",
    "markdown": {
        "one_day": 65,
        "same_day": 35,
        "expired": 0
    }
}


class DataRepository:
    def __init__(self, storage_dir: str | Path = "data/storage"):
        # base folder where the catalog and register settings live
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def _file_path(self, filename: str) -> Path:
        return self.storage_dir / filename

    def _read_json(self, filename: str):
        # Load JSON from disk. If file does not exist or is empty/bad,
        # return None and let the caller pick a default.
        path = self._file_path(filename)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read().strip()
                if text == "":
                    return None
                return json.loads(text)
        except (OSError, json.JSONDecodeError) as e:
            # corrupted or unreadable -> fail safe
            logger.warning(f"Repository: could not read {path}: {e}")
            return None

    def _write_json(self, filename: str, data) -> None:
        #Save Python data structure back to JSON file with pretty formatting.
        path = self._file_path(filename)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def get_products(self) -> list[Product]:
        data = self._read_json("products.json")
        if not isinstance(data, list):
            return []

        products = []
        for entry in data:
            try:
                products.append(Product(
                    short_name=entry.get("short_name", ""),
                    description=entry["description"],
                    price=int(entry["price"]),
                    barcode=int(entry["barcode"]),
                    perishable=bool(entry.get("perishable", False))
                ))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                # one bad line should not take the whole catalog down
                logger.warning(f"Repository: skipped catalog entry {entry!r}: {e}")
        return products

    def save_products(self, products: list[Product]) -> None:
        self._write_json("products.json", [
            {
                "short_name": p.short_name,
                "description": p.description,
                "price": p.price,
                "barcode": p.barcode,
                "perishable": p.perishable
            }
            for p in products
        ])

    def get_settings(self) -> dict:
        # Returns register settings.
        # If file missing or bad, return default structure.
        data = self._read_json("register.json")
        if not isinstance(data, dict):
            data = {}

        markdown = dict(DEFAULT_SETTINGS["markdown"])
        if isinstance(data.get("markdown"), dict):
            markdown.update(data["markdown"])

        return {
            "unknown_product_message": data.get(
                "unknown_product_message", DEFAULT_SETTINGS["unknown_product_message"]
            ),
            "receipt_separator": data.get("receipt_separator", DEFAULT_SETTINGS["receipt_separator"]),
            "markdown": markdown
        }

    def save_settings(self, settings: dict) -> None:
        self._write_json("register.json", settings)
