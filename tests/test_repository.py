import json

from data.repository import DataRepository
from models.product import Product


def test_missing_files_give_defaults(tmp_path):
    repo = DataRepository(tmp_path / "storage")

    assert repo.get_products() == []
    assert repo.get_settings() == {
        "unknown_product_message": "This product is unknown",
        "receipt_separator": "\t",
        "markdown": {"one_day": 65, "same_day": 35, "expired": 0},
    }


def test_products_round_trip(tmp_path):
    repo = DataRepository(tmp_path)
    products = [
        Product("lamp", "Led Lamp", 250, 1_234, False),
        Product("banana", "Bananas Fyffes", 150, 9_234, True),
    ]

    repo.save_products(products)

    assert repo.get_products() == products


def test_bad_catalog_entries_are_skipped(tmp_path):
    (tmp_path / "products.json").write_text(
        json.dumps([
            {"description": "Gouda 48+", "price": 800, "barcode": 7687, "perishable": True},
            {"description": "no price", "barcode": 1},
            {"description": "bad price", "price": "abc", "barcode": 2},
            "not a dict",
        ]),
        encoding="utf-8",
    )

    products = DataRepository(tmp_path).get_products()

    assert products == [Product("", "Gouda 48+", 800, 7687, True)]


def test_corrupt_json_is_treated_as_missing(tmp_path):
    (tmp_path / "products.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "register.json").write_text("", encoding="utf-8")

    repo = DataRepository(tmp_path)

    assert repo.get_products() == []
    assert repo.get_settings()["receipt_separator"] == "\t"


def test_settings_merge_with_defaults(tmp_path):
    repo = DataRepository(tmp_path)
    repo.save_settings({"receipt_separator": ";", "markdown": {"one_day": 50}})

    settings = repo.get_settings()

    assert settings["receipt_separator"] == ";"
    assert settings["unknown_product_message"] == "This product is unknown"
    assert settings["markdown"] == {"one_day": 50, "same_day": 35, "expired": 0}
