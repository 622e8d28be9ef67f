"""Tests for the product service operations."""
import asyncio

import pytest

from product_catalog_api.app.core.config import settings
from product_catalog_api.app.core.exceptions import (
    ProductNotFoundError,
    ProductValidationError,
    StorageError,
)
from product_catalog_api.app.services.product_filter import ProductFilter
from product_catalog_api.app.services.product_service import ProductService

from .conftest import SEED_PRODUCTS, read_document


def run(coro):
    return asyncio.run(coro)


FULL_PAYLOAD = {
    "name": "Standing Desk",
    "category": "Furniture",
    "quantity": 5,
    "unitPrice": 899.0,
    "dateAdded": "2024-11-01",
    "supplier": "OfficeHome",
}


def test_list_returns_collection(products_file):
    assert run(ProductService.list_products()) == SEED_PRODUCTS


def test_search_without_predicates_matches_list(products_file):
    assert run(ProductService.search_products(ProductFilter())) == run(ProductService.list_products())


def test_get_product(products_file):
    assert run(ProductService.get_product(2))["name"] == "Office Chair"


def test_get_unknown_product_raises(products_file):
    with pytest.raises(ProductNotFoundError):
        run(ProductService.get_product(99))


def test_create_then_get_returns_same_product(products_file):
    created = run(ProductService.create_product({"name": "Lamp", "unitPrice": 59.9}))
    assert created == {"id": 4, "name": "Lamp", "unitPrice": 59.9}
    assert run(ProductService.get_product(created["id"])) == created
    assert read_document(products_file)["products"][-1] == created


def test_create_ignores_payload_id(products_file):
    created = run(ProductService.create_product({"id": 42, "name": "Lamp"}))
    assert created["id"] == 4


def test_create_accepts_empty_payload(products_file):
    assert run(ProductService.create_product({})) == {"id": 4}


def test_create_after_deleting_last_reuses_id(products_file):
    run(ProductService.delete_product(3))
    created = run(ProductService.create_product({"name": "Replacement"}))
    assert created["id"] == 3


def test_create_after_deleting_middle_duplicates_id(products_file):
    run(ProductService.delete_product(2))
    created = run(ProductService.create_product({"name": "Duplicate"}))
    assert created["id"] == 3
    assert [p["id"] for p in run(ProductService.list_products())] == [1, 3, 3]
    # The first record with the id wins on lookup.
    assert run(ProductService.get_product(3))["name"] == "Wireless Headphones"


def test_delete_then_get_raises(products_file):
    run(ProductService.delete_product(1))
    with pytest.raises(ProductNotFoundError):
        run(ProductService.get_product(1))


def test_delete_removes_duplicate_ids(products_file):
    run(ProductService.delete_product(2))
    run(ProductService.create_product({"name": "Duplicate"}))
    run(ProductService.delete_product(3))
    assert [p["id"] for p in run(ProductService.list_products())] == [1]


def test_delete_unknown_raises_and_keeps_document(products_file):
    with pytest.raises(ProductNotFoundError):
        run(ProductService.delete_product(99))
    assert read_document(products_file)["products"] == SEED_PRODUCTS


def test_replace_stores_exact_field_set(products_file):
    replaced = run(ProductService.replace_product(2, dict(FULL_PAYLOAD, color="black")))
    assert replaced == dict(FULL_PAYLOAD, id=2)
    assert "color" not in run(ProductService.get_product(2))


def test_replace_accepts_zero_quantity_and_price(products_file):
    replaced = run(ProductService.replace_product(1, dict(FULL_PAYLOAD, quantity=0, unitPrice=0)))
    assert replaced["quantity"] == 0
    assert replaced["unitPrice"] == 0


@pytest.mark.parametrize("field", ["name", "category", "quantity", "unitPrice", "dateAdded", "supplier"])
def test_replace_missing_field_raises_and_keeps_product(products_file, field):
    payload = dict(FULL_PAYLOAD)
    del payload[field]
    with pytest.raises(ProductValidationError, match=field):
        run(ProductService.replace_product(2, payload))
    assert run(ProductService.get_product(2)) == SEED_PRODUCTS[1]


def test_replace_null_or_empty_field_raises(products_file):
    with pytest.raises(ProductValidationError):
        run(ProductService.replace_product(2, dict(FULL_PAYLOAD, unitPrice=None)))
    with pytest.raises(ProductValidationError):
        run(ProductService.replace_product(2, dict(FULL_PAYLOAD, name="")))


def test_replace_unknown_id_raises_not_found_first(products_file):
    with pytest.raises(ProductNotFoundError):
        run(ProductService.replace_product(99, {}))


def test_update_preserves_other_fields(products_file):
    updated = run(ProductService.update_product(2, {"unitPrice": 299.0}))
    expected = dict(SEED_PRODUCTS[1], unitPrice=299.0)
    assert updated == expected
    assert run(ProductService.get_product(2)) == expected


def test_update_copies_unknown_keys(products_file):
    updated = run(ProductService.update_product(1, {"color": "silver"}))
    assert updated["color"] == "silver"
    assert run(ProductService.get_product(1))["color"] == "silver"


def test_update_never_changes_id(products_file):
    updated = run(ProductService.update_product(1, {"id": 7, "name": "Renamed"}))
    assert updated["id"] == 1
    assert run(ProductService.get_product(1))["name"] == "Renamed"


def test_update_known_fields_only(products_file, monkeypatch):
    monkeypatch.setattr(settings, "patch_known_fields_only", True)
    updated = run(ProductService.update_product(1, {"color": "silver", "quantity": 3}))
    assert "color" not in updated
    assert updated["quantity"] == 3


def test_update_unknown_id_raises(products_file):
    with pytest.raises(ProductNotFoundError):
        run(ProductService.update_product(99, {"name": "x"}))


def test_missing_document_raises_storage_error(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "products_file", str(tmp_path / "absent.json"))
    with pytest.raises(StorageError):
        run(ProductService.list_products())
    with pytest.raises(StorageError):
        run(ProductService.create_product({"name": "x"}))
