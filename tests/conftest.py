import json

import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import settings
from product_catalog_api.app.main import app


SEED_PRODUCTS = [
    {
        "id": 1,
        "name": "Laptop Pro 15",
        "category": "Elektronika",
        "unitPrice": 4599.99,
        "quantity": 12,
        "supplier": "TechSupplier Co.",
        "dateAdded": "2024-10-01",
    },
    {
        "id": 2,
        "name": "Office Chair",
        "category": "Furniture",
        "unitPrice": 349.5,
        "quantity": 40,
        "supplier": "OfficeHome",
        "dateAdded": "2024-10-03",
    },
    {
        "id": 3,
        "name": "Wireless Headphones",
        "category": "elektronika",
        "unitPrice": 199,
        "quantity": 75,
        "supplier": "AudioWorld",
        "dateAdded": "2024-10-07",
    },
]


def read_document(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def products_file(tmp_path, monkeypatch):
    path = tmp_path / "products.json"
    path.write_text(json.dumps({"products": SEED_PRODUCTS}, indent=2), encoding="utf-8")
    monkeypatch.setattr(settings, "products_file", str(path))
    return path


@pytest.fixture
def client(products_file):
    with TestClient(app) as test_client:
        yield test_client
