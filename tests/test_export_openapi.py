import json

import export_openapi


def test_export_writes_document(tmp_path):
    output = tmp_path / "swagger_output.json"
    assert export_openapi.main(["--output", str(output), "--server", "http://localhost:3002"]) == 0

    document = json.loads(output.read_text(encoding="utf-8"))
    assert document["info"]["title"] == "Product API"
    assert document["servers"] == [{"url": "http://localhost:3002"}]
    assert "/products" in document["paths"]


def test_replace_body_lists_required_fields():
    document = export_openapi.build_document()
    schema = document["paths"]["/products/{product_id}"]["put"]["requestBody"]["content"]["application/json"]["schema"]
    assert set(schema["required"]) == {"name", "category", "quantity", "unitPrice", "dateAdded", "supplier"}
