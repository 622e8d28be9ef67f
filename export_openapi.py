#!/usr/bin/env python3
"""
Write the Product API's OpenAPI document to a JSON file.

The running server already serves the schema at ``/openapi.json`` and
Swagger UI at ``/api-docs``.  This script produces the same document
offline so it can be committed or handed to client generators.

Usage:
    python export_openapi.py --output swagger_output.json --server http://localhost:3002
"""

import argparse
import json
import sys

from product_catalog_api.app.main import app


def build_document(server_url: str = "") -> dict:
    """Return the OpenAPI document, optionally pinned to ``server_url``."""
    document = app.openapi()
    if server_url:
        document = dict(document, servers=[{"url": server_url}])
    return document


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Export the Product API OpenAPI document.")
    ap.add_argument("--output", default="swagger_output.json", help="Destination file (default: swagger_output.json)")
    ap.add_argument("--server", default="", help="Base URL to record in the 'servers' section, e.g. http://localhost:3002")
    args = ap.parse_args(argv)

    document = build_document(args.server)
    try:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
    except OSError as e:
        print(f"[!] Cannot write {args.output}: {e}", file=sys.stderr)
        return 1
    print(f"[+] OpenAPI document written to {args.output} ({len(document.get('paths', {}))} paths)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
