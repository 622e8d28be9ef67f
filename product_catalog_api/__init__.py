"""
Top‑level package for the Product Catalog API.

This file makes ``product_catalog_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``product_catalog_api.app.main``.  Tests and the helper scripts
in the repository root rely on these qualified imports.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
