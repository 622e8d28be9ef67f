"""
Service layer for products.

Each operation reloads the full catalog from the JSON document,
computes its result and, for mutating operations, writes the whole
catalog back.  Nothing is cached between calls.

Two behaviours are kept deliberately:

* ``create_product`` accepts any payload and assigns
  ``id = len(products) + 1``.  After a deletion this can hand out an
  id that is (or was) already in use.
* ``replace_product`` requires the full field set while
  ``create_product`` requires nothing.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from product_catalog_api.app.core.config import settings
from product_catalog_api.app.core.exceptions import ProductNotFoundError, ProductValidationError
from product_catalog_api.app.core.store import get_store
from product_catalog_api.app.schemas.product import PRODUCT_FIELDS, REPLACE_FIELDS
from product_catalog_api.app.services.product_filter import ProductFilter


logger = logging.getLogger(__name__)


def _find_index(products: List[Dict[str, Any]], product_id: int) -> Optional[int]:
    for index, product in enumerate(products):
        if product.get("id") == product_id:
            return index
    return None


def _missing_replace_fields(data: Dict[str, Any]) -> List[str]:
    """Return the required replace fields absent from ``data``.

    Text fields must be non‑empty; ``quantity`` and ``unitPrice`` only
    need to be present and not null, so zero is accepted.
    """
    missing = []
    for field in REPLACE_FIELDS:
        value = data.get(field)
        if field in ("quantity", "unitPrice"):
            if value is None:
                missing.append(field)
        elif not value:
            missing.append(field)
    return missing


class ProductService:
    """Service class for the product catalog."""

    @classmethod
    async def list_products(cls) -> List[Dict[str, Any]]:
        """Return every product in storage order."""
        return get_store().load()

    @classmethod
    async def search_products(cls, product_filter: ProductFilter) -> List[Dict[str, Any]]:
        """Return the products matching ``product_filter``.

        An empty filter returns the whole catalog.  No match returns an
        empty list.
        """
        products = get_store().load()
        result = product_filter.apply(products)
        logger.debug("Search %s matched %d of %d products", product_filter, len(result), len(products))
        return result

    @classmethod
    async def get_product(cls, product_id: int) -> Dict[str, Any]:
        """Return the product with ``product_id``.

        Raises ``ProductNotFoundError`` if there is none.
        """
        products = get_store().load()
        index = _find_index(products, product_id)
        if index is None:
            raise ProductNotFoundError(product_id)
        return products[index]

    @classmethod
    async def create_product(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Append a new product and return it.

        The payload is stored as given, without checking for required
        fields.  Any ``id`` in the payload is ignored; the new id is the
        collection length plus one.
        """
        with get_store().transaction() as products:
            product = {"id": len(products) + 1}
            product.update({k: v for k, v in data.items() if k != "id"})
            products.append(product)
        logger.info("Created product %s", product["id"])
        return product

    @classmethod
    async def replace_product(cls, product_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """Replace a product with a complete new record.

        ``name``, ``category``, ``quantity``, ``unitPrice``, ``dateAdded``
        and ``supplier`` are all required.  Keys outside this set are
        dropped.  Raises ``ProductNotFoundError`` if the id is unknown
        and ``ProductValidationError`` if a field is missing; in both
        cases the document is left untouched.
        """
        with get_store().transaction() as products:
            index = _find_index(products, product_id)
            if index is None:
                raise ProductNotFoundError(product_id)
            missing = _missing_replace_fields(data)
            if missing:
                raise ProductValidationError(f"Missing required fields: {', '.join(missing)}")
            product = {"id": product_id}
            product.update({field: data[field] for field in REPLACE_FIELDS})
            products[index] = product
        logger.info("Replaced product %s", product_id)
        return product

    @classmethod
    async def update_product(cls, product_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``data`` onto an existing product and return the result.

        Fields missing from ``data`` keep their stored values.  By default
        every key in ``data`` is copied, including keys the catalog does
        not know; with ``PATCH_KNOWN_FIELDS_ONLY`` only the product
        fields are merged.  The id itself never changes.
        """
        if settings.patch_known_fields_only:
            changes = {k: v for k, v in data.items() if k in PRODUCT_FIELDS}
        else:
            changes = {k: v for k, v in data.items() if k != "id"}
        with get_store().transaction() as products:
            index = _find_index(products, product_id)
            if index is None:
                raise ProductNotFoundError(product_id)
            product = products[index]
            product.update(changes)
        logger.info("Updated product %s (%s)", product_id, ", ".join(changes) or "no fields")
        return product

    @classmethod
    async def delete_product(cls, product_id: int) -> None:
        """Remove a product.  Raises ``ProductNotFoundError`` if it does not exist.

        Every record carrying ``product_id`` is removed, including
        duplicates left behind by id reuse.
        """
        with get_store().transaction() as products:
            if _find_index(products, product_id) is None:
                raise ProductNotFoundError(product_id)
            products[:] = [p for p in products if p.get("id") != product_id]
        logger.info("Deleted product %s", product_id)
