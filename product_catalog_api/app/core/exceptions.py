"""
Error types raised by the service and storage layers.

Endpoints translate ``ProductNotFoundError`` and
``ProductValidationError`` into 404 and 400 responses.  ``StorageError``
is handled once for the whole application in ``main``.
"""


class CatalogError(Exception):
    """Base class for catalog errors."""


class ProductNotFoundError(CatalogError):
    """Raised when no product carries the requested id."""

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")


class ProductValidationError(CatalogError):
    """Raised for malformed or missing input (bad price bound, missing field)."""


class StorageError(CatalogError):
    """Raised when the products document cannot be read or written."""
