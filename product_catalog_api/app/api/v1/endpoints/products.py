"""
Product endpoints for API v1.

These routes expose CRUD operations and a filtered search over the
product catalog.  Request bodies are accepted as plain JSON objects:
creating a product performs no field validation, replacing one checks
the full field set in the service, and a partial update merges
whatever it receives.  The pydantic schemas are attached to the
OpenAPI document so that the generated docs still describe the
expected payloads.

``/search`` is declared before ``/{product_id}``; otherwise the
literal segment would be captured as an id.  Ids are taken as text and
a segment that is not an integer answers 404, since no product can
carry it.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, HTTPException, Path, Query, status

from product_catalog_api.app.core.exceptions import ProductNotFoundError, ProductValidationError
from product_catalog_api.app.schemas.product import (
    MessageResponse,
    ProductCreate,
    ProductRead,
    ProductReplace,
    ProductUpdate,
)
from product_catalog_api.app.services.product_filter import ProductFilter
from product_catalog_api.app.services.product_service import ProductService

router = APIRouter()
logger = logging.getLogger(__name__)


def _request_body_doc(schema_model) -> Dict[str, Any]:
    """Describe a free‑form JSON body with ``schema_model`` in the OpenAPI document."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema_model.model_json_schema()}},
        }
    }


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")


def _parse_id(raw: str) -> int:
    """Convert a path segment to a product id; anything else cannot match a product."""
    try:
        return int(raw)
    except ValueError:
        raise _not_found() from None


def _bad_request(e: ProductValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get(
    "",
    response_model=None,
    responses={200: {"model": List[ProductRead], "description": "All products"}},
    summary="List products",
)
async def list_products() -> List[Dict[str, Any]]:
    """Return every product in the catalog."""
    return await ProductService.list_products()


@router.get(
    "/search",
    response_model=None,
    responses={
        200: {"model": List[ProductRead], "description": "Products matching the query"},
        400: {"description": "A price bound is not a number"},
    },
    summary="Search products",
)
async def search_products(
    category: Optional[str] = Query(None, description="Filter by category (case insensitive)"),
    min_price: Optional[str] = Query(None, alias="minPrice", description="Minimum unit price, inclusive"),
    max_price: Optional[str] = Query(None, alias="maxPrice", description="Maximum unit price, inclusive"),
    supplier: Optional[str] = Query(None, description="Filter by supplier (case insensitive)"),
) -> List[Dict[str, Any]]:
    """Return products matching every supplied filter.

    - **category**, **supplier**: exact match, case insensitive.
    - **minPrice**, **maxPrice**: inclusive bounds on ``unitPrice``.

    Empty parameters are ignored.  No match yields an empty list.
    """
    logger.debug(
        "Search query: category=%r minPrice=%r maxPrice=%r supplier=%r",
        category, min_price, max_price, supplier,
    )
    try:
        product_filter = ProductFilter.parse(
            category=category,
            min_price=min_price,
            max_price=max_price,
            supplier=supplier,
        )
    except ProductValidationError as e:
        raise _bad_request(e) from e
    return await ProductService.search_products(product_filter)


@router.get(
    "/{product_id}",
    response_model=None,
    responses={
        200: {"model": ProductRead, "description": "The product"},
        404: {"description": "Product not found"},
    },
    summary="Get a product",
)
async def get_product(product_id: str = Path(..., description="Product ID")) -> Dict[str, Any]:
    """Retrieve a single product by its ID.  Raises 404 if it does not exist."""
    try:
        return await ProductService.get_product(_parse_id(product_id))
    except ProductNotFoundError as e:
        raise _not_found() from e


@router.post(
    "",
    response_model=None,
    status_code=status.HTTP_201_CREATED,
    responses={201: {"model": ProductRead, "description": "The created product"}},
    openapi_extra=_request_body_doc(ProductCreate),
    summary="Create a product",
)
async def create_product(data: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Add a new product.  The id is assigned by the server."""
    return await ProductService.create_product(data)


@router.put(
    "/{product_id}",
    response_model=None,
    responses={
        200: {"model": ProductRead, "description": "The replaced product"},
        400: {"description": "A required field is missing"},
        404: {"description": "Product not found"},
    },
    openapi_extra=_request_body_doc(ProductReplace),
    summary="Replace a product",
)
async def replace_product(
    product_id: str = Path(..., description="Product ID"),
    data: Dict[str, Any] = Body(...),
) -> Dict[str, Any]:
    """Replace every field of an existing product.

    All of ``name``, ``category``, ``quantity``, ``unitPrice``,
    ``dateAdded`` and ``supplier`` must be present.
    """
    try:
        return await ProductService.replace_product(_parse_id(product_id), data)
    except ProductNotFoundError as e:
        raise _not_found() from e
    except ProductValidationError as e:
        raise _bad_request(e) from e


@router.patch(
    "/{product_id}",
    response_model=None,
    responses={
        200: {"model": ProductRead, "description": "The updated product"},
        404: {"description": "Product not found"},
    },
    openapi_extra=_request_body_doc(ProductUpdate),
    summary="Partially update a product",
)
async def update_product(
    product_id: str = Path(..., description="Product ID"),
    data: Dict[str, Any] = Body(...),
) -> Dict[str, Any]:
    """Update selected fields of a product; other fields stay as they are."""
    try:
        return await ProductService.update_product(_parse_id(product_id), data)
    except ProductNotFoundError as e:
        raise _not_found() from e


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    responses={404: {"description": "Product not found"}},
    summary="Delete a product",
)
async def delete_product(product_id: str = Path(..., description="Product ID")) -> MessageResponse:
    """Delete a product by ID."""
    try:
        await ProductService.delete_product(_parse_id(product_id))
    except ProductNotFoundError as e:
        raise _not_found() from e
    return MessageResponse(message="Product deleted")
