"""
Pydantic models for product data.

Products are stored as free‑form JSON objects, so apart from
``ProductReplace`` these models mark every field optional and allow
extra keys.  They exist to document the API and to shape responses,
not to reject payloads: creating a product performs no required‑field
validation and a partial update copies whatever keys it receives.
``ProductReplace`` lists the full field set that ``PUT`` requires;
the check itself is done by ``ProductService`` so that a missing field
yields a 400 response rather than the framework's 422.
"""

from typing import Optional

from pydantic import BaseModel, Field


# Keys a full replace must carry.  Order matches the stored record.
REPLACE_FIELDS = ("name", "category", "quantity", "unitPrice", "dateAdded", "supplier")

# Every field the catalog knows about, apart from ``id``.
PRODUCT_FIELDS = ("name", "category", "unitPrice", "quantity", "supplier", "dateAdded")


class ProductBase(BaseModel):
    name: Optional[str] = Field(None, examples=["Nowy Smartfon XYZ"])
    category: Optional[str] = Field(None, examples=["Elektronika"])
    unitPrice: Optional[float] = Field(None, ge=0, examples=[399.99])
    quantity: Optional[int] = Field(None, ge=0, examples=[25])
    supplier: Optional[str] = Field(None, examples=["TechSupplier Co."])
    dateAdded: Optional[str] = Field(None, examples=["2024-11-05"])

    model_config = {
        "extra": "allow",
    }


class ProductCreate(ProductBase):
    """Schema for creating a product.  The id is assigned by the store."""
    pass


class ProductUpdate(ProductBase):
    """Schema for a partial update.

    Only provided fields are merged onto the stored product.
    """
    pass


class ProductReplace(BaseModel):
    """Schema for replacing a product; every field is required."""

    name: str = Field(..., examples=["Nowy Smartfon XYZ"])
    category: str = Field(..., examples=["Elektronika"])
    quantity: int = Field(..., ge=0, examples=[25])
    unitPrice: float = Field(..., ge=0, examples=[399.99])
    dateAdded: str = Field(..., examples=["2024-11-05"])
    supplier: str = Field(..., examples=["TechSupplier Co."])


class ProductRead(BaseModel):
    """Schema for a product returned by the API."""

    id: int
    name: Optional[str] = None
    category: Optional[str] = None
    unitPrice: Optional[float] = None
    quantity: Optional[int] = None
    supplier: Optional[str] = None
    dateAdded: Optional[str] = None

    model_config = {
        "extra": "allow",
    }


class MessageResponse(BaseModel):
    message: str
