"""
Search predicates for the product catalog.

A ``ProductFilter`` holds up to four optional predicates (category,
supplier, minimum and maximum unit price) and keeps the products that
satisfy all of them, preserving collection order.  Text predicates
compare case‑insensitively; price bounds are inclusive.  A predicate
whose value is empty is not applied at all.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from product_catalog_api.app.core.exceptions import ProductValidationError


def _parse_bound(name: str, raw: Optional[str]) -> Optional[float]:
    """Parse a price bound from a query string value.

    Empty values mean "no bound".  Anything that is not a number raises
    ``ProductValidationError``.
    """
    if raw is None or raw == "":
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ProductValidationError(f"{name} must be a number") from None
    if math.isnan(value):
        raise ProductValidationError(f"{name} must be a number")
    return value


def _as_price(value: Any) -> Optional[float]:
    """Return a stored unit price as a float, or None if it is not numeric."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        price = float(value)
    elif isinstance(value, str):
        try:
            price = float(value)
        except ValueError:
            return None
    else:
        return None
    return None if math.isnan(price) else price


def _text_matches(value: Any, expected: str) -> bool:
    return isinstance(value, str) and bool(value) and value.lower() == expected.lower()


@dataclass
class ProductFilter:
    category: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    supplier: Optional[str] = None

    @classmethod
    def parse(
        cls,
        category: Optional[str] = None,
        min_price: Optional[str] = None,
        max_price: Optional[str] = None,
        supplier: Optional[str] = None,
    ) -> "ProductFilter":
        """Build a filter from raw query parameters.

        Raises ``ProductValidationError`` with ``"minPrice must be a
        number"`` (or ``maxPrice``) for a bound that does not parse.
        """
        return cls(
            category=category or None,
            min_price=_parse_bound("minPrice", min_price),
            max_price=_parse_bound("maxPrice", max_price),
            supplier=supplier or None,
        )

    @property
    def is_empty(self) -> bool:
        return (
            self.category is None
            and self.min_price is None
            and self.max_price is None
            and self.supplier is None
        )

    def matches(self, product: Dict[str, Any]) -> bool:
        if self.category is not None and not _text_matches(product.get("category"), self.category):
            return False
        if self.min_price is not None or self.max_price is not None:
            price = _as_price(product.get("unitPrice"))
            if price is None:
                return False
            if self.min_price is not None and price < self.min_price:
                return False
            if self.max_price is not None and price > self.max_price:
                return False
        if self.supplier is not None and not _text_matches(product.get("supplier"), self.supplier):
            return False
        return True

    def apply(self, products: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Return the products matching every predicate, in their original order."""
        if self.is_empty:
            return list(products)
        return [product for product in products if self.matches(product)]
