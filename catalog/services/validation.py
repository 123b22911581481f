"""
Catalog API - Product Validation Rules
======================================

What:  Pure checks for the business constraints on product fields.
How:   validate_product_fields() inspects only the keys present in the
       mapping it receives, so the same function serves full creates and
       partial updates. The first violation raises InvalidInputError.
When:  Always before the storage collaborator is called.
"""

import math
from numbers import Integral, Real
from typing import Any, Callable, Dict, Mapping

from catalog.exceptions import InvalidInputError


def _check_name(value: Any) -> None:
    if not isinstance(value, str):
        raise InvalidInputError("name", "Product name is required and must be text")
    if not value.strip():
        raise InvalidInputError("name", "Product name cannot be empty")


def _check_description(value: Any) -> None:
    if value is not None and not isinstance(value, str):
        raise InvalidInputError("description", "Product description must be text")


def _check_price(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError("price", "Product price is required and must be a number")
    if not math.isfinite(value):
        raise InvalidInputError("price", "Product price must be a finite number")
    if value < 0:
        raise InvalidInputError("price", "Product price cannot be negative")


def _check_stock(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError("stock", "Product stock is required and must be an integer")
    if not isinstance(value, Integral) and not (math.isfinite(value) and float(value).is_integer()):
        raise InvalidInputError("stock", "Product stock must be an integer")
    if value < 0:
        raise InvalidInputError("stock", "Product stock cannot be negative")


_RULES: Dict[str, Callable[[Any], None]] = {
    "name": _check_name,
    "description": _check_description,
    "price": _check_price,
    "stock": _check_stock,
}


def validate_product_fields(fields: Mapping[str, Any]) -> None:
    """
    Validate every product field present in `fields`.

    Absent keys are skipped (partial-update semantics). Unknown keys are
    rejected so a typo never reaches the storage layer.

    Raises:
        InvalidInputError: naming the first offending field
    """
    for name, value in fields.items():
        rule = _RULES.get(name)
        if rule is None:
            raise InvalidInputError(name, f"Unknown product field '{name}'")
        rule(value)


def clean_product_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Normalize already-validated fields for storage.

    Trims name and description; stores integral floats (10.0) as int.
    """
    cleaned: Dict[str, Any] = dict(fields)
    if "name" in cleaned:
        cleaned["name"] = cleaned["name"].strip()
    if isinstance(cleaned.get("description"), str):
        cleaned["description"] = cleaned["description"].strip()
    if "stock" in cleaned:
        cleaned["stock"] = int(cleaned["stock"])
    if "price" in cleaned:
        cleaned["price"] = float(cleaned["price"])
    return cleaned
