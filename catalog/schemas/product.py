"""
Catalog API - Pydantic Payload Schemas
======================================

What:  Pydantic models describing what the product service accepts.
How:   The GraphQL resolvers build these from operation arguments; the
       product service reads them. Business rules (non-negative price,
       integral stock, non-blank name) are NOT encoded here: they belong to
       catalog.services.validation so that they report InvalidInputError.

Partial updates:
    ProductUpdate only records the fields the caller actually supplied
    (`model_fields_set`). An explicit None ("description": null) is therefore
    distinguishable from an absent field.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field


class SortOrder(str, Enum):
    """Ordering applied by ProductService.list."""
    price_asc = "price_asc"
    price_desc = "price_desc"
    none = "none"


class ProductFilter(BaseModel):
    """
    Read options for ProductService.list.

    limit/offset default to 50/0 inside the service when left as None.
    """
    min_stock: Optional[int] = Field(default=None, description="Only products with stock >= min_stock")
    sort_by: Optional[SortOrder] = Field(default=None, description="price_asc, price_desc or none")
    limit: Optional[int] = Field(default=None, description="Page size (default 50)")
    offset: Optional[int] = Field(default=None, description="Records to skip (default 0)")


class ProductCreate(BaseModel):
    """Full payload for a new product."""
    name: Optional[str]
    description: Optional[str] = None
    price: Optional[float]
    stock: Optional[Union[int, float]]

    def fields(self) -> Dict[str, Any]:
        return self.model_dump()


class ProductUpdate(BaseModel):
    """Partial payload: only explicitly supplied fields are applied."""
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    stock: Optional[Union[int, float]] = None

    def fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and dependency status.
    Who:   Returned by GET /health for monitoring and load balancer checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
    checked_at: datetime = Field(description="When this check ran (UTC)")
