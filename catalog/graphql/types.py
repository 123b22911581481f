"""
GraphQL object types.

Field names are declared in snake_case; strawberry exposes them in
camelCase (created_at → createdAt).
"""

from datetime import datetime, timezone
from typing import Optional

import strawberry

from catalog.models.product import Product
from catalog.schemas.product import SortOrder

SortBy = strawberry.enum(SortOrder, name="SortBy", description="Ordering for productsList")


@strawberry.type(name="Product", description="A catalog product")
class ProductType:
    id: strawberry.ID
    name: str
    description: Optional[str]
    price: float
    stock: int
    created_at: datetime

    @classmethod
    def from_model(cls, product: Product) -> "ProductType":
        created_at = product.created_at
        # SQLite drops tzinfo; stored values are always UTC
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return cls(
            id=strawberry.ID(str(product.id)),
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
            created_at=created_at,
        )
