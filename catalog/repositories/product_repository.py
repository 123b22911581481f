"""
Catalog API - Product Repository
================================

What:  Storage collaborator for products: find, find-by-id, name search,
       insert, update-by-id and delete-by-id.
How:   Builds SQLAlchemy 2.0 select/delete statements and runs each call in
       its own session_scope() transaction.
Who:   Called by ProductService only.
"""

import uuid
from typing import Any, AsyncContextManager, Callable, Dict, List, Optional

from sqlalchemy import asc, delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.database import session_scope
from catalog.models.product import Product


class MalformedIdentifierError(ValueError):
    """Raised when an identifier cannot be parsed as a product id (UUID)."""

    def __init__(self, value: Any, field: str = "id"):
        self.value = value
        self.field = field
        super().__init__(f"Malformed identifier for '{field}': {value!r}")


def parse_identifier(value: Any) -> uuid.UUID:
    """Convert an opaque id string into the stored UUID."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise MalformedIdentifierError(value) from None


class ProductRepository:
    """
    Async product storage.

    Each public coroutine opens exactly one transaction. Uniqueness of
    `name` is enforced by the database (uq_products_name); the repository
    does not pre-check it.
    """

    def __init__(
        self,
        session_factory: Callable[[], AsyncContextManager[AsyncSession]] = session_scope,
    ):
        self._session_scope = session_factory

    async def find(
        self,
        min_stock: Optional[int] = None,
        price_order: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Product]:
        """
        Query plan:
            SELECT * FROM products [WHERE stock >= :min_stock]
            ORDER BY [price ASC|DESC,] created_at, id
            LIMIT :limit OFFSET :offset

        created_at/id keep page boundaries deterministic when prices tie.
        """
        query = select(Product)
        if min_stock is not None:
            query = query.where(Product.stock >= min_stock)

        if price_order == "asc":
            query = query.order_by(asc(Product.price))
        elif price_order == "desc":
            query = query.order_by(desc(Product.price))
        query = query.order_by(asc(Product.created_at), asc(Product.id))

        if limit is not None:
            query = query.limit(limit)
        if offset:
            query = query.offset(offset)

        async with self._session_scope() as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def find_by_id(self, product_id: Any) -> Optional[Product]:
        key = parse_identifier(product_id)
        async with self._session_scope() as session:
            return await session.get(Product, key)

    async def find_by_name(self, term: str) -> List[Product]:
        """Case-insensitive, unanchored substring match; % and _ match literally."""
        query = (
            select(Product)
            .where(Product.name.icontains(term, autoescape=True))
            .order_by(asc(Product.created_at), asc(Product.id))
        )
        async with self._session_scope() as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def insert(self, fields: Dict[str, Any]) -> Product:
        async with self._session_scope() as session:
            product = Product(**fields)
            session.add(product)
            # Flush inside the scope so constraint violations surface here
            await session.flush()
            return product

    async def update_by_id(self, product_id: Any, fields: Dict[str, Any]) -> Optional[Product]:
        """Apply `fields` to the matching record and return it post-update."""
        key = parse_identifier(product_id)
        async with self._session_scope() as session:
            product = await session.get(Product, key)
            if product is None:
                return None
            for name, value in fields.items():
                setattr(product, name, value)
            await session.flush()
            return product

    async def delete_by_id(self, product_id: Any) -> Optional[Product]:
        """Delete the matching record and return its pre-deletion state."""
        key = parse_identifier(product_id)
        async with self._session_scope() as session:
            product = await session.get(Product, key)
            if product is None:
                return None
            await session.delete(product)
            await session.flush()
            return product

    async def delete_all(self) -> int:
        async with self._session_scope() as session:
            result = await session.execute(delete(Product))
            return result.rowcount or 0
