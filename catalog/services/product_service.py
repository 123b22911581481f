"""
Catalog API - Product Service (Business Logic Orchestrator)
===========================================================

What:  Reads (filter, sort, paginate, search) and writes (create, partial
       update, delete) for products.
How:   Validates payloads before any write, calls the ProductRepository,
       and funnels every failure through the error normalizer.
Who:   Called by the GraphQL resolvers (after the authorization gate for
       mutations) and by the seed script.

Orchestration Flow (writes):
    ┌──────────┐    ┌─────────────┐    ┌──────────────┐    ┌─────────────┐
    │ Resolver │───▶│  Validate   │───▶│  Repository  │───▶│  Normalize  │
    │          │    │  (rules)    │    │  (storage)   │    │  (on error) │
    └──────────┘    └─────────────┘    └──────────────┘    └─────────────┘

ProductService is stateless: it holds the repository handle and a logger,
nothing per request, so one instance is shared by all requests.
"""

import logging
from typing import Any, List, Optional

from catalog.exceptions import InvalidInputError, NotFoundError
from catalog.models.product import Product
from catalog.repositories.product_repository import ProductRepository
from catalog.schemas.product import ProductCreate, ProductFilter, ProductUpdate, SortOrder
from catalog.services.error_normalizer import normalized_errors
from catalog.services.validation import clean_product_fields, validate_product_fields

DEFAULT_LIMIT = 50
DEFAULT_OFFSET = 0

_PRICE_ORDER = {
    SortOrder.price_asc: "asc",
    SortOrder.price_desc: "desc",
}


class ProductService:
    """
    Business logic layer for product operations.

    Error Handling Strategy:
        Every public method runs inside normalized_errors(), so callers only
        ever see catalog taxonomy errors, or the original exception when
        the failure is not one the taxonomy knows about.
    """

    def __init__(
        self,
        repository: Optional[ProductRepository] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._repository = repository or ProductRepository()
        self._logger = logger or logging.getLogger(__name__)

    async def list(self, filters: Optional[ProductFilter] = None) -> List[Product]:
        """
        List products with optional stock filter, price ordering and pagination.

        Args:
            filters: min_stock, sort_by, limit (default 50), offset (default 0)

        Returns:
            Ordered list of products; empty when nothing matches

        Raises:
            InvalidInputError: negative min_stock, limit or offset
        """
        filters = filters or ProductFilter()
        with normalized_errors("list", self._logger):
            limit = DEFAULT_LIMIT if filters.limit is None else filters.limit
            offset = DEFAULT_OFFSET if filters.offset is None else filters.offset
            for field, value in (("limit", limit), ("offset", offset), ("minStock", filters.min_stock)):
                if value is not None and value < 0:
                    raise InvalidInputError(field, f"'{field}' cannot be negative")

            return await self._repository.find(
                min_stock=filters.min_stock,
                price_order=_PRICE_ORDER.get(filters.sort_by),
                limit=limit,
                offset=offset,
            )

    async def get_by_id(self, product_id: Any) -> Product:
        """
        Raises:
            NotFoundError: no product has this id
            InvalidIdentifierError: the id is not in the storage format
        """
        with normalized_errors("get_by_id", self._logger):
            product = await self._repository.find_by_id(product_id)
            if product is None:
                raise NotFoundError(resource="product", resource_id=str(product_id))
            return product

    async def search_by_name(self, term: Optional[str] = None) -> List[Product]:
        """Case-insensitive substring search; an empty term lists everything."""
        if not term:
            return await self.list(ProductFilter())
        with normalized_errors("search_by_name", self._logger):
            return await self._repository.find_by_name(term)

    async def create(self, payload: ProductCreate) -> Product:
        """
        Validate the full payload and insert a new product.

        Raises:
            InvalidInputError: a business rule failed (no storage call made)
            DuplicateKeyError: another product already has this name
        """
        with normalized_errors("create", self._logger):
            fields = payload.fields()
            validate_product_fields(fields)
            product = await self._repository.insert(clean_product_fields(fields))
            self._logger.info("Product created: %s (%s)", product.id, product.name)
            return product

    async def update(self, product_id: Any, changes: ProductUpdate) -> Product:
        """
        Apply a partial update; only fields present in `changes` are touched.

        Raises:
            InvalidInputError: a present field failed validation (no storage call made)
            NotFoundError: no product has this id
            InvalidIdentifierError: the id is not in the storage format
            DuplicateKeyError: the new name belongs to another product
        """
        with normalized_errors("update", self._logger):
            fields = changes.fields()
            validate_product_fields(fields)
            if fields:
                product = await self._repository.update_by_id(product_id, clean_product_fields(fields))
            else:
                product = await self._repository.find_by_id(product_id)
            if product is None:
                raise NotFoundError(resource="product", resource_id=str(product_id))
            self._logger.info("Product updated: %s (fields=%s)", product.id, sorted(fields))
            return product

    async def delete(self, product_id: Any) -> Product:
        """
        Delete a product and return its last state.

        Raises:
            NotFoundError: no product has this id
            InvalidIdentifierError: the id is not in the storage format
        """
        with normalized_errors("delete", self._logger):
            product = await self._repository.delete_by_id(product_id)
            if product is None:
                raise NotFoundError(resource="product", resource_id=str(product_id))
            self._logger.info("Product deleted: %s (%s)", product.id, product.name)
            return product


# ── Singleton Instance ────────────────────────────────────────────────────
product_service = ProductService()
