"""
Catalog API - GraphQL Resolvers (Query / Mutation dispatch)
===========================================================

What:  Maps each named operation to the authorization gate (mutations only)
       and then to the ProductService.
How:   Resolvers only reshape arguments; no business rule lives here.
       updateProduct splits `id` from the remaining arguments and drops the
       ones left UNSET, so the service sees exactly the supplied fields.

Operation Inventory:
    Query     productsList(minStock, sortBy, limit, offset)   public
    Query     productById(id)                                 public
    Query     searchByName(name)                              public
    Mutation  addProduct(name, description, price, stock)     authenticated
    Mutation  updateProduct(id, ...fields)                    authenticated
    Mutation  deleteProduct(id)                               ADMIN
"""

from typing import Any, Dict, List, Optional, Tuple

import strawberry

from catalog.auth import require_admin, require_authenticated
from catalog.graphql.context import CatalogContext
from catalog.graphql.types import ProductType, SortBy
from catalog.schemas.product import ProductCreate, ProductFilter, ProductUpdate

Info = strawberry.Info[CatalogContext, None]


def split_update_arguments(product_id: strawberry.ID, **arguments: Any) -> Tuple[str, ProductUpdate]:
    """Return (id, ProductUpdate) holding only the arguments that were supplied."""
    supplied: Dict[str, Any] = {
        name: value for name, value in arguments.items() if value is not strawberry.UNSET
    }
    return str(product_id), ProductUpdate(**supplied)


@strawberry.type
class Query:
    @strawberry.field(description="List products with optional stock filter, price sort and pagination")
    async def products_list(
        self,
        info: Info,
        min_stock: Optional[int] = None,
        sort_by: Optional[SortBy] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[ProductType]:
        products = await info.context.service.list(
            ProductFilter(min_stock=min_stock, sort_by=sort_by, limit=limit, offset=offset)
        )
        return [ProductType.from_model(product) for product in products]

    @strawberry.field(description="Fetch a single product by id")
    async def product_by_id(self, info: Info, id: strawberry.ID) -> ProductType:
        product = await info.context.service.get_by_id(id)
        return ProductType.from_model(product)

    @strawberry.field(description="Case-insensitive search on product names")
    async def search_by_name(self, info: Info, name: Optional[str] = None) -> List[ProductType]:
        products = await info.context.service.search_by_name(name)
        return [ProductType.from_model(product) for product in products]


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Create a product (authentication required)")
    async def add_product(
        self,
        info: Info,
        name: str,
        price: float,
        stock: int,
        description: Optional[str] = None,
    ) -> ProductType:
        require_authenticated(info.context.principal, "addProduct")
        product = await info.context.service.create(
            ProductCreate(name=name, description=description, price=price, stock=stock)
        )
        return ProductType.from_model(product)

    @strawberry.mutation(description="Partially update a product (authentication required)")
    async def update_product(
        self,
        info: Info,
        id: strawberry.ID,
        name: Optional[str] = strawberry.UNSET,
        description: Optional[str] = strawberry.UNSET,
        price: Optional[float] = strawberry.UNSET,
        stock: Optional[int] = strawberry.UNSET,
    ) -> ProductType:
        require_authenticated(info.context.principal, "updateProduct")
        product_id, changes = split_update_arguments(
            id, name=name, description=description, price=price, stock=stock
        )
        product = await info.context.service.update(product_id, changes)
        return ProductType.from_model(product)

    @strawberry.mutation(description="Delete a product (ADMIN role required)")
    async def delete_product(self, info: Info, id: strawberry.ID) -> ProductType:
        require_admin(info.context.principal, "deleteProduct")
        product = await info.context.service.delete(str(id))
        return ProductType.from_model(product)
