"""
GraphQL request context.

One CatalogContext is built for every inbound operation. It carries the
optional authenticated principal and the shared ProductService handle;
nothing in it outlives the request.
"""

from typing import Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from catalog.auth import Principal, principal_from_authorization
from catalog.services.product_service import ProductService, product_service


class CatalogContext(BaseContext):
    def __init__(
        self,
        principal: Optional[Principal] = None,
        service: Optional[ProductService] = None,
    ):
        super().__init__()
        self.principal = principal
        self.service = service or product_service

    @property
    def is_authenticated(self) -> bool:
        return self.principal is not None


async def get_context(request: Request) -> CatalogContext:
    """Context getter for GraphQLRouter: principal from the Authorization header."""
    principal = principal_from_authorization(request.headers.get("Authorization"))
    return CatalogContext(principal=principal, service=product_service)
