"""
Catalog API - GraphQL Schema Assembly
=====================================

What:  Builds the strawberry schema and the FastAPI router serving it.
Who:   catalog.main mounts `create_graphql_router()` at /graphql; tests
       execute operations directly against `schema`.
"""

from strawberry.fastapi import GraphQLRouter

from catalog.config import settings
from catalog.graphql.context import get_context
from catalog.graphql.errors import CatalogSchema, ErrorFormattingExtension
from catalog.graphql.resolvers import Mutation, Query

schema = CatalogSchema(
    query=Query,
    mutation=Mutation,
    extensions=[ErrorFormattingExtension],
)


def create_graphql_router() -> GraphQLRouter:
    """GraphiQL is served on GET /graphql only outside production."""
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphiql_active else None,
    )
