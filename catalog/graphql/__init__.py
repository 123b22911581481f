"""
Catalog API - GraphQL Layer
===========================

What:  Strawberry schema exposing the product queries and mutations.

Module Inventory:
    - context.py:   CatalogContext (principal + service) built per request
    - types.py:     Product object type and SortBy enum
    - resolvers.py: Query / Mutation dispatch to the auth gate and service
    - errors.py:    error logging and `extensions.code` formatting
    - schema.py:    schema assembly and the FastAPI GraphQLRouter
"""
