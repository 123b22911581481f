"""
Catalog API - HTTP Routes Package
=================================

Route Inventory:
    - health.py:  GET /health               (service health check)
    - /graphql is mounted from catalog.graphql.schema, not from here.
"""
